from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional

import pytest

from userhub.application.services.user_service import UsersService
from userhub.domain.errors import CacheMiss, UserNotFoundError
from userhub.domain.models import User


class FakeUserStore:
    """In-memory user store recording every call."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.created: List[User] = []
        self.reads: List[str] = []
        self.error: Optional[Exception] = None

    async def create(self, user: User) -> None:
        if self.error is not None:
            raise self.error
        self.created.append(user)
        self.users[user.email] = replace(user)

    async def read_by_email(self, email: str) -> User:
        self.reads.append(email)
        if self.error is not None:
            raise self.error
        try:
            return self.users[email]
        except KeyError:
            raise UserNotFoundError(email) from None


class FakeUserCacheStore:
    """In-memory cache that can be told to fail reads or writes."""

    def __init__(self) -> None:
        self.entries: Dict[str, User] = {}
        self.read_error: Optional[Exception] = None
        self.write_error: Optional[Exception] = None
        self.reads: List[str] = []

    async def read_user_by_email(self, email: str) -> User:
        self.reads.append(email)
        if self.read_error is not None:
            raise self.read_error
        try:
            return self.entries[email]
        except KeyError:
            raise CacheMiss(email) from None

    async def set_user(self, email: str, user: User) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.entries[email] = user


@pytest.fixture()
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture()
def cache() -> FakeUserCacheStore:
    return FakeUserCacheStore()


@pytest.fixture()
def users_logger() -> logging.Logger:
    return logging.getLogger("tests.users")


@pytest.fixture()
def service(
    users_logger: logging.Logger,
    store: FakeUserStore,
    cache: FakeUserCacheStore,
) -> UsersService:
    return UsersService(logger=users_logger, store=store, cache=cache)
