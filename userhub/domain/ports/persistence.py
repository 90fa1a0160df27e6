from __future__ import annotations

from typing import Protocol

from ..models import User


class UserStore(Protocol):
    """Durable store of record for users."""

    async def create(self, user: User) -> None:
        ...

    async def read_by_email(self, email: str) -> User:
        ...


class UserCacheStore(Protocol):
    """Volatile cache in front of the user store.

    ``read_user_by_email`` must raise ``CacheMiss`` when no entry exists so
    callers can tell a miss apart from any other ``CacheError``.
    """

    async def read_user_by_email(self, email: str) -> User:
        ...

    async def set_user(self, email: str, user: User) -> None:
        ...
