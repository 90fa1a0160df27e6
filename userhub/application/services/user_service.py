from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from redis.asyncio import ConnectionPool

from ...domain.errors import (
    CacheMiss,
    InvalidEmailError,
    ServiceInitError,
    StoreOperationError,
    UserValidationError,
)
from ...domain.models import User, validate_email
from ...domain.ports.persistence import UserCacheStore, UserStore
from ...infrastructure.cache.redis_cache import RedisUserCacheStore
from ...infrastructure.persistence.sqlite import SQLiteUserStore


class UsersService:
    """Creates users and serves lookups through a read-through cache."""

    def __init__(
        self,
        logger: logging.Logger,
        store: UserStore,
        cache: UserCacheStore,
    ) -> None:
        self._logger = logger
        self._store = store
        self._cache = cache

    async def create_user(self, user: User) -> User:
        """
        Persist a new user.

        Defaults and trimming are applied to ``user`` in place and the same
        instance is returned. The cache is not touched; it is filled on the
        first read instead.

        Raises:
            UserValidationError: If the entity is invalid
            StoreOperationError: If the store rejects the record
        """
        user.set_defaults()
        user.sanitize()

        try:
            user.validate()
        except InvalidEmailError as exc:
            raise UserValidationError(exc) from exc

        try:
            await self._store.create(user)
        except Exception as exc:
            raise StoreOperationError("store.Create", exc) from exc

        return user

    async def read_by_email(self, email: str) -> User:
        """
        Return the user with the given email, preferring the cache.

        Cache failures are logged and otherwise ignored; only store failures
        are raised.

        Raises:
            InvalidEmailError: If ``email`` is malformed
            StoreOperationError: If the store lookup fails
        """
        email = email.strip()
        validate_email(email)

        try:
            return await self._cache.read_user_by_email(email)
        except CacheMiss:
            pass
        except Exception as exc:
            # read-through: fall back to the store
            self._logger.error("cache read for %s failed: %s", email, exc)

        try:
            user = await self._store.read_by_email(email)
        except Exception as exc:
            raise StoreOperationError("store.ReadByEmail", exc) from exc

        try:
            await self._cache.set_user(email, user)
        except Exception as exc:
            self._logger.error("cache write for %s failed: %s", email, exc)

        return user


def new_service(
    logger: logging.Logger,
    database_path: Path,
    redis_pool: ConnectionPool,
    *,
    cache_ttl_seconds: Optional[int] = None,
) -> UsersService:
    """Build the store and cache from their handles and compose the service."""
    try:
        store = SQLiteUserStore(database_path)
    except Exception as exc:
        raise ServiceInitError(f"unable to initialise user store: {exc}") from exc

    try:
        cache = RedisUserCacheStore(redis_pool, ttl_seconds=cache_ttl_seconds)
    except Exception as exc:
        raise ServiceInitError(f"unable to initialise user cache: {exc}") from exc

    return UsersService(logger=logger, store=store, cache=cache)
