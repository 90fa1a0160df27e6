"""
Redis-backed cache for user records.

Entries are JSON documents stored under ``user:<email>``.
"""

import json
import logging
from typing import Optional

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from ...domain.errors import CacheError, CacheMiss
from ...domain.models import User
from ...domain.ports.persistence import UserCacheStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "user:"


class RedisUserCacheStore(UserCacheStore):
    """Redis implementation of the user cache store."""

    def __init__(self, pool: ConnectionPool, *, ttl_seconds: Optional[int] = None) -> None:
        if pool is None:
            raise ValueError("a redis connection pool is required")
        self._redis = Redis(connection_pool=pool)
        self._ttl_seconds = ttl_seconds or None

    @staticmethod
    def _key(email: str) -> str:
        return f"{KEY_PREFIX}{email}"

    async def read_user_by_email(self, email: str) -> User:
        key = self._key(email)
        try:
            raw = await self._redis.get(key)
        except RedisError as exc:
            raise CacheError(f"redis GET {key} failed: {exc}") from exc

        if raw is None:
            raise CacheMiss(key)

        try:
            return User.from_dict(json.loads(raw))
        except (AttributeError, TypeError, ValueError) as exc:
            raise CacheError(f"corrupt cache entry under {key}: {exc}") from exc

    async def set_user(self, email: str, user: User) -> None:
        key = self._key(email)
        payload = json.dumps(user.to_dict(), ensure_ascii=False)
        try:
            await self._redis.set(key, payload, ex=self._ttl_seconds)
        except RedisError as exc:
            raise CacheError(f"redis SET {key} failed: {exc}") from exc
        logger.debug("Cached user under %s", key)
