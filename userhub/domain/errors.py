"""Exception taxonomy shared by the domain, the service and its collaborators."""

from __future__ import annotations

from typing import Optional


class InvalidEmailError(ValueError):
    """Raised when an email address does not split into exactly two parts."""


class UserValidationError(Exception):
    """Raised by ``create_user`` when the entity fails validation."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Validate: {cause}")
        self.cause = cause


class StoreError(Exception):
    """Base class for failures reported by a durable user store."""


class UserNotFoundError(StoreError):
    def __init__(self, email: str) -> None:
        super().__init__(f"user with email {email!r} not found")
        self.email = email


class DuplicateUserError(StoreError):
    def __init__(self, email: str) -> None:
        super().__init__(f"user with email {email!r} already exists")
        self.email = email


class StoreOperationError(Exception):
    """Wraps a store failure with the stage it happened in."""

    def __init__(self, stage: str, cause: Exception) -> None:
        super().__init__(f"{stage}: {cause}")
        self.stage = stage
        self.cause = cause


class CacheError(Exception):
    """Base class for cache store failures."""


class CacheMiss(CacheError):
    """The cache holds no entry for the requested key."""

    def __init__(self, key: Optional[str] = None) -> None:
        super().__init__(f"cache miss for {key!r}" if key else "cache miss")
        self.key = key


class ServiceInitError(Exception):
    """Raised when a backing collaborator of the service cannot be built."""
