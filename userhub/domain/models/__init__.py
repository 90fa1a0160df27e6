"""Domain models for the userhub service."""

from .user import User, validate_email

__all__ = [
    "User",
    "validate_email",
]
