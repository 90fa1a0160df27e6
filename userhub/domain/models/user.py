"""User domain model with its normalisation and validation rules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..errors import InvalidEmailError


def validate_email(email: str) -> None:
    """Accept any address that splits into exactly two parts around ``@``."""
    parts = email.split("@")
    if len(parts) != 2:
        raise InvalidEmailError("invalid email address provided")


def _text_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field {key} must be a string, got {type(value).__name__}")
    return value


@dataclass(slots=True)
class User:
    """
    User entity holding a single person record.

    Attributes:
        first_name: Given name
        last_name: Family name
        mobile: Mobile phone number
        email: Email address, the natural key used for lookups
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    first_name: str = ""
    last_name: str = ""
    mobile: str = ""
    email: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def set_defaults(self) -> None:
        now = datetime.now(timezone.utc)
        if self.created_at is None:
            self.created_at = now

        if self.updated_at is None:
            self.updated_at = now

    def sanitize(self) -> None:
        """Trim surrounding whitespace from the textual fields."""
        self.first_name = self.first_name.strip()
        self.last_name = self.last_name.strip()
        self.email = self.email.strip()
        self.mobile = self.mobile.strip()

    def validate(self) -> None:
        """Validate the fields of the user. An empty email is not checked."""
        if not self.email:
            return
        validate_email(self.email)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "mobile": self.mobile,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        return {key: value for key, value in payload.items() if value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        created_at = data.get("createdAt")
        updated_at = data.get("updatedAt")
        return cls(
            first_name=_text_field(data, "firstName"),
            last_name=_text_field(data, "lastName"),
            mobile=_text_field(data, "mobile"),
            email=_text_field(data, "email"),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    def __repr__(self) -> str:
        return f"<User email={self.email} name={self.first_name} {self.last_name}>"
