"""Pydantic schemas for user API endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....domain.models import User


class UserCreateRequest(BaseModel):
    """Request schema for user creation."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    mobile: str = ""
    email: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    def to_user(self) -> User:
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            mobile=self.mobile,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserResponse(BaseModel):
    """Response schema for user data."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    mobile: str = ""
    email: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            mobile=user.mobile,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
