"""User-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from classhub.core.security import MAX_PASSWORD_BYTES


class UserCreate(BaseModel):
    """Registration payload."""

    user_id: str = Field(..., min_length=1, max_length=26)
    name: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1, max_length=50)
    school_num: str | None = Field(default=None, max_length=20)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=50)
    role: str | None = Field(default=None, max_length=20)
    class_id: str | None = Field(default=None, max_length=20)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

    @field_validator("class_id", "school_num", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserResponse(BaseModel):
    """Public view of a user; the password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    school_num: str | None
    name: str
    phone: str | None
    email: str | None
    status: int
    role: str | None
    class_id: str | None
    create_time: datetime


class UserNameResponse(BaseModel):
    """Display name lookup result."""

    user_id: str
    name: str
