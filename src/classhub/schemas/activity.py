"""Activity-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from classhub.db.time import as_utc
from classhub.models.activity import ACTIVITY_STATUS_ACTIVE


class ActivityCreate(BaseModel):
    """Schema for creating a new activity."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    location: str | None = Field(default=None, max_length=100)
    start_time: datetime
    end_time: datetime
    signup_start: datetime | None = None
    signup_end: datetime | None = None
    leader_id: str | None = Field(default=None, max_length=26)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    status: str = Field(default=ACTIVITY_STATUS_ACTIVE, min_length=1, max_length=20)
    max_people: int = Field(default=0, ge=0)

    @field_validator("start_time", "end_time", "signup_start", "signup_end")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        # Naive timestamps are taken to be UTC.
        return as_utc(value) if value is not None else None

    @model_validator(mode="after")
    def _check_windows(self) -> ActivityCreate:
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        if (
            self.signup_start is not None
            and self.signup_end is not None
            and self.signup_end < self.signup_start
        ):
            raise ValueError("signup_end must not be before signup_start")
        return self


class ActivityStatusUpdate(BaseModel):
    """Payload for moving an activity to another lifecycle state."""

    status: str = Field(..., min_length=1, max_length=20)


class ActivityResponse(BaseModel):
    """Schema for activity information returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    activity_id: int
    name: str
    description: str | None
    location: str | None
    start_time: datetime
    end_time: datetime
    signup_start: datetime | None
    signup_end: datetime | None
    leader_id: str | None
    budget: Decimal | None
    status: str
    max_people: int
