"""Signup-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Identifies a signup by activity and user; used to join and to withdraw."""

    activity_id: int = Field(..., ge=1)
    user_id: str = Field(..., min_length=1, max_length=26)


class SignupResponse(BaseModel):
    """Schema for signup rows returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    activity_id: int
    user_id: str
    status: str
    signup_time: datetime
