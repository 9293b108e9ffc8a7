"""Class-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class SchoolClassResponse(BaseModel):
    """Schema for class information returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    class_id: str
    class_name: str
    grade: str | None
    major: str | None
    counselor_id: str | None
    member_count: int
