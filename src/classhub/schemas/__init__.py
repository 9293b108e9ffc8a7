"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .activity import ActivityCreate, ActivityResponse, ActivityStatusUpdate
from .school_class import SchoolClassResponse
from .signup import SignupRequest, SignupResponse
from .user import UserCreate, UserNameResponse, UserResponse

__all__ = [
    "ActivityCreate", "ActivityResponse", "ActivityStatusUpdate",
    "SchoolClassResponse",
    "SignupRequest", "SignupResponse",
    "UserCreate", "UserNameResponse", "UserResponse",
]
