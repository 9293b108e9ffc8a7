# src/classhub/models/__init__.py
"""SQLAlchemy models for the ClassHub application."""

from .activity import ACTIVITY_STATUS_ACTIVE, Activity
from .school_class import SchoolClass
from .signup import SIGNUP_STATUS_SIGNED, Signup
from .user import USER_STATUS_ACTIVE, USER_STATUS_DISABLED, User

__all__ = [
    "Activity", "ACTIVITY_STATUS_ACTIVE",
    "SchoolClass",
    "Signup", "SIGNUP_STATUS_SIGNED",
    "User", "USER_STATUS_ACTIVE", "USER_STATUS_DISABLED",
]
