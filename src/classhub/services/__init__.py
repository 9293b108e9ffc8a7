# src/classhub/services/__init__.py
"""Business logic services for the ClassHub application."""

from .roster import ClassRosterCounter
from .signup_service import SignupAdmissionController

__all__ = [
    "ClassRosterCounter",
    "SignupAdmissionController",
]
