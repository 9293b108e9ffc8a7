# src/classhub/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .activities import router as activities_router
from .classes import router as classes_router
from .signups import router as signups_router
from .users import router as users_router

__all__ = [
    "activities_router",
    "classes_router",
    "signups_router",
    "users_router",
]
