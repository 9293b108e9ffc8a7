# src/classhub/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    activities_router,
    classes_router,
    signups_router,
    users_router,
)

__all__ = [
    "activities_router",
    "classes_router",
    "signups_router",
    "users_router",
]
