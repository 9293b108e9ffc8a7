"""Error taxonomy shared by the service layer.

Services raise these; routers translate them into HTTP responses using
``status_code``. Nothing here retries.
"""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EntityReferenceError(ServiceError):
    """A referenced entity (activity, user, class) does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class StateError(ServiceError):
    """The entity exists but is in the wrong lifecycle state for the operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_409_CONFLICT)


class CapacityError(ServiceError):
    """A resource limit has been reached."""

    def __init__(self, limit: int, current: int, message: str = "activity is full") -> None:
        super().__init__(
            f"{message} (max_people={limit}, signed_up={current})",
            status.HTTP_409_CONFLICT,
        )
        self.limit = limit
        self.current = current


class ConflictError(ServiceError):
    """A uniqueness rule was violated."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_409_CONFLICT)


class PersistenceError(ServiceError):
    """The underlying store failed in a way not otherwise classified."""

    def __init__(self, message: str = "database operation failed") -> None:
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
