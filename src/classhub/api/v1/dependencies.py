"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from classhub.db.session import get_db
from classhub.services.signup_service import SignupAdmissionController

_admission_controller = SignupAdmissionController()


def get_admission_controller() -> SignupAdmissionController:
    """Return the shared signup admission controller."""
    return _admission_controller


# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
AdmissionDep = Annotated[SignupAdmissionController, Depends(get_admission_controller)]
