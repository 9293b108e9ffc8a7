"""Class listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from classhub.api.v1.dependencies import SessionDep
from classhub.models import SchoolClass
from classhub.schemas.school_class import SchoolClassResponse
from classhub.services.class_service import list_classes as list_all_classes

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("/", response_model=list[SchoolClassResponse])
def list_classes(db: SessionDep) -> list[SchoolClass]:
    """List all classes with their member counts."""
    return list(list_all_classes(db))
