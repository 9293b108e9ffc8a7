"""Read helpers for classes."""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from classhub.models import SchoolClass


def list_classes(db: Session) -> Sequence[SchoolClass]:
    """Return all classes ordered by identifier."""
    return db.scalars(select(SchoolClass).order_by(SchoolClass.class_id)).all()