"""Service-level helpers for organizing activities."""
from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from classhub.core.exceptions import EntityReferenceError
from classhub.db.session import atomic
from classhub.db.time import utcnow
from classhub.models import Activity, User
from classhub.schemas.activity import ActivityCreate

logger = logging.getLogger(__name__)


def live_activities() -> Select[tuple[Activity]]:
    """Return a SELECT over activities that carry no tombstone."""
    return select(Activity).where(Activity.deleted_at.is_(None))


def get_activity(db: Session, activity_id: int, *, for_update: bool = False) -> Activity | None:
    """Return a live activity by id, optionally locking its row.

    Args:
        db: Database session.
        activity_id: Activity identifier.
        for_update: Take a row lock (``SELECT ... FOR UPDATE``) that is held
            until the surrounding transaction ends.
    """
    stmt = live_activities().where(Activity.activity_id == activity_id)
    if for_update:
        stmt = stmt.with_for_update().execution_options(populate_existing=True)
    return db.scalars(stmt).first()


def list_activities(db: Session) -> Sequence[Activity]:
    """Return every live activity, oldest first."""
    return db.scalars(live_activities().order_by(Activity.activity_id)).all()


def create_activity(db: Session, payload: ActivityCreate) -> Activity:
    """Persist a new activity.

    Raises:
        EntityReferenceError: If ``leader_id`` names no user.
    """
    with atomic(db):
        if payload.leader_id and db.get(User, payload.leader_id) is None:
            raise EntityReferenceError("leader does not exist")

        activity = Activity(**payload.model_dump())
        db.add(activity)
        db.flush()

    db.refresh(activity)
    logger.info(
        "Created activity %s %r (status=%s, max_people=%s)",
        activity.activity_id,
        activity.name,
        activity.status,
        activity.max_people,
    )
    return activity


def change_activity_status(db: Session, activity_id: int, new_status: str) -> Activity:
    """Move a live activity to ``new_status``.

    Raises:
        EntityReferenceError: If the activity is missing or tombstoned.
    """
    with atomic(db):
        activity = get_activity(db, activity_id, for_update=True)
        if activity is None:
            raise EntityReferenceError("activity does not exist")
        old_status = activity.status
        activity.status = new_status

    db.refresh(activity)
    logger.info("Activity %s status %s -> %s", activity_id, old_status, new_status)
    return activity


def delete_activity(db: Session, activity_id: int) -> None:
    """Tombstone an activity; its row and signups stay in storage.

    Raises:
        EntityReferenceError: If the activity is missing or already tombstoned.
    """
    with atomic(db):
        activity = get_activity(db, activity_id, for_update=True)
        if activity is None:
            raise EntityReferenceError("activity does not exist")
        activity.deleted_at = utcnow()

    logger.info("Soft-deleted activity %s", activity_id)
