"""Signup admission and withdrawal.

A signup is admitted only after a fixed sequence of checks, evaluated in the
same transaction as the insert:

1. the activity exists (tombstoned activities do not count);
2. its status is exactly ``"active"``;
3. it has not ended yet;
4. it still has room: live signups < ``max_people``.

The activity row is locked before the signup count is read, so two
admissions racing for the last slot are serialized and the second one sees
the first one's row. The ``(activity_id, user_id)`` unique constraint backs
up the duplicate pre-check against concurrent double submits.

Withdrawal is unconditional and idempotent.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from classhub.core.exceptions import (
    CapacityError,
    ConflictError,
    EntityReferenceError,
    ServiceError,
    StateError,
)
from classhub.db.session import atomic
from classhub.db.time import as_utc, utcnow
from classhub.models import ACTIVITY_STATUS_ACTIVE, Activity, Signup, User
from classhub.services.activity_service import get_activity

__all__ = ["SignupAdmissionController", "count_signups", "list_signups"]

logger = logging.getLogger(__name__)


def count_signups(db: Session, activity_id: int) -> int:
    """Return the number of live signup rows for ``activity_id``."""
    stmt = select(func.count()).select_from(Signup).where(Signup.activity_id == activity_id)
    return int(db.scalar(stmt) or 0)


def list_signups(
    db: Session,
    *,
    activity_id: int | None = None,
    user_id: str | None = None,
) -> Sequence[Signup]:
    """Return signups, optionally narrowed to one activity and/or one user."""
    stmt = select(Signup)
    if activity_id is not None:
        stmt = stmt.where(Signup.activity_id == activity_id)
    if user_id is not None:
        stmt = stmt.where(Signup.user_id == user_id)
    return db.scalars(stmt.order_by(Signup.id)).all()


class SignupAdmissionController:
    """Admit users into activities and let them withdraw.

    Args:
        clock: Returns the current time; injected so tests can move it.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock

    def admit(self, db: Session, activity_id: int, user_id: str) -> Signup:
        """Check every admission rule and insert the signup, atomically.

        Raises:
            EntityReferenceError: The activity (or user) does not exist.
            StateError: The activity is not active, or has already ended.
            ConflictError: The user already holds a signup for this activity.
            CapacityError: The activity is full.
        """
        try:
            with atomic(db):
                activity = self._load_activity(db, activity_id)
                self._check_status(activity)
                self._check_not_ended(activity)
                self._check_not_signed_up(db, activity_id, user_id)
                self._check_capacity(db, activity)
                if db.get(User, user_id) is None:
                    raise EntityReferenceError("user does not exist")

                signup = Signup(activity_id=activity_id, user_id=user_id)
                db.add(signup)
                db.flush()
        except ServiceError as exc:
            logger.warning(
                "Signup rejected: activity=%s user=%s %s: %s",
                activity_id,
                user_id,
                type(exc).__name__,
                exc.message,
            )
            raise

        db.refresh(signup)
        logger.info("Signup admitted: activity=%s user=%s", activity_id, user_id)
        return signup

    def withdraw(self, db: Session, activity_id: int, user_id: str) -> int:
        """Remove the user's signup, whatever state the activity is in.

        Returns:
            The number of rows removed (0 when there was nothing to remove).
        """
        with atomic(db):
            result = db.execute(
                delete(Signup).where(
                    Signup.activity_id == activity_id,
                    Signup.user_id == user_id,
                )
            )
        removed = result.rowcount or 0
        logger.info("Signup withdrawn: activity=%s user=%s removed=%s", activity_id, user_id, removed)
        return removed

    @staticmethod
    def _load_activity(db: Session, activity_id: int) -> Activity:
        activity = get_activity(db, activity_id, for_update=True)
        if activity is None:
            raise EntityReferenceError("activity does not exist")
        return activity

    @staticmethod
    def _check_status(activity: Activity) -> None:
        if activity.status != ACTIVITY_STATUS_ACTIVE:
            raise StateError("activity is not open for signup")

    def _check_not_ended(self, activity: Activity) -> None:
        if as_utc(self._clock()) > as_utc(activity.end_time):
            raise StateError("activity has already ended")

    @staticmethod
    def _check_not_signed_up(db: Session, activity_id: int, user_id: str) -> None:
        existing = db.scalars(
            select(Signup.id).where(
                Signup.activity_id == activity_id,
                Signup.user_id == user_id,
            )
        ).first()
        if existing is not None:
            raise ConflictError("user already signed up for this activity")

    @staticmethod
    def _check_capacity(db: Session, activity: Activity) -> None:
        current = count_signups(db, activity.activity_id)
        if current >= activity.max_people:
            raise CapacityError(limit=activity.max_people, current=current)
