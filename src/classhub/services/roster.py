"""Maintenance of the denormalized per-class member count."""

from __future__ import annotations

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from classhub.core.exceptions import EntityReferenceError
from classhub.models import SchoolClass

logger = logging.getLogger(__name__)


class ClassRosterCounter:
    """Adjust ``SchoolClass.member_count`` as users join and leave a class.

    Every adjustment is a single ``UPDATE ... SET member_count = member_count + n``
    issued on the caller's session, so it commits or rolls back together with
    the user mutation that triggered it. The class is located by its
    identifier (``class_id``), never by its display name.
    """

    @staticmethod
    def increment(db: Session, class_id: str | None) -> None:
        """Count one more member in ``class_id``; no-op for an empty reference."""
        ClassRosterCounter._adjust(db, class_id, 1)

    @staticmethod
    def decrement(db: Session, class_id: str | None) -> None:
        """Count one member fewer in ``class_id``; no-op for an empty reference."""
        ClassRosterCounter._adjust(db, class_id, -1)

    @staticmethod
    def _adjust(db: Session, class_id: str | None, delta: int) -> None:
        if not class_id:
            return

        result = db.execute(
            update(SchoolClass)
            .where(SchoolClass.class_id == class_id)
            .values(member_count=SchoolClass.member_count + delta)
            .execution_options(synchronize_session="evaluate")
        )
        if result.rowcount == 0:
            raise EntityReferenceError(f"class {class_id} does not exist")
        logger.debug("member_count of class %s adjusted by %+d", class_id, delta)
