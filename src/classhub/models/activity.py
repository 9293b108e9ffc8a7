"""SQLAlchemy model for campus activities."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from classhub.db.session import Base
from classhub.db.time import utcnow

# Only activities in this state accept signups (exact match).
ACTIVITY_STATUS_ACTIVE = "active"


class Activity(Base):
    """An organized activity with a capacity and a scheduling window.

    Activities are soft-deleted: ``deleted_at`` marks a tombstone and every
    normal read path filters on ``deleted_at IS NULL``.
    """

    __tablename__ = "activities"
    __table_args__ = (
        CheckConstraint("max_people >= 0", name="ck_activities_max_people"),
        Index("ix_activities_deleted_at", "deleted_at"),
    )

    activity_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(100), nullable=True)

    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    signup_start: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    signup_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    budget: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    leader_id: Mapped[str | None] = mapped_column(
        String(26),
        ForeignKey("users.user_id", ondelete="SET NULL"),
        nullable=True,
    )
    # Free-form lifecycle tag, e.g. "draft", "active", "closed".
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ACTIVITY_STATUS_ACTIVE, server_default=ACTIVITY_STATUS_ACTIVE
    )
    max_people: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        """Return True when the activity carries a tombstone."""
        return self.deleted_at is not None
