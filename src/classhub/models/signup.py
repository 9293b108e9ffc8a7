# src/classhub/models/signup.py
"""Models capturing user signups for activities."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from classhub.db.session import Base
from classhub.db.time import utcnow

SIGNUP_STATUS_SIGNED = "signed"


class Signup(Base):
    """A user's place in an activity.

    Capacity is never cached; it is the number of live rows per activity.
    """

    __tablename__ = "signups"
    __table_args__ = (
        # One signup per user per activity, even under concurrent attempts.
        UniqueConstraint("activity_id", "user_id", name="uq_signups_activity_user"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    activity_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("activities.activity_id"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=SIGNUP_STATUS_SIGNED, server_default=SIGNUP_STATUS_SIGNED
    )
    signup_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
