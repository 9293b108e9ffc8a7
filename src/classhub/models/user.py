# src/classhub/models/user.py
"""SQLAlchemy model for registered users."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from classhub.db.session import Base
from classhub.db.time import utcnow

# Account states.
USER_STATUS_ACTIVE = 1
USER_STATUS_DISABLED = 0


class User(Base):
    """A registered member, optionally assigned to a class."""

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(26), primary_key=True)
    school_num: Mapped[str | None] = mapped_column(String(20), nullable=True)
    name: Mapped[str] = mapped_column(String(20), nullable=False)
    # bcrypt hash (60 chars), see classhub.core.security.
    password: Mapped[str] = mapped_column(String(128), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[int] = mapped_column(
        Integer, nullable=False, default=USER_STATUS_ACTIVE, server_default=str(USER_STATUS_ACTIVE)
    )
    role: Mapped[str | None] = mapped_column(String(20), nullable=True)
    class_id: Mapped[str | None] = mapped_column(
        String(20),
        ForeignKey("classes.class_id"),
        nullable=True,
        index=True,
    )
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
