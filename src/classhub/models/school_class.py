"""SQLAlchemy model for school classes."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from classhub.db.session import Base


class SchoolClass(Base):
    """A class (cohort) that users belong to.

    ``member_count`` is denormalized and maintained incrementally by the
    roster counter as users join and leave; it is never recomputed.
    """

    __tablename__ = "classes"
    __table_args__ = (
        CheckConstraint("member_count >= 0", name="ck_classes_member_count"),
    )

    class_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    class_name: Mapped[str] = mapped_column(String(50), nullable=False)
    grade: Mapped[str | None] = mapped_column(String(4), nullable=True)
    major: Mapped[str | None] = mapped_column(String(50), nullable=True)
    counselor_id: Mapped[str | None] = mapped_column(String(20), nullable=True)
    member_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
