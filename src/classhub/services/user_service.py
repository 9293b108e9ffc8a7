"""CRUD-style helpers for managing users."""
from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from classhub.core import security
from classhub.core.exceptions import ConflictError, EntityReferenceError
from classhub.core.settings import settings
from classhub.db.session import atomic
from classhub.models import SchoolClass, Signup, User
from classhub.schemas.user import UserCreate
from classhub.services.roster import ClassRosterCounter

__all__ = [
    "get_user",
    "get_users",
    "get_user_name",
    "register_user",
    "delete_user",
]

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_users(db: Session, skip: int = 0, limit: int = 100) -> Sequence[User]:
    """Return users with simple offset-based pagination."""
    stmt = select(User).order_by(User.create_time, User.user_id).offset(skip).limit(limit)
    return db.scalars(stmt).all()


def get_user_name(db: Session, user_id: str) -> str:
    """Return the display name of ``user_id``.

    Raises:
        EntityReferenceError: If no such user exists.
    """
    user = get_user(db, user_id)
    if user is None:
        raise EntityReferenceError("user does not exist")
    return user.name


def register_user(db: Session, payload: UserCreate) -> User:
    """Create a user and count them in their class, as one transaction.

    Raises:
        ConflictError: If ``user_id`` is already taken.
        EntityReferenceError: If ``class_id`` names no class.
    """
    with atomic(db):
        if get_user(db, payload.user_id) is not None:
            raise ConflictError("user already exists")
        if payload.class_id and db.get(SchoolClass, payload.class_id) is None:
            raise EntityReferenceError(f"class {payload.class_id} does not exist")

        user = User(
            user_id=payload.user_id,
            school_num=payload.school_num or settings.default_school_num,
            name=payload.name,
            password=security.hash_password(payload.password),
            phone=payload.phone,
            email=payload.email,
            role=payload.role,
            class_id=payload.class_id,
        )
        db.add(user)
        db.flush()
        ClassRosterCounter.increment(db, user.class_id)

    db.refresh(user)
    logger.info("Registered user %s (class=%s)", user.user_id, user.class_id)
    return user


def delete_user(db: Session, user_id: str) -> None:
    """Delete a user, their signups, and their place in the class count.

    Raises:
        EntityReferenceError: If no such user exists.
    """
    with atomic(db):
        user = get_user(db, user_id)
        if user is None:
            raise EntityReferenceError("user does not exist")
        class_id = user.class_id

        db.execute(delete(Signup).where(Signup.user_id == user_id))
        db.delete(user)
        db.flush()
        ClassRosterCounter.decrement(db, class_id)

    logger.info("Deleted user %s (class=%s)", user_id, class_id)
