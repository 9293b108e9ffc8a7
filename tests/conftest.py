# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# Minimum bcrypt work factor keeps fixture users cheap to create.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from classhub.core.security import hash_password
from classhub.db.session import Base, build_engine
from classhub.db.session import get_db as app_get_session
from classhub.db.time import utcnow
from classhub.main import app as fastapi_app
from classhub.models import Activity, SchoolClass, User

TEST_DB_URL = "sqlite://"

_ACTIVITY_NAME_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    """Session joined to an outer transaction that is rolled back after the test.

    ``commit()``/``rollback()`` inside services only release or roll back a
    SAVEPOINT, so tests can exercise failure paths and keep their fixtures.
    Fixtures must commit what they create for the same reason.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(
        bind=connection,
        join_transaction_mode="create_savepoint",
        autoflush=False,
        expire_on_commit=False,
    )

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_class(db_session: Session) -> Callable[..., SchoolClass]:
    """Return a factory that persists a class."""

    def _make(class_id: str = "C1", class_name: str | None = None, member_count: int = 0) -> SchoolClass:
        school_class = SchoolClass(
            class_id=class_id,
            class_name=class_name or f"Class {class_id}",
            grade="2024",
            major="Computer Science",
            member_count=member_count,
        )
        db_session.add(school_class)
        db_session.commit()
        return school_class

    return _make


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists a user directly, bypassing the roster counter."""

    def _make(user_id: str, class_id: str | None = None, name: str | None = None) -> User:
        user = User(
            user_id=user_id,
            name=name or f"user {user_id}",
            password=hash_password("secret"),
            class_id=class_id,
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture()
def make_activity(db_session: Session) -> Callable[..., Activity]:
    """Return a factory that persists an activity ending one hour from now by default."""

    def _make(
        *,
        status: str = "active",
        max_people: int = 2,
        ends_in: timedelta = timedelta(hours=1),
        activity_id: int | None = None,
    ) -> Activity:
        now = utcnow()
        activity = Activity(
            name=f"Activity {next(_ACTIVITY_NAME_COUNTER)}",
            start_time=now - timedelta(hours=2),
            end_time=now + ends_in,
            signup_start=now - timedelta(days=1),
            signup_end=now + ends_in,
            status=status,
            max_people=max_people,
        )
        if activity_id is not None:
            activity.activity_id = activity_id
        db_session.add(activity)
        db_session.commit()
        return activity

    return _make


@pytest.fixture()
def students(make_user: Callable[..., User]) -> list[User]:
    """Three users u1..u3 with no class."""
    return [make_user(f"u{i}") for i in range(1, 4)]
