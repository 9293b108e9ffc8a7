"""Database session configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from classhub.core.exceptions import ConflictError, PersistenceError, ServiceError
from classhub.core.settings import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import classhub.models  # noqa: E402,F401


def _enable_sqlite_transactions(engine: Engine) -> None:
    """Give pysqlite real transactions.

    The driver defers BEGIN until the first write, so reads made by the
    admission checks would otherwise run outside the transaction. Every
    transaction starts with BEGIN IMMEDIATE, which takes the database write
    lock up front and serializes concurrent writers. Read-only sessions such
    as the list endpoints take the same lock, so on SQLite they queue behind
    writers for up to ``sqlite_busy_timeout`` seconds.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record) -> None:  # pragma: no cover - driver hook
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn) -> None:  # pragma: no cover - driver hook
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str | None = None, **kwargs: Any) -> Engine:
    """Create an engine for ``url`` (defaults to the configured database)."""
    url = url or settings.effective_database_url
    if url.startswith("sqlite"):
        connect_args = kwargs.setdefault("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        connect_args.setdefault("timeout", settings.sqlite_busy_timeout)
    kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.sql_debug)

    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_transactions(engine)
    return engine


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """Run a unit of work: commit on success, roll back and classify on failure.

    Service errors propagate unchanged. Integrity violations surface as
    :class:`ConflictError`; any other database failure as :class:`PersistenceError`.
    """
    try:
        yield db
        db.commit()
    except ServiceError:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity violation: %s", exc.orig)
        raise ConflictError("record conflicts with an existing one") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database failure: %s", exc)
        raise PersistenceError() from exc
    except BaseException:
        db.rollback()
        raise


def create_tables(bind: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=bind or engine)
