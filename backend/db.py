"""
Database setup for the FastAPI backend.
Provides SQLAlchemy engine/session utilities for SQLite and the
versioned schema initialization run at startup.
"""
import logging
from datetime import datetime
from typing import Callable, Dict

from fastapi import Request
from sqlalchemy import create_engine, func, insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import declarative_base, sessionmaker


Base = declarative_base()
logger = logging.getLogger(__name__)


def make_engine(db_path: str) -> Engine:
    # check_same_thread=False allows usage across FastAPI threads
    return create_engine(
        f"sqlite:///{db_path}", connect_args={"check_same_thread": False}
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def _create_books_table(conn: Connection) -> None:
    from repositories.models import BookORM

    BookORM.__table__.create(bind=conn, checkfirst=True)


# Ordered schema steps; a new version is appended, never edited.
MIGRATIONS: Dict[int, Callable[[Connection], None]] = {
    1: _create_books_table,
}


def init_db(engine: Engine) -> int:
    """Bring the schema up to the latest version and return that version."""
    from repositories.models import SchemaVersionORM

    versions = SchemaVersionORM.__table__
    with engine.begin() as conn:
        versions.create(bind=conn, checkfirst=True)
        current = conn.execute(select(func.max(versions.c.version))).scalar() or 0
        for version in sorted(v for v in MIGRATIONS if v > current):
            MIGRATIONS[version](conn)
            conn.execute(
                insert(versions).values(version=version, applied_at=datetime.utcnow())
            )
            logger.info("Applied schema version %s", version)
            current = version
    return current


def get_session(request: Request):
    """FastAPI dependency yielding a session from the app's session factory."""
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
