"""SQLite store behind the theme preference.

``DB_URL`` selects the database; without it a ``preferences.db`` file next
to the project is used. Nothing touches the database until the first
session is opened, at which point the ``preferences`` table is created.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

_DB_FILENAME = "preferences.db"


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_sessions: sessionmaker[Session] | None = None


def database_url() -> str:
    url = os.getenv("DB_URL")
    if url:
        return url
    db_path = Path(__file__).resolve().parents[3] / _DB_FILENAME
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _session_factory() -> sessionmaker[Session]:
    global _engine, _sessions
    if _sessions is None:
        from portfolio_renderer.data.models import Preference

        _engine = create_engine(database_url())
        Base.metadata.create_all(bind=_engine, tables=[Preference.__table__])
        _sessions = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)
    return _sessions


def reset_engine() -> None:
    """Drop the cached engine; the next session re-reads ``DB_URL``."""
    global _engine, _sessions
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessions = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = _session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
