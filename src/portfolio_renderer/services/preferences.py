"""Preference service: read and write single key/value preferences."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from portfolio_renderer.data.db import get_session
from portfolio_renderer.data.models import Preference

logger = logging.getLogger(__name__)

__all__ = ["delete_preference", "get_preference", "set_preference"]


def _get_record(session: Session, key: str) -> Preference | None:
    return session.get(Preference, key)


def get_preference(key: str) -> str | None:
    """Return the stored value for *key*.

    Args:
        key: Preference name

    Returns:
        The stored value, or None if unset or the store is unavailable
    """
    try:
        with get_session() as session:
            record = _get_record(session, key)
            return record.value if record else None
    except Exception:
        logger.exception("Failed to read preference %s", key)
        return None


def set_preference(key: str, value: str) -> bool:
    """Insert or update *key* with *value*.

    Returns:
        True if the value was persisted, False otherwise
    """
    try:
        with get_session() as session:
            record = _get_record(session, key)
            if record is None:
                session.add(Preference(key=key, value=value))
            else:
                record.value = value
        return True
    except Exception:
        logger.exception("Failed to store preference %s", key)
        return False


def delete_preference(key: str) -> bool:
    """Remove *key*; returns True if a record was deleted."""
    try:
        with get_session() as session:
            record = _get_record(session, key)
            if record is None:
                return False
            session.delete(record)
            return True
    except Exception:
        logger.exception("Failed to delete preference %s", key)
        return False
