"""Key/value preference stored on the client."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_renderer.data.db import Base


class Preference(Base):
    """A single persisted preference such as ``theme``.

    Attributes:
        key: Preference name (primary key).
        value: Stored string value.
        updated_at: UTC timestamp of the last write.
    """

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
