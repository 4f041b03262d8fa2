"""Exception types raised by the portfolio renderer."""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for all renderer errors."""


class ContentLoadError(PortfolioError):
    """Raised when a content source cannot be retrieved or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason


class ContentNotLoadedError(PortfolioError):
    """Raised when an interaction needs content that has not been fetched yet."""


class EntityNotFoundError(PortfolioError, LookupError):
    """Raised when a project or post id is not present in the loaded collection."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"No {kind} with id {entity_id!r}")
        self.kind = kind
        self.entity_id = entity_id


class AnchorNotFoundError(PortfolioError, LookupError):
    """Raised when the page shell lacks an element the renderer injects into."""
