"""UI events dispatched to :meth:`PortfolioApp.update`."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CloseModal",
    "Message",
    "Navigate",
    "OpenModal",
    "OverlayClicked",
    "PrintCV",
    "SelectFilter",
    "ToggleMenu",
    "ToggleTheme",
]


@dataclass(frozen=True, slots=True)
class Navigate:
    """A nav link was clicked; *page* is its ``data-page`` target."""

    page: str


@dataclass(frozen=True, slots=True)
class ToggleMenu:
    """The mobile menu button or the sidebar overlay was clicked."""


@dataclass(frozen=True, slots=True)
class ToggleTheme:
    pass


@dataclass(frozen=True, slots=True)
class SelectFilter:
    key: str


@dataclass(frozen=True, slots=True)
class OpenModal:
    kind: str
    entity_id: str


@dataclass(frozen=True, slots=True)
class CloseModal:
    """The modal's close control was clicked."""


@dataclass(frozen=True, slots=True)
class OverlayClicked:
    """A click inside the modal overlay; *target_id* is the clicked element's id."""

    target_id: str | None


@dataclass(frozen=True, slots=True)
class PrintCV:
    pass


Message = (
    Navigate
    | ToggleMenu
    | ToggleTheme
    | SelectFilter
    | OpenModal
    | CloseModal
    | OverlayClicked
    | PrintCV
)
