"""Light/dark theme preference."""

from __future__ import annotations

import logging
from enum import StrEnum

from portfolio_renderer.page import Page
from portfolio_renderer.services.preferences import get_preference, set_preference

logger = logging.getLogger(__name__)

__all__ = ["DARK_CLASS", "THEME_KEY", "Theme", "ThemeController", "ThemeStore"]

THEME_KEY = "theme"
DARK_CLASS = "dark-theme"


class Theme(StrEnum):
    DARK = "dark"
    LIGHT = "light"


class ThemeStore:
    """Persists the theme under the ``theme`` preference key."""

    def __init__(self, key: str = THEME_KEY) -> None:
        self.key = key

    def read(self) -> str | None:
        return get_preference(self.key)

    def write(self, theme: Theme) -> bool:
        return set_preference(self.key, theme.value)


class ThemeController:
    """Applies the stored theme to ``<body>`` and flips it on toggle."""

    def __init__(self, page: Page, store: ThemeStore) -> None:
        self.page = page
        self.store = store

    @property
    def current(self) -> Theme:
        return Theme.DARK if Page.has_class(self.page.body, DARK_CLASS) else Theme.LIGHT

    def init(self) -> Theme:
        """Apply the stored preference; anything other than ``dark`` keeps light."""
        if self.store.read() == Theme.DARK:
            Page.add_class(self.page.body, DARK_CLASS)
        return self.current

    def toggle(self) -> Theme:
        """Flip the theme and persist the new value."""
        is_dark = Page.toggle_class(self.page.body, DARK_CLASS)
        theme = Theme.DARK if is_dark else Theme.LIGHT
        if not self.store.write(theme):
            logger.warning("Theme %s applied but could not be persisted", theme)
        return theme
