"""Mobile navigation drawer."""

from __future__ import annotations

from portfolio_renderer.page import Page

__all__ = ["MobileMenu"]

ACTIVE = "active"


class MobileMenu:
    """Shows and hides the sidebar drawer together with its overlay."""

    def __init__(self, page: Page) -> None:
        self.page = page

    @property
    def is_open(self) -> bool:
        return Page.has_class(self.page.select_one(".sidebar"), ACTIVE)

    def toggle(self) -> bool:
        """Flip the drawer; returns whether it is now open."""
        is_open = Page.toggle_class(self.page.select_one(".sidebar"), ACTIVE)
        Page.toggle_class(self.page.select_one(".sidebar-overlay"), ACTIVE)
        return is_open

    def close(self) -> None:
        Page.remove_class(self.page.select_one(".sidebar"), ACTIVE)
        Page.remove_class(self.page.select_one(".sidebar-overlay"), ACTIVE)
