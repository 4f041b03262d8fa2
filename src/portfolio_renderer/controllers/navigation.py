"""Panel navigation: exactly one content panel and nav link is active."""

from __future__ import annotations

import logging

from portfolio_renderer.controllers.mobile_menu import MobileMenu
from portfolio_renderer.page import Page

logger = logging.getLogger(__name__)

__all__ = ["NavigationController"]

ACTIVE = "active"


class NavigationController:
    def __init__(self, page: Page, mobile_menu: MobileMenu) -> None:
        self.page = page
        self.mobile_menu = mobile_menu

    def targets(self) -> list[str]:
        """Return the ``data-page`` targets of all nav links in page order."""
        return [str(link.get("data-page", "")) for link in self.page.select(".nav-link")]

    def active_panel(self) -> str | None:
        for panel in self.page.select(".content-panel"):
            if Page.has_class(panel, ACTIVE):
                return str(panel.get("id"))
        return None

    def navigate(self, target: str) -> None:
        """Activate the link and panel for *target*.

        An unknown *target* leaves no panel active.
        """
        links = self.page.select(".nav-link")
        for link in links:
            if link.get("data-page") == target:
                Page.add_class(link, ACTIVE)
            else:
                Page.remove_class(link, ACTIVE)

        matched = False
        for panel in self.page.select(".content-panel"):
            Page.remove_class(panel, ACTIVE)
            if panel.get("id") == target:
                Page.add_class(panel, ACTIVE)
                matched = True

        if not matched:
            logger.warning("No content panel matches navigation target %r", target)

        self.mobile_menu.close()
        self.page.scroll_to_top(smooth=True)
