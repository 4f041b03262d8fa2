"""Portfolio category filters."""

from __future__ import annotations

import logging

from portfolio_renderer.markup import render_projects_grid
from portfolio_renderer.models import Project
from portfolio_renderer.page import Page
from portfolio_renderer.state import ProjectsState

logger = logging.getLogger(__name__)

__all__ = ["FilterController"]

ACTIVE = "active"
GRID_ID = "works-grid"


class FilterController:
    """Re-renders the project grid against the loaded projects."""

    def __init__(self, page: Page, projects: ProjectsState) -> None:
        self.page = page
        self.projects = projects

    def active_filter(self) -> str | None:
        for button in self.page.select(".filter-btn"):
            if Page.has_class(button, ACTIVE):
                return str(button.get("data-filter"))
        return None

    def select(self, key: str) -> list[Project]:
        """Mark the *key* button as the only active one and redraw the grid.

        Returns:
            The projects now shown, in source order.
        """
        for button in self.page.select(".filter-btn"):
            if button.get("data-filter") == key:
                Page.add_class(button, ACTIVE)
            else:
                Page.remove_class(button, ACTIVE)

        visible = self.projects.filter(key)
        self.page.set_inner_html(GRID_ID, render_projects_grid(visible))
        logger.debug("Filter %r shows %d of %d projects", key, len(visible), len(self.projects))
        return visible
