"""Detail overlay for projects and blog posts."""

from __future__ import annotations

import logging
from enum import StrEnum

from portfolio_renderer.errors import ContentNotLoadedError
from portfolio_renderer.markup import render_blog_detail, render_project_detail
from portfolio_renderer.page import Page
from portfolio_renderer.state import BlogState, ProjectsState

logger = logging.getLogger(__name__)

__all__ = ["OVERLAY_ID", "ModalController", "ModalKind"]

ACTIVE = "active"
OVERLAY_ID = "modal-overlay"
BODY_ID = "modal-body"


class ModalKind(StrEnum):
    PROJECT = "project"
    BLOG = "blog"


class ModalController:
    """Looks entities up in the loaded collections and shows their detail view."""

    def __init__(
        self,
        page: Page,
        projects: ProjectsState | None = None,
        blog: BlogState | None = None,
    ) -> None:
        self.page = page
        self.projects = projects
        self.blog = blog

    @property
    def is_open(self) -> bool:
        return Page.has_class(self.page.element(OVERLAY_ID), ACTIVE)

    def open(self, kind: str, entity_id: str) -> None:
        """Render the detail of *entity_id* and show the overlay.

        Raises:
            ValueError: If *kind* is not a :class:`ModalKind`.
            ContentNotLoadedError: If the collection for *kind* was never loaded.
            EntityNotFoundError: If no entity has *entity_id*; the page is untouched.
        """
        modal_kind = ModalKind(kind)

        if modal_kind is ModalKind.BLOG:
            if self.blog is None:
                raise ContentNotLoadedError("Blog posts have not been loaded")
            content = render_blog_detail(self.blog.get(entity_id))
        else:
            if self.projects is None:
                raise ContentNotLoadedError("Projects have not been loaded")
            content = render_project_detail(self.projects.get(entity_id))

        self.page.set_inner_html(BODY_ID, content)
        Page.add_class(self.page.element(OVERLAY_ID), ACTIVE)
        logger.debug("Opened %s modal for %s", modal_kind, entity_id)

    def close(self) -> None:
        Page.remove_class(self.page.element(OVERLAY_ID), ACTIVE)

    def handle_overlay_click(self, target_id: str | None) -> bool:
        """Close only when the click landed on the overlay itself.

        Returns:
            True if the modal was closed.
        """
        if target_id != OVERLAY_ID:
            return False
        self.close()
        return True
