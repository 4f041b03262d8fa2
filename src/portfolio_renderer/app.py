"""Application wiring: setup, concurrent content load and event dispatch."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date
from typing import Any

import httpx

from portfolio_renderer.config import SiteConfig
from portfolio_renderer.controllers import (
    CVActions,
    FilterController,
    MobileMenu,
    ModalController,
    NavigationController,
    ThemeController,
    ThemeStore,
)
from portfolio_renderer.errors import ContentNotLoadedError
from portfolio_renderer.fetchers import ContentFetcher
from portfolio_renderer.markup import render_load_error
from portfolio_renderer.messages import (
    CloseModal,
    Message,
    Navigate,
    OpenModal,
    OverlayClicked,
    PrintCV,
    SelectFilter,
    ToggleMenu,
    ToggleTheme,
)
from portfolio_renderer.page import Page
from portfolio_renderer.state import BlogState, ProjectsState
from portfolio_renderer.typing_effect import Scheduler, TypingAnimation, TypingLoop

logger = logging.getLogger(__name__)

__all__ = ["PortfolioApp"]

PRELOADER_ID = "preloader"
TYPING_ID = "typing-text"
YEAR_ID = "year"


class PortfolioApp:
    """One loaded portfolio page and the controllers acting on it.

    Args:
        config: Content and CV locations; defaults to :meth:`SiteConfig.from_env`.
        page: Page to render into; defaults to the bundled shell.
        theme_store: Theme persistence; defaults to the database-backed store.
        client: HTTP client for URL sources; one is created per load if omitted.
        call_later: Scheduler for the typing animation; defaults to the running loop.
        animate: Start the typing animation once the profile is rendered.
        opener: Callable used by the print action to open the CV.
        today: Returns the date used for the footer year.
    """

    def __init__(
        self,
        config: SiteConfig | None = None,
        page: Page | None = None,
        theme_store: ThemeStore | None = None,
        client: httpx.AsyncClient | None = None,
        call_later: Scheduler | None = None,
        animate: bool = True,
        opener: Callable[[str], object] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or SiteConfig.from_env()
        self.page = page or Page.from_shell()
        self.client = client
        self.call_later = call_later
        self.animate = animate
        self.today = today

        self.mobile_menu = MobileMenu(self.page)
        self.navigation = NavigationController(self.page, self.mobile_menu)
        self.theme = ThemeController(self.page, theme_store or ThemeStore())
        self.cv = CVActions(self.page, self.config.pdf_path, opener=opener)
        self.modal = ModalController(self.page)

        self.projects: ProjectsState | None = None
        self.blog: BlogState | None = None
        self.filters: FilterController | None = None
        self.roles: list[str] = []
        self.typing: TypingLoop | None = None
        self.loaded = False

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Synchronous UI setup that does not depend on fetched content."""
        self.theme.init()
        self.cv.wire()

    async def load(self) -> bool:
        """Fetch and render all four documents concurrently.

        Failures are logged and shown in the preloader; they never propagate.
        Anything rendered before the failure stays on the page.

        Returns:
            True if every document loaded.
        """
        try:
            if self.client is not None:
                await self._load_all(self.client)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    await self._load_all(client)
        except Exception:
            logger.exception("Data loading failed")
            self.page.set_inner_html(PRELOADER_ID, render_load_error())
            self.loaded = False
        else:
            self._hide_preloader()
            self.loaded = True

        self.page.set_text(YEAR_ID, str(self.today().year))
        return self.loaded

    async def start(self) -> bool:
        """Run setup followed by :meth:`load`."""
        self.setup()
        return await self.load()

    async def _load_all(self, client: httpx.AsyncClient) -> None:
        fetcher = ContentFetcher(self.config, self.page, client)
        # Every fetch runs to completion; the first error is raised afterwards.
        results = await asyncio.gather(
            fetcher.fetch_and_render_profile(on_roles=self._start_typing),
            fetcher.fetch_and_render_resume(),
            self._load_projects(fetcher),
            self._load_blog(fetcher),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def _load_projects(self, fetcher: ContentFetcher) -> None:
        self.projects = await fetcher.fetch_and_render_projects()
        self.filters = FilterController(self.page, self.projects)
        self.modal.projects = self.projects

    async def _load_blog(self, fetcher: ContentFetcher) -> None:
        self.blog = await fetcher.fetch_and_render_blog()
        self.modal.blog = self.blog

    def _start_typing(self, roles: list[str]) -> None:
        self.roles = roles
        if not self.animate:
            return
        if not roles:
            logger.warning("Profile has no roles; typing animation not started")
            return
        self.typing = TypingLoop(
            TypingAnimation(roles),
            on_frame=lambda text: self.page.set_text(TYPING_ID, text),
            call_later=self.call_later,
        )
        self.typing.start()

    def _hide_preloader(self) -> None:
        Page.set_style(self.page.element(PRELOADER_ID), opacity="0", display="none")

    # ------------------------------------------------------------------
    # dispatch
    # ------------------------------------------------------------------

    def update(self, message: Message) -> Any:
        """Apply one UI event to the page.

        Raises:
            ContentNotLoadedError: For filter events before projects loaded.
            EntityNotFoundError: For modal events naming an unknown id.
            TypeError: For objects that are not a known message.
        """
        if isinstance(message, Navigate):
            return self.navigation.navigate(message.page)
        if isinstance(message, ToggleMenu):
            return self.mobile_menu.toggle()
        if isinstance(message, ToggleTheme):
            return self.theme.toggle()
        if isinstance(message, SelectFilter):
            if self.filters is None:
                raise ContentNotLoadedError("Projects have not been loaded")
            return self.filters.select(message.key)
        if isinstance(message, OpenModal):
            return self.modal.open(message.kind, message.entity_id)
        if isinstance(message, CloseModal):
            return self.modal.close()
        if isinstance(message, OverlayClicked):
            return self.modal.handle_overlay_click(message.target_id)
        if isinstance(message, PrintCV):
            return self.cv.print_cv()
        raise TypeError(f"Unsupported message: {message!r}")

    def render(self) -> str:
        return self.page.render()
