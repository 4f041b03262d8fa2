"""Fetch the four content documents and render them into the page.

A source is either an ``http(s)://`` URL, retrieved with an async httpx
client, or a filesystem path. Each ``fetch_and_render_*`` coroutine performs
one retrieval and writes its markup to fixed anchors; the projects and blog
fetchers also return the collection for later filtering and lookups.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
from pydantic import TypeAdapter

from portfolio_renderer.config import SiteConfig, is_url
from portfolio_renderer.errors import ContentLoadError
from portfolio_renderer.markup import (
    render_about,
    render_blog_grid,
    render_contact,
    render_filter_buttons,
    render_projects_grid,
    render_resume,
    render_sidebar_profile,
)
from portfolio_renderer.models import BlogPost, Profile, Project, Resume
from portfolio_renderer.page import Page
from portfolio_renderer.state import ALL_CATEGORY, BlogState, ProjectsState

logger = logging.getLogger(__name__)

__all__ = ["ContentFetcher", "is_url", "load_document"]

_PROJECTS = TypeAdapter(list[Project])
_POSTS = TypeAdapter(list[BlogPost])


async def load_document(source: str, client: httpx.AsyncClient) -> Any:
    """Retrieve and decode the JSON document at *source*.

    Raises:
        ContentLoadError: On HTTP errors, non-2xx responses, unreadable or
            non-UTF-8 files, and invalid JSON.
    """
    try:
        if is_url(source):
            response = await client.get(source)
            response.raise_for_status()
            return response.json()

        text = await asyncio.to_thread(Path(source).read_text, encoding="utf-8")
        return json.loads(text)
    except httpx.HTTPError as exc:
        raise ContentLoadError(source, str(exc)) from exc
    except OSError as exc:
        raise ContentLoadError(source, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ContentLoadError(source, f"not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ContentLoadError(source, f"invalid JSON ({exc})") from exc


class ContentFetcher:
    """Renders each content document into its anchors.

    Args:
        config: Where the documents live.
        page: Page to render into.
        client: HTTP client used for URL sources.
    """

    def __init__(self, config: SiteConfig, page: Page, client: httpx.AsyncClient) -> None:
        self.config = config
        self.page = page
        self.client = client

    async def _load(self, kind: str) -> Any:
        source = self.config.source_for(kind)
        logger.debug("Fetching %s from %s", kind, source)
        return await load_document(source, self.client)

    async def fetch_and_render_profile(
        self, on_roles: Callable[[list[str]], None] | None = None
    ) -> Profile:
        """Render the sidebar, about and contact panels, then hand off the roles."""
        profile = Profile.model_validate(await self._load("profile"))

        self.page.set_inner_html("sidebar-profile-data", render_sidebar_profile(profile))
        self.page.set_inner_html("about-content", render_about(profile))
        self.page.set_inner_html("contact-info", render_contact(profile))

        if on_roles is not None:
            on_roles(list(profile.roles))
        return profile

    async def fetch_and_render_resume(self) -> Resume:
        resume = Resume.model_validate(await self._load("resume"))
        self.page.set_inner_html("resume-content", render_resume(resume))
        return resume

    async def fetch_and_render_projects(self) -> ProjectsState:
        """Render the filter bar and the full grid; return the loaded projects."""
        state = ProjectsState(_PROJECTS.validate_python(await self._load("projects")))

        self.page.set_inner_html(
            "portfolio-filters",
            render_filter_buttons(state.categories(), active=ALL_CATEGORY),
        )
        self.page.set_inner_html("works-grid", render_projects_grid(state))
        logger.info("Rendered %d projects", len(state))
        return state

    async def fetch_and_render_blog(self) -> BlogState:
        state = BlogState(_POSTS.validate_python(await self._load("blog")))
        self.page.set_inner_html("blog-grid", render_blog_grid(state))
        logger.info("Rendered %d blog posts", len(state))
        return state
