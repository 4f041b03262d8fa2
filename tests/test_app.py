"""End-to-end tests for loading a page and dispatching UI events."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import date
from pathlib import Path

import httpx
import pytest

from portfolio_renderer.app import PortfolioApp
from portfolio_renderer.config import SiteConfig
from portfolio_renderer.errors import ContentNotLoadedError, EntityNotFoundError
from portfolio_renderer.markup import LOAD_ERROR_MESSAGE
from portfolio_renderer.messages import (
    CloseModal,
    Navigate,
    OpenModal,
    OverlayClicked,
    PrintCV,
    SelectFilter,
    ToggleMenu,
    ToggleTheme,
)
from portfolio_renderer.page import Page


class FakeClock:
    def __init__(self) -> None:
        self.pending: list[tuple[float, object]] = []

    def call_later(self, delay: float, callback) -> None:
        self.pending.append((delay, callback))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def opened() -> list[str]:
    return []


@pytest.fixture
def make_app(data_dir: Path, clock: FakeClock, opened: list[str]):
    def factory(**kwargs) -> PortfolioApp:
        options = {
            "config": SiteConfig.from_data_dir(data_dir, pdf_path="./assets/cv.pdf"),
            "call_later": clock.call_later,
            "opener": opened.append,
            "today": lambda: date(2026, 10, 19),
        }
        options.update(kwargs)
        return PortfolioApp(**options)

    return factory


@pytest.fixture
def app(make_app) -> PortfolioApp:
    portfolio = make_app()
    assert asyncio.run(portfolio.start()) is True
    return portfolio


def _grid_ids(app: PortfolioApp) -> list[str]:
    return [item["data-modal-id"] for item in app.page.select("#works-grid .work-item")]


class TestLoad:
    def test_successful_load_hides_preloader(self, app: PortfolioApp) -> None:
        preloader = app.page.element("preloader")
        assert "display: none" in preloader["style"]
        assert "opacity: 0" in preloader["style"]
        assert app.page.text("year") == "2026"
        assert app.loaded is True

    def test_all_anchors_populated(self, app: PortfolioApp) -> None:
        for anchor in ("sidebar-profile-data", "about-content", "contact-info", "resume-content"):
            assert app.page.inner_html(anchor).strip()
        assert _grid_ids(app) == ["p1", "p2", "p3"]
        assert len(app.page.select("#blog-grid .blog-card")) == 2

    def test_setup_wires_cv_download(self, app: PortfolioApp) -> None:
        assert app.page.element("download-cv")["href"] == "./assets/cv.pdf"

    def test_typing_animation_starts_with_roles(self, app: PortfolioApp, clock: FakeClock) -> None:
        assert app.roles == ["Mathematician", "Programmer"]
        assert app.page.text("typing-text") == "M"
        assert len(clock.pending) == 1
        assert clock.pending[0][0] == pytest.approx(0.1)

    def test_no_animation_when_disabled(self, make_app, clock: FakeClock) -> None:
        portfolio = make_app(animate=False)
        asyncio.run(portfolio.start())
        assert portfolio.typing is None
        assert portfolio.roles == ["Mathematician", "Programmer"]
        assert portfolio.page.text("typing-text") == ""
        assert clock.pending == []

    def test_empty_roles_skip_animation(self, make_app, data_dir: Path, profile_data) -> None:
        profile_data["roles"] = []
        (data_dir / "profile.json").write_text(json.dumps(profile_data), encoding="utf-8")
        portfolio = make_app()
        assert asyncio.run(portfolio.start()) is True
        assert portfolio.typing is None

    def test_one_failed_fetch_shows_error(self, make_app, data_dir: Path, caplog) -> None:
        (data_dir / "blog.json").unlink()
        portfolio = make_app()

        with caplog.at_level(logging.ERROR):
            loaded = asyncio.run(portfolio.start())

        assert loaded is False
        assert portfolio.loaded is False
        assert portfolio.page.text("preloader").strip() == LOAD_ERROR_MESSAGE
        assert "Data loading failed" in caplog.text
        assert portfolio.page.text("year") == "2026"

    def test_slow_fetch_still_renders_after_another_fails(
        self, make_app, profile_data, resume_data, projects_data
    ) -> None:
        payloads = {
            "/profile.json": profile_data,
            "/resume.json": resume_data,
            "/projects.json": projects_data,
        }

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/blog.json":
                return httpx.Response(500)
            if request.url.path == "/profile.json":
                await asyncio.sleep(0.05)
            return httpx.Response(200, json=payloads[request.url.path])

        async def run() -> tuple[bool, PortfolioApp]:
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                portfolio = make_app(
                    config=SiteConfig.from_data_dir("https://portfolio.example"),
                    client=client,
                    animate=False,
                )
                return await portfolio.start(), portfolio

        loaded, portfolio = asyncio.run(run())

        assert loaded is False
        assert "Ada Lovelace" in portfolio.page.inner_html("sidebar-profile-data")
        assert portfolio.roles == ["Mathematician", "Programmer"]
        assert _grid_ids(portfolio) == ["p1", "p2", "p3"]
        assert portfolio.blog is None
        assert LOAD_ERROR_MESSAGE in portfolio.page.text("preloader")

    def test_malformed_document_is_a_load_failure(self, make_app, data_dir: Path) -> None:
        (data_dir / "projects.json").write_text(json.dumps([{"id": "p1"}]), encoding="utf-8")
        portfolio = make_app()
        assert asyncio.run(portfolio.start()) is False
        assert LOAD_ERROR_MESSAGE in portfolio.page.text("preloader")


class TestFilters:
    def test_filter_before_load_raises(self, make_app) -> None:
        with pytest.raises(ContentNotLoadedError):
            make_app().update(SelectFilter("web"))

    def test_filter_by_category(self, app: PortfolioApp) -> None:
        shown = app.update(SelectFilter("web"))
        assert [p.id for p in shown] == ["p1", "p3"]
        assert _grid_ids(app) == ["p1", "p3"]
        assert app.filters.active_filter() == "web"

    def test_filter_all_restores_full_list(self, app: PortfolioApp) -> None:
        app.update(SelectFilter("ai"))
        app.update(SelectFilter("all"))
        assert _grid_ids(app) == ["p1", "p2", "p3"]
        active = [b for b in app.page.select(".filter-btn") if "active" in b.get("class", [])]
        assert [b["data-filter"] for b in active] == ["all"]

    def test_two_project_scenario(self, make_app, data_dir: Path) -> None:
        projects = [
            {"id": "p1", "title": "One", "category": "web", "tech": "", "image": "", "link": ""},
            {"id": "p2", "title": "Two", "category": "ai", "tech": "", "image": "", "link": ""},
        ]
        (data_dir / "projects.json").write_text(json.dumps(projects), encoding="utf-8")
        portfolio = make_app()
        asyncio.run(portfolio.start())

        portfolio.update(SelectFilter("web"))
        assert _grid_ids(portfolio) == ["p1"]

    def test_filter_is_case_sensitive(self, app: PortfolioApp) -> None:
        assert app.update(SelectFilter("Web")) == []
        assert _grid_ids(app) == []


class TestNavigation:
    def test_navigate_activates_one_panel_and_link(self, app: PortfolioApp) -> None:
        app.update(Navigate("portfolio"))

        assert app.navigation.active_panel() == "portfolio"
        active_links = [
            link["data-page"]
            for link in app.page.select(".nav-link")
            if "active" in link.get("class", [])
        ]
        assert active_links == ["portfolio"]
        assert app.page.scroll_requests[-1] == {"top": 0, "behavior": "smooth"}

    def test_initial_panel_comes_from_shell(self, app: PortfolioApp) -> None:
        assert app.navigation.active_panel() == "about"

    def test_navigate_closes_mobile_drawer(self, app: PortfolioApp) -> None:
        app.update(ToggleMenu())
        assert app.mobile_menu.is_open
        app.update(Navigate("blog"))
        assert not app.mobile_menu.is_open
        assert "active" not in app.page.select_one(".sidebar-overlay").get("class", [])

    def test_unknown_target_leaves_no_active_panel(self, app: PortfolioApp) -> None:
        app.update(Navigate("nowhere"))
        assert app.navigation.active_panel() is None

    def test_menu_toggle_round_trip(self, app: PortfolioApp) -> None:
        assert app.update(ToggleMenu()) is True
        assert app.update(ToggleMenu()) is False
        assert not app.mobile_menu.is_open


class TestModal:
    def test_open_project(self, app: PortfolioApp) -> None:
        app.update(OpenModal("project", "p2"))

        assert app.modal.is_open
        body = app.page.element("modal-body")
        assert body.select_one(".modal-title").get_text() == "Difference Engine"
        assert body.select_one("a.btn-primary")["href"] == "https://example.com/engine"

    def test_open_blog_post_renders_content(self, app: PortfolioApp, blog_data) -> None:
        app.update(OpenModal("blog", "b1"))
        body = app.page.element("modal-body")
        assert body.select_one(".modal-title").get_text() == blog_data[0]["title"]
        assert body.select_one(".modal-body-text").get_text() == blog_data[0]["content"]

    def test_unknown_id_leaves_modal_closed(self, app: PortfolioApp) -> None:
        with pytest.raises(EntityNotFoundError):
            app.update(OpenModal("project", "ghost"))
        assert not app.modal.is_open
        assert app.page.inner_html("modal-body") == ""

    def test_unknown_kind(self, app: PortfolioApp) -> None:
        with pytest.raises(ValueError):
            app.update(OpenModal("video", "p1"))

    def test_close_control(self, app: PortfolioApp) -> None:
        app.update(OpenModal("project", "p1"))
        app.update(CloseModal())
        assert not app.modal.is_open

    def test_click_inside_content_keeps_modal_open(self, app: PortfolioApp) -> None:
        app.update(OpenModal("project", "p1"))
        assert app.update(OverlayClicked("modal-body")) is False
        assert app.update(OverlayClicked(None)) is False
        assert app.modal.is_open

    def test_click_on_overlay_closes(self, app: PortfolioApp) -> None:
        app.update(OpenModal("blog", "b2"))
        assert app.update(OverlayClicked("modal-overlay")) is True
        assert not app.modal.is_open


class TestMisc:
    def test_print_cv_opens_pdf(self, app: PortfolioApp, opened: list[str]) -> None:
        app.update(PrintCV())
        assert opened == ["./assets/cv.pdf"]

    def test_toggle_theme_persists(self, app: PortfolioApp, make_app) -> None:
        app.update(ToggleTheme())
        assert Page.has_class(app.page.body, "dark-theme")

        reloaded = make_app()
        reloaded.setup()
        assert Page.has_class(reloaded.page.body, "dark-theme")

    def test_unsupported_message(self, app: PortfolioApp) -> None:
        with pytest.raises(TypeError):
            app.update("navigate")

    def test_render_returns_document(self, app: PortfolioApp) -> None:
        html = app.render()
        assert html.startswith("<!DOCTYPE html>")
        assert "Ada Lovelace" in html
