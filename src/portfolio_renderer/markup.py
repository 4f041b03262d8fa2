"""Render content models into HTML fragments."""

from __future__ import annotations

from collections.abc import Iterable

from portfolio_renderer.models import BlogPost, Profile, Project, Resume
from portfolio_renderer.templates import render

__all__ = [
    "LOAD_ERROR_MESSAGE",
    "render_about",
    "render_blog_detail",
    "render_blog_grid",
    "render_contact",
    "render_filter_buttons",
    "render_load_error",
    "render_project_detail",
    "render_projects_grid",
    "render_resume",
    "render_sidebar_profile",
]

LOAD_ERROR_MESSAGE = "Failed to load content. Check console."


def render_sidebar_profile(profile: Profile) -> str:
    return render("sidebar_profile", profile=profile)


def render_about(profile: Profile) -> str:
    return render("about", profile=profile)


def render_contact(profile: Profile) -> str:
    return render("contact", profile=profile)


def render_resume(resume: Resume) -> str:
    return render("resume", resume=resume)


def render_filter_buttons(categories: Iterable[str], active: str = "all") -> str:
    """Render one filter button per category; *active* starts highlighted."""
    return render("filters", categories=list(categories), active=active)


def render_projects_grid(projects: Iterable[Project]) -> str:
    return render("projects_grid", projects=list(projects))


def render_project_detail(project: Project) -> str:
    return render("project_detail", project=project)


def render_blog_grid(posts: Iterable[BlogPost]) -> str:
    return render("blog_grid", posts=list(posts))


def render_blog_detail(post: BlogPost) -> str:
    return render("blog_detail", post=post)


def render_load_error(message: str = LOAD_ERROR_MESSAGE) -> str:
    return render("load_error", message=message)
