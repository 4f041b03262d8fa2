"""In-memory collections of fetched projects and blog posts.

Both collections are read-only for the lifetime of a page: they are built
once by the fetchers and then handed to the filter and modal controllers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from portfolio_renderer.errors import EntityNotFoundError
from portfolio_renderer.models import BlogPost, Project

__all__ = ["ALL_CATEGORY", "BlogState", "ProjectsState"]

ALL_CATEGORY = "all"


class ProjectsState:
    """Fetched projects in source order."""

    def __init__(self, projects: Iterable[Project]) -> None:
        self._projects: tuple[Project, ...] = tuple(projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    @property
    def projects(self) -> Sequence[Project]:
        return self._projects

    def categories(self) -> list[str]:
        """Return ``"all"`` followed by each distinct category in first-seen order."""
        seen = dict.fromkeys([ALL_CATEGORY, *(p.category for p in self._projects)])
        return list(seen)

    def filter(self, key: str) -> list[Project]:
        """Return projects matching *key* (exact, case-sensitive), keeping order."""
        if key == ALL_CATEGORY:
            return list(self._projects)
        return [p for p in self._projects if p.category == key]

    def get(self, project_id: str) -> Project:
        """Return the project with *project_id*.

        Raises:
            EntityNotFoundError: If no project has that id.
        """
        for project in self._projects:
            if project.id == project_id:
                return project
        raise EntityNotFoundError("project", project_id)


class BlogState:
    """Fetched blog posts in source order."""

    def __init__(self, posts: Iterable[BlogPost]) -> None:
        self._posts: tuple[BlogPost, ...] = tuple(posts)

    def __iter__(self) -> Iterator[BlogPost]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    @property
    def posts(self) -> Sequence[BlogPost]:
        return self._posts

    def get(self, post_id: str) -> BlogPost:
        """Return the post with *post_id*.

        Raises:
            EntityNotFoundError: If no post has that id.
        """
        for post in self._posts:
            if post.id == post_id:
                return post
        raise EntityNotFoundError("blog", post_id)
