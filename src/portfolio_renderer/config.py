"""Site configuration.

Content sources and the CV path can be overridden via environment variables
(``PORTFOLIO_*``), which are also read from a ``.env`` file when present.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

__all__ = ["CONTENT_KINDS", "SiteConfig", "is_url"]

CONTENT_KINDS: tuple[str, ...] = ("profile", "resume", "projects", "blog")

_DEFAULT_DATA_DIR = "./data"
_DEFAULT_PDF_PATH = "./assets/cv.pdf"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _join_source(base: str, name: str) -> str:
    """Join a data directory or base URL with a JSON document name."""
    if is_url(base):
        return f"{base.rstrip('/')}/{name}"
    return (Path(base) / name).as_posix()


class SiteConfig(BaseModel):
    """Where the four content documents and the CV live.

    Attributes:
        profile_source: URL or path of the profile document.
        resume_source: URL or path of the resume document.
        projects_source: URL or path of the project list.
        blog_source: URL or path of the blog post list.
        pdf_path: Path or URL of the downloadable CV.
    """

    model_config = ConfigDict(frozen=True)

    profile_source: str = f"{_DEFAULT_DATA_DIR}/profile.json"
    resume_source: str = f"{_DEFAULT_DATA_DIR}/resume.json"
    projects_source: str = f"{_DEFAULT_DATA_DIR}/projects.json"
    blog_source: str = f"{_DEFAULT_DATA_DIR}/blog.json"
    pdf_path: str = _DEFAULT_PDF_PATH

    @classmethod
    def from_data_dir(cls, data_dir: str | Path, **overrides: str) -> SiteConfig:
        """Build a config whose sources all live under *data_dir*."""
        base = str(data_dir)
        sources = {f"{kind}_source": _join_source(base, f"{kind}.json") for kind in CONTENT_KINDS}
        sources.update(overrides)
        return cls(**sources)

    @classmethod
    def from_env(cls) -> SiteConfig:
        """Build a config from ``PORTFOLIO_*`` environment variables."""
        data_dir = os.getenv("PORTFOLIO_DATA_DIR", _DEFAULT_DATA_DIR)
        overrides: dict[str, str] = {}
        for kind in CONTENT_KINDS:
            value = os.getenv(f"PORTFOLIO_{kind.upper()}_SOURCE")
            if value:
                overrides[f"{kind}_source"] = value

        pdf_path = os.getenv("PORTFOLIO_PDF_PATH")
        if pdf_path:
            overrides["pdf_path"] = pdf_path

        return cls.from_data_dir(data_dir, **overrides)

    def source_for(self, kind: str) -> str:
        """Return the configured source for a content kind.

        Raises:
            ValueError: If *kind* is not one of :data:`CONTENT_KINDS`.
        """
        if kind not in CONTENT_KINDS:
            available = ", ".join(CONTENT_KINDS)
            msg = f"Unknown content kind {kind!r}. Available: {available}"
            raise ValueError(msg)
        return getattr(self, f"{kind}_source")
