"""Download and print actions for the CV."""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable

from portfolio_renderer.page import Page

logger = logging.getLogger(__name__)

__all__ = ["CVActions"]

DOWNLOAD_ID = "download-cv"


def _open_in_new_tab(url: str) -> bool:
    return webbrowser.open(url, new=2)


class CVActions:
    """Points the download link at the CV and opens it for printing."""

    def __init__(
        self,
        page: Page,
        pdf_path: str,
        opener: Callable[[str], object] | None = None,
    ) -> None:
        self.page = page
        self.pdf_path = pdf_path
        self.opener = opener or _open_in_new_tab

    def wire(self) -> None:
        self.page.set_attribute(DOWNLOAD_ID, "href", self.pdf_path)

    def print_cv(self) -> None:
        logger.info("Opening %s for printing", self.pdf_path)
        self.opener(self.pdf_path)
