"""DOM adapter over an HTML page shell.

Wraps a BeautifulSoup document with the handful of operations the renderer
needs: look up anchors, replace their inner markup, toggle classes and set
attributes. Viewport side effects such as scrolling are recorded on the page
so they can be inspected.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from portfolio_renderer.errors import AnchorNotFoundError
from portfolio_renderer.page_shell import shell_html

logger = logging.getLogger(__name__)

__all__ = ["Page"]

_PARSER = "html.parser"


class Page:
    """Mutable HTML document the controllers render into."""

    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html, _PARSER)
        self.scroll_requests: list[dict[str, object]] = []

    @classmethod
    def from_shell(cls) -> Page:
        """Create a page from the bundled shell."""
        return cls(shell_html())

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------

    @property
    def body(self) -> Tag:
        body = self.soup.body
        if body is None:
            raise AnchorNotFoundError("Page has no <body> element")
        return body

    def element(self, element_id: str) -> Tag:
        """Return the element with id *element_id*.

        Raises:
            AnchorNotFoundError: If the page has no such element.
        """
        tag = self.soup.find(id=element_id)
        if not isinstance(tag, Tag):
            raise AnchorNotFoundError(f"No element with id {element_id!r}")
        return tag

    def select(self, selector: str) -> list[Tag]:
        """Return all elements matching a CSS *selector*."""
        return list(self.soup.select(selector))

    def select_one(self, selector: str) -> Tag:
        """Return the first element matching *selector*.

        Raises:
            AnchorNotFoundError: If nothing matches.
        """
        tag = self.soup.select_one(selector)
        if tag is None:
            raise AnchorNotFoundError(f"No element matches {selector!r}")
        return tag

    # ------------------------------------------------------------------
    # content
    # ------------------------------------------------------------------

    def set_inner_html(self, target: str | Tag, markup: str) -> None:
        """Replace the children of *target* (an id or element) with *markup*."""
        tag = self.element(target) if isinstance(target, str) else target
        tag.clear()
        fragment = BeautifulSoup(markup, _PARSER)
        for node in list(fragment.contents):
            tag.append(node.extract())

    def inner_html(self, element_id: str) -> str:
        return self.element(element_id).decode_contents()

    def set_text(self, element_id: str, text: str) -> None:
        self.element(element_id).string = text

    def text(self, element_id: str) -> str:
        return self.element(element_id).get_text()

    def set_attribute(self, element_id: str, name: str, value: str) -> None:
        self.element(element_id)[name] = value

    @staticmethod
    def set_style(tag: Tag, **properties: str) -> None:
        """Merge CSS *properties* into the inline ``style`` of *tag*.

        Underscores in property names become hyphens.
        """
        declarations: dict[str, str] = {}
        for chunk in str(tag.get("style", "")).split(";"):
            if ":" in chunk:
                key, value = chunk.split(":", 1)
                declarations[key.strip()] = value.strip()
        for key, value in properties.items():
            declarations[key.replace("_", "-")] = value
        tag["style"] = "; ".join(f"{k}: {v}" for k, v in declarations.items())

    # ------------------------------------------------------------------
    # classes
    # ------------------------------------------------------------------

    @staticmethod
    def classes(tag: Tag) -> list[str]:
        value = tag.get("class") or []
        if isinstance(value, str):
            return value.split()
        return list(value)

    @classmethod
    def has_class(cls, tag: Tag, name: str) -> bool:
        return name in cls.classes(tag)

    @classmethod
    def add_class(cls, tag: Tag, name: str) -> None:
        current = cls.classes(tag)
        if name not in current:
            tag["class"] = [*current, name]

    @classmethod
    def remove_class(cls, tag: Tag, name: str) -> None:
        remaining = [c for c in cls.classes(tag) if c != name]
        if remaining:
            tag["class"] = remaining
        elif tag.has_attr("class"):
            del tag["class"]

    @classmethod
    def toggle_class(cls, tag: Tag, name: str) -> bool:
        """Flip *name* on *tag*; return whether the class is now present."""
        if cls.has_class(tag, name):
            cls.remove_class(tag, name)
            return False
        cls.add_class(tag, name)
        return True

    # ------------------------------------------------------------------
    # viewport / output
    # ------------------------------------------------------------------

    def scroll_to_top(self, smooth: bool = True) -> None:
        self.scroll_requests.append({"top": 0, "behavior": "smooth" if smooth else "auto"})
        logger.debug("Scroll to top requested (smooth=%s)", smooth)

    def render(self) -> str:
        """Serialize the current document."""
        return str(self.soup)
