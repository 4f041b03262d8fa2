"""Template registry for page fragments."""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateNotFound

from portfolio_renderer.templates.fragments import FRAGMENTS

__all__ = [
    "capfirst",
    "get_template",
    "list_templates",
    "render",
]


def capfirst(value: str) -> str:
    """Upper-case the first character of *value*, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def _build_environment() -> Environment:
    env = Environment(
        loader=DictLoader(FRAGMENTS),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["capfirst"] = capfirst
    return env


_ENV = _build_environment()


def get_template(name: str) -> Template:
    """Return the fragment template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _ENV.get_template(name)
    except TemplateNotFound:
        available = ", ".join(list_templates())
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(FRAGMENTS)


def render(name: str, **context: Any) -> str:
    """Render the template *name* with *context*."""
    return get_template(name).render(**context)
