"""Service layer over the persistence package."""

from portfolio_renderer.services.preferences import (
    delete_preference,
    get_preference,
    set_preference,
)

__all__ = ["delete_preference", "get_preference", "set_preference"]
