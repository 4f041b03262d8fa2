"""Controllers for the page's interactive affordances."""

from portfolio_renderer.controllers.cv_actions import CVActions
from portfolio_renderer.controllers.filters import FilterController
from portfolio_renderer.controllers.mobile_menu import MobileMenu
from portfolio_renderer.controllers.modal import ModalController, ModalKind
from portfolio_renderer.controllers.navigation import NavigationController
from portfolio_renderer.controllers.theme import Theme, ThemeController, ThemeStore

__all__ = [
    "CVActions",
    "FilterController",
    "MobileMenu",
    "ModalController",
    "ModalKind",
    "NavigationController",
    "Theme",
    "ThemeController",
    "ThemeStore",
]
