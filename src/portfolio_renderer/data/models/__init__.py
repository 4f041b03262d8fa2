"""ORM models package for database tables.

- Preference: key/value client preferences (currently only ``theme``)

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_renderer.data.db import Base
from portfolio_renderer.data.models.preference import Preference

__all__ = ["Base", "Preference"]
