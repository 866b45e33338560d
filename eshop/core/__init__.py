"""Core app configuration, database and security."""

from eshop.core.config import get_settings, settings
from eshop.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
