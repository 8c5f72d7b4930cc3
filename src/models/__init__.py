"""SQLAlchemy models."""

from src.models.bookmark import Bookmark
from src.models.user import User
from src.models.user_settings import DEFAULT_SETTINGS, UserSettings

__all__ = [
    "User",
    "Bookmark",
    "UserSettings",
    "DEFAULT_SETTINGS",
]
