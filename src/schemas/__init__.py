"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import UserLogin, UserResponse, UserSignup
from src.schemas.bookmark import (
    BookmarkCreate,
    BookmarkLayoutUpdate,
    BookmarkResponse,
    BookmarkUpdate,
)
from src.schemas.settings import SettingsResponse, SettingsUpdate

__all__ = [
    "UserSignup",
    "UserLogin",
    "UserResponse",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkLayoutUpdate",
    "BookmarkResponse",
    "SettingsUpdate",
    "SettingsResponse",
]
