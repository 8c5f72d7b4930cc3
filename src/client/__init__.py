"""Python client for the bookmarks API."""

from src.client.api import ApiError, BookmarkApiClient, Conflict, NotFound, ValidationFailed
from src.client.bookmarks import BookmarkStore, filter_bookmarks
from src.client.cache import QueryCache
from src.client.layout import LayoutBuffer, compute_positions
from src.client.session import AuthenticationRequired, AuthGate, AuthStatus

__all__ = [
    "ApiError",
    "AuthGate",
    "AuthStatus",
    "AuthenticationRequired",
    "BookmarkApiClient",
    "BookmarkStore",
    "Conflict",
    "LayoutBuffer",
    "NotFound",
    "QueryCache",
    "ValidationFailed",
    "compute_positions",
    "filter_bookmarks",
]
