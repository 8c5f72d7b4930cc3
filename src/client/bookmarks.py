"""Cached bookmark and settings data with optimistic delete."""

import logging
from typing import Any

from src.client.api import BOOKMARKS_PATH, SETTINGS_PATH, BookmarkApiClient
from src.client.cache import QueryCache

logger = logging.getLogger(__name__)


def filter_bookmarks(bookmarks: list[dict], query: str) -> list[dict]:
    """Bookmarks whose title or category contains the query, ignoring case."""
    needle = query.lower()
    if not needle:
        return list(bookmarks)
    return [
        bookmark
        for bookmark in bookmarks
        if needle in bookmark["title"].lower() or needle in bookmark["category"].lower()
    ]


class BookmarkStore:
    """Serves views from the query cache and keeps it in step with the server."""

    def __init__(self, api: BookmarkApiClient, cache: QueryCache | None = None):
        self.api = api
        self.cache = cache or QueryCache()

    def bookmarks(self, force: bool = False) -> list[dict]:
        return self.cache.fetch(BOOKMARKS_PATH, self.api.list_bookmarks, force=force)

    def get(self, bookmark_id: int) -> dict | None:
        for bookmark in self.cache.get(BOOKMARKS_PATH) or []:
            if bookmark["id"] == bookmark_id:
                return bookmark
        return None

    def search(self, query: str) -> list[dict]:
        return filter_bookmarks(self.bookmarks(), query)

    def create(self, title: str, url: str, category: str, **extra: Any) -> dict:
        bookmark = self.api.create_bookmark(title, url, category, **extra)
        self.cache.invalidate(BOOKMARKS_PATH)
        return bookmark

    def update(self, bookmark_id: int, **changes: Any) -> dict:
        bookmark = self.api.update_bookmark(bookmark_id, **changes)
        self.cache.invalidate(BOOKMARKS_PATH)
        return bookmark

    def delete(self, bookmark_id: int) -> None:
        """Remove the bookmark from the cached list before the server confirms.

        If the request fails the list is put back exactly as it was and the
        error is re-raised. Either way the list is refetched afterwards.
        """
        previous = self.cache.snapshot(BOOKMARKS_PATH)
        if previous is not None:
            self.cache.set(
                BOOKMARKS_PATH, [bookmark for bookmark in previous if bookmark["id"] != bookmark_id]
            )

        try:
            self.api.delete_bookmark(bookmark_id)
        except Exception:
            if previous is not None:
                self.cache.restore(BOOKMARKS_PATH, previous)
            raise
        finally:
            self._reconcile()

    def save_layout(self, layouts: list[dict]) -> None:
        self.api.save_layout(layouts)
        self.cache.invalidate(BOOKMARKS_PATH)

    def _reconcile(self) -> None:
        self.cache.invalidate(BOOKMARKS_PATH)
        try:
            self.bookmarks()
        except Exception as e:
            # The entry stays stale so the next read tries again
            logger.warning(f"Refetch after delete failed: {e}")

    # Settings

    def get_settings(self, force: bool = False) -> dict:
        return self.cache.fetch(SETTINGS_PATH, self.api.get_settings, force=force)

    def save_settings(self, **changes: Any) -> dict:
        settings = self.api.update_settings(**changes)
        self.cache.set(SETTINGS_PATH, settings)
        return settings
