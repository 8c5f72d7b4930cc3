"""Bookmark storage service.

Every query in this module filters on the owning user's id, so a bookmark that
belongs to someone else behaves exactly like one that does not exist.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from src.models.bookmark import Bookmark
from src.schemas.bookmark import BookmarkCreate, BookmarkLayoutUpdate, BookmarkUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of applying a layout batch."""

    applied: int
    skipped: int


class BookmarkService:
    """Service for owner-scoped bookmark operations."""

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, user_id: int):
        return self.db.query(Bookmark).filter(Bookmark.user_id == user_id)

    def list_bookmarks(self, user_id: int) -> list[Bookmark]:
        """Return the user's bookmarks in creation order."""
        return self._owned(user_id).order_by(Bookmark.id).all()

    def get_bookmark(self, bookmark_id: int, user_id: int) -> Bookmark | None:
        """Return the bookmark if it exists and is owned by the user."""
        return self._owned(user_id).filter(Bookmark.id == bookmark_id).first()

    def create_bookmark(self, user_id: int, data: BookmarkCreate) -> Bookmark:
        """Create a bookmark owned by the user."""
        bookmark = Bookmark(user_id=user_id, **data.model_dump())
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def update_bookmark(
        self, bookmark_id: int, user_id: int, data: BookmarkUpdate
    ) -> Bookmark | None:
        """Apply the provided fields to an owned bookmark."""
        bookmark = self.get_bookmark(bookmark_id, user_id)
        if bookmark is None:
            return None

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in ("title", "url", "category", "scale", "pinned"):
                # Required columns cannot be cleared
                continue
            setattr(bookmark, field, value)

        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete_bookmark(self, bookmark_id: int, user_id: int) -> bool:
        """Delete an owned bookmark. Returns False if nothing was deleted."""
        bookmark = self.get_bookmark(bookmark_id, user_id)
        if bookmark is None:
            return False

        self.db.delete(bookmark)
        self.db.commit()
        logger.info(f"Deleted bookmark {bookmark_id} for user {user_id}")
        return True

    def update_layouts(self, user_id: int, layouts: list[BookmarkLayoutUpdate]) -> LayoutResult:
        """Apply a layout batch in a single transaction.

        Entries naming bookmarks the user does not own are skipped without
        error. When an id appears more than once the last entry wins.
        """
        if not layouts:
            return LayoutResult(applied=0, skipped=0)

        requested_ids = sorted({layout.id for layout in layouts})
        owned = {
            bookmark.id: bookmark
            for bookmark in self._owned(user_id).filter(Bookmark.id.in_(requested_ids)).all()
        }

        applied = 0
        skipped = 0
        try:
            for layout in layouts:
                bookmark = owned.get(layout.id)
                if bookmark is None:
                    skipped += 1
                    continue
                bookmark.x = layout.x
                bookmark.y = layout.y
                bookmark.z = layout.z
                bookmark.scale = layout.scale
                bookmark.pinned = layout.pinned
                applied += 1
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Layout batch for user {user_id}: {applied} applied, {skipped} skipped")
        return LayoutResult(applied=applied, skipped=skipped)
