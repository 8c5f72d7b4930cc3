"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_bookmark_service, get_current_user
from src.models.bookmark import Bookmark
from src.models.user import User
from src.schemas.bookmark import (
    BookmarkCreate,
    BookmarkLayoutUpdate,
    BookmarkResponse,
    BookmarkUpdate,
)
from src.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/api/v1/bookmarks", tags=["bookmarks"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found")


@router.get("", response_model=list[BookmarkResponse])
def list_bookmarks(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
) -> list[Bookmark]:
    """Get all bookmarks owned by the current user."""
    return service.list_bookmarks(current_user.id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    bookmark_data: BookmarkCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
) -> Bookmark:
    """Create a new bookmark."""
    return service.create_bookmark(current_user.id, bookmark_data)


# Registered before /{bookmark_id} so "layout" is never parsed as an id
@router.put("/layout", status_code=status.HTTP_204_NO_CONTENT)
def update_layout(
    layouts: list[BookmarkLayoutUpdate],
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Persist positions, scale and pin state for a batch of bookmarks.

    The whole body is validated before anything is written, so one bad entry
    rejects the batch. Entries for bookmarks the caller does not own are
    ignored.
    """
    service.update_layouts(current_user.id, layouts)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
) -> Bookmark:
    """Get a specific bookmark."""
    bookmark = service.get_bookmark(bookmark_id, current_user.id)
    if bookmark is None:
        raise _not_found()
    return bookmark


@router.put("/{bookmark_id}", response_model=BookmarkResponse)
def update_bookmark(
    bookmark_id: int,
    bookmark_data: BookmarkUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
) -> Bookmark:
    """Update a bookmark."""
    bookmark = service.update_bookmark(bookmark_id, current_user.id, bookmark_data)
    if bookmark is None:
        raise _not_found()
    return bookmark


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(
    bookmark_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark."""
    if not service.delete_bookmark(bookmark_id, current_user.id):
        raise _not_found()
