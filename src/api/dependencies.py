"""FastAPI dependencies for the session gate and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.models.user import User
from src.services.auth import decode_session_token, get_user_by_id
from src.services.bookmark_service import BookmarkService
from src.services.settings_service import SettingsService

settings = get_settings()

session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def get_current_user(
    token: Annotated[str | None, Depends(session_cookie)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the session cookie."""
    if not token:
        raise _unauthorized("Not authenticated")

    payload = decode_session_token(token)
    if payload is None:
        raise _unauthorized("Session expired or invalid")

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise _unauthorized("Session expired or invalid")

    user = get_user_by_id(db, int(user_id))
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_bookmark_service(
    db: Annotated[Session, Depends(get_db)],
) -> BookmarkService:
    """Get bookmark service bound to the request session."""
    return BookmarkService(db)


def get_settings_service(
    db: Annotated[Session, Depends(get_db)],
) -> SettingsService:
    """Get settings service bound to the request session."""
    return SettingsService(db)
