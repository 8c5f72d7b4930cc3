"""Display settings API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_settings_service
from src.models.user import User
from src.models.user_settings import UserSettings
from src.schemas.settings import SettingsResponse, SettingsUpdate
from src.services.settings_service import SettingsService

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
async def get_display_settings(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SettingsService, Depends(get_settings_service)],
) -> UserSettings:
    """Get display settings, falling back to defaults until the first save."""
    return service.get_settings(current_user.id)


@router.put("", response_model=SettingsResponse)
async def update_display_settings(
    settings_update: SettingsUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SettingsService, Depends(get_settings_service)],
) -> UserSettings:
    """Create or update display settings for the current user."""
    return service.upsert_settings(current_user.id, settings_update)
