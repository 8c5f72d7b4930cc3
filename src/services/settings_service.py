"""Display settings storage service."""

import logging

from sqlalchemy.orm import Session

from src.models.user_settings import UserSettings
from src.schemas.settings import SettingsUpdate

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for the one-per-user display settings record."""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, user_id: int) -> UserSettings | None:
        return self.db.query(UserSettings).filter(UserSettings.user_id == user_id).first()

    def get_settings(self, user_id: int) -> UserSettings:
        """Return stored settings, or an unsaved instance holding the defaults."""
        return self._find(user_id) or UserSettings.with_defaults(user_id)

    def upsert_settings(self, user_id: int, data: SettingsUpdate) -> UserSettings:
        """Create the settings row on first write, update it afterwards."""
        settings = self._find(user_id)
        if settings is None:
            settings = UserSettings.with_defaults(user_id)
            self.db.add(settings)
            logger.info(f"Creating display settings for user {user_id}")

        # Update fields that are provided
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(settings, field, value)

        self.db.commit()
        self.db.refresh(settings)
        return settings
