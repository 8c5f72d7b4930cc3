"""User display settings model."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer
from sqlalchemy.orm import backref, relationship

from src.database import Base
from src.models.mixins import TimestampMixin

DEFAULT_SETTINGS = {
    "glow_intensity": 1.1,
    "auto_rotate_speed": 0.35,
    "zoom_sensitivity": 1.0,
    "particle_density": 120,
    "performance_mode": False,
    "reduced_motion": False,
    "high_contrast": False,
}


class UserSettings(Base, TimestampMixin):
    """Per-user scene display preferences, created on first write."""

    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    glow_intensity = Column(Float, nullable=False, default=DEFAULT_SETTINGS["glow_intensity"])
    auto_rotate_speed = Column(Float, nullable=False, default=DEFAULT_SETTINGS["auto_rotate_speed"])
    zoom_sensitivity = Column(Float, nullable=False, default=DEFAULT_SETTINGS["zoom_sensitivity"])
    particle_density = Column(
        Integer, nullable=False, default=DEFAULT_SETTINGS["particle_density"]
    )
    performance_mode = Column(Boolean, nullable=False, default=False)
    reduced_motion = Column(Boolean, nullable=False, default=False)
    high_contrast = Column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship("User", backref=backref("display_settings", uselist=False))

    @classmethod
    def with_defaults(cls, user_id: int) -> "UserSettings":
        """Build an unsaved settings instance holding the default values."""
        return cls(user_id=user_id, **DEFAULT_SETTINGS)
