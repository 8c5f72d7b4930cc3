"""Display settings schemas."""

from pydantic import BaseModel, Field


class SettingsUpdate(BaseModel):
    """Schema for upserting display settings; omitted fields keep their value."""

    glow_intensity: float | None = Field(None, ge=0.2, le=2.5)
    auto_rotate_speed: float | None = Field(None, ge=0.0, le=2.0)
    zoom_sensitivity: float | None = Field(None, ge=0.2, le=3.0)
    particle_density: int | None = Field(None, ge=0, le=400)
    performance_mode: bool | None = None
    reduced_motion: bool | None = None
    high_contrast: bool | None = None


class SettingsResponse(BaseModel):
    """Schema for display settings response."""

    user_id: int
    glow_intensity: float
    auto_rotate_speed: float
    zoom_sensitivity: float
    particle_density: int
    performance_mode: bool
    reduced_motion: bool
    high_contrast: bool

    model_config = {"from_attributes": True}
