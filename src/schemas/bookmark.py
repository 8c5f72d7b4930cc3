"""Bookmark schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

MIN_SCALE = 0.2
MAX_SCALE = 3.0


def _check_url(value: str) -> str:
    if not value.lower().startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return value


BookmarkUrl = Annotated[str, Field(min_length=1, max_length=2048), AfterValidator(_check_url)]


class BookmarkCreate(BaseModel):
    """Create a new bookmark."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    url: BookmarkUrl
    category: str = Field(..., min_length=1, max_length=50)
    x: float | None = Field(None, allow_inf_nan=False)
    y: float | None = Field(None, allow_inf_nan=False)
    z: float | None = Field(None, allow_inf_nan=False)
    scale: float = Field(1.0, ge=MIN_SCALE, le=MAX_SCALE)
    pinned: bool = False


class BookmarkUpdate(BaseModel):
    """Partially update a bookmark; only provided fields change."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    url: BookmarkUrl | None = None
    category: str | None = Field(None, min_length=1, max_length=50)
    x: float | None = Field(None, allow_inf_nan=False)
    y: float | None = Field(None, allow_inf_nan=False)
    z: float | None = Field(None, allow_inf_nan=False)
    scale: float | None = Field(None, ge=MIN_SCALE, le=MAX_SCALE)
    pinned: bool | None = None


class BookmarkLayoutUpdate(BaseModel):
    """One entry of a layout batch submitted after a drag gesture."""

    id: int
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)
    z: float = Field(..., allow_inf_nan=False)
    scale: float = Field(..., ge=MIN_SCALE, le=MAX_SCALE)
    pinned: bool = False


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    url: str
    category: str
    x: float | None
    y: float | None
    z: float | None
    scale: float
    pinned: bool
    created_at: datetime
    updated_at: datetime
