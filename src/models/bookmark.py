"""Bookmark model."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """A saved link placed as a node in the user's 3D scene."""

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)

    # Scene position; NULL until the user drags the node somewhere
    x = Column(Float, nullable=True)
    y = Column(Float, nullable=True)
    z = Column(Float, nullable=True)
    scale = Column(Float, nullable=False, default=1.0, server_default="1")
    pinned = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    user = relationship("User", backref="bookmarks")
