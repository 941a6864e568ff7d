"""SQLAlchemy models for the location catalog tables."""
from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    DateTime,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from visited_places.constants import MAX_VARCHAR_LENGTH_SHORT, MAX_VARCHAR_LENGTH_LONG
from visited_places.infrastructure.persistence.db import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(MAX_VARCHAR_LENGTH_SHORT), unique=True, nullable=False)

    locations = relationship("Location", back_populates="category")


class Location(Base):
    __tablename__ = "location"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(MAX_VARCHAR_LENGTH_SHORT), nullable=False, index=True)
    name = Column(String(MAX_VARCHAR_LENGTH_SHORT), nullable=False)
    location = Column(String(MAX_VARCHAR_LENGTH_SHORT))
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)
    map_url = Column(String(MAX_VARCHAR_LENGTH_LONG))
    web_url = Column(String(MAX_VARCHAR_LENGTH_LONG))
    instagram_url = Column(String(MAX_VARCHAR_LENGTH_LONG))
    facebook_url = Column(String(MAX_VARCHAR_LENGTH_LONG))
    youtube_url = Column(String(MAX_VARCHAR_LENGTH_LONG))
    visited = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime)
    updated_at = Column(DateTime)

    category = relationship("Category", back_populates="locations")
    photos = relationship(
        "Photo",
        back_populates="location",
        cascade="all, delete-orphan",
        order_by="Photo.id",
    )


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    location_id = Column(Integer, ForeignKey("location.id", ondelete="CASCADE"), nullable=False, index=True)
    photo_url = Column(String(MAX_VARCHAR_LENGTH_LONG), nullable=False)
    is_main = Column(Boolean)

    location = relationship("Location", back_populates="photos")
