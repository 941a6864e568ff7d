"""Pydantic schemas for location API requests and responses."""
from pydantic import BaseModel, Field
from typing import Optional, List

from visited_places.constants import MAX_VARCHAR_LENGTH_LONG


# Request Schemas
class PhotoSchema(BaseModel):
    """Photo schema."""
    photo_url: str = Field(..., max_length=MAX_VARCHAR_LENGTH_LONG)
    is_main: Optional[bool] = None


class LocationCreateSchema(BaseModel):
    """Payload for creating a location."""
    name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = None
    category_id: Optional[int] = None
    map_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    web_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    instagram_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    facebook_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    youtube_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    visited: bool = False
    photos: List[PhotoSchema] = []


class LocationUpdateSchema(BaseModel):
    """Partial update payload; only fields that are sent are changed."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = None
    category_id: Optional[int] = None
    map_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    web_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    instagram_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    facebook_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    youtube_url: Optional[str] = Field(None, max_length=MAX_VARCHAR_LENGTH_LONG)
    visited: Optional[bool] = None
    photos: Optional[List[PhotoSchema]] = None


class CategoryCreateSchema(BaseModel):
    """Payload for creating a category."""
    name: str = Field(..., min_length=1, max_length=255)


# Response Schemas
class CategorySchema(BaseModel):
    """Category schema."""
    id: int
    name: str


class ProcessedPhotoSchema(BaseModel):
    """Photo as returned to the frontend."""
    photo_url: str
    is_main: bool = False


class ProcessedLocationSchema(BaseModel):
    """Location row schema."""
    id: int
    name: str
    location: Optional[str] = None
    category_id: Optional[int] = None
    category_name: str = ""
    main_photo_url: Optional[str] = None
    map_url: Optional[str] = None
    web_url: Optional[str] = None
    instagram_url: Optional[str] = None
    facebook_url: Optional[str] = None
    youtube_url: Optional[str] = None
    visited: bool = False
    photos: List[ProcessedPhotoSchema] = []


class LocationListResponseSchema(BaseModel):
    """Paginated location list."""
    items: List[ProcessedLocationSchema]
    total: int
    skip: int
    limit: int


class MapPreviewSchema(BaseModel):
    """Map preview card schema."""
    lat: float
    lng: float
    maps_link_url: Optional[str] = None


class ResourceLinkSchema(BaseModel):
    """External link schema."""
    key: str
    url: str
    icon: Optional[str] = None
    title: Optional[str] = None


class LocationDetailResponseSchema(BaseModel):
    """Location detail schema."""
    location: ProcessedLocationSchema
    map: Optional[MapPreviewSchema] = None
    links: List[ResourceLinkSchema] = []


class RemovalResponseSchema(BaseModel):
    """Result of a removal request."""
    success: bool
    error: Optional[str] = None


class CoordinatesResponseSchema(BaseModel):
    """Coordinates extracted from a map URL."""
    matched: bool
    lat: Optional[float] = None
    lng: Optional[float] = None
