"""Data Transfer Objects for Location API responses."""
from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class PhotoDTO:
    """Photo DTO."""
    photo_url: str
    is_main: bool = False


@dataclass
class ResourceLinkDTO:
    """External link with the icon and title it is rendered with."""
    key: str
    url: str
    icon: Optional[str] = None
    title: Optional[str] = None


@dataclass
class MapPreviewDTO:
    """Map preview card DTO."""
    lat: float
    lng: float
    maps_link_url: Optional[str] = None


@dataclass
class ProcessedLocationDTO:
    """Location row as shown in the catalog table."""
    id: int
    name: str
    location: Optional[str]
    category_id: Optional[int]
    category_name: str
    main_photo_url: Optional[str]
    map_url: Optional[str] = None
    web_url: Optional[str] = None
    instagram_url: Optional[str] = None
    facebook_url: Optional[str] = None
    youtube_url: Optional[str] = None
    visited: bool = False
    photos: List[PhotoDTO] = field(default_factory=list)


@dataclass
class LocationListDTO:
    """Paginated location list."""
    items: List[ProcessedLocationDTO]
    total: int
    skip: int
    limit: int


@dataclass
class LocationDetailDTO:
    """Location detail with derived map preview and links."""
    location: ProcessedLocationDTO
    map: Optional[MapPreviewDTO] = None
    links: List[ResourceLinkDTO] = field(default_factory=list)


@dataclass
class RemovalResult:
    """Outcome of a location removal request."""
    success: bool
    error: Optional[str] = None
