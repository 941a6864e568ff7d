"""Location domain entity - pure business logic."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from visited_places.constants import RESOURCE_LINK_ORDER
from visited_places.utils.map_utils import CoordinateResult, extract_coordinates_from_url


@dataclass
class Photo:
    """Photo attached to a location."""
    photo_url: str
    is_main: Optional[bool] = None


@dataclass
class Location:
    """Location domain entity."""
    id: Optional[int]
    user_id: str
    name: str
    location: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    map_url: Optional[str] = None
    web_url: Optional[str] = None
    instagram_url: Optional[str] = None
    facebook_url: Optional[str] = None
    youtube_url: Optional[str] = None
    visited: bool = False
    photos: List[Photo] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_valid(self) -> bool:
        """Validate location business rules."""
        return bool(
            self.name and
            self.name.strip() and
            self.user_id and
            self.user_id.strip()
        )

    def main_photo_url(self) -> Optional[str]:
        """URL of the photo flagged as main, falling back to the first photo."""
        for photo in self.photos:
            if photo.is_main:
                return photo.photo_url
        return self.photos[0].photo_url if self.photos else None

    def coordinates(self, diagnostics: Optional[logging.Logger] = None) -> CoordinateResult:
        """Coordinates parsed from the map URL, or NO_MATCH."""
        return extract_coordinates_from_url(self.map_url, diagnostics)

    def mark_visited(self, visited: bool = True):
        """Update visited flag."""
        self.visited = visited

    def resource_links(self) -> List[Tuple[str, str]]:
        """(key, url) pairs for every external link that is set."""
        urls = {
            "web": self.web_url,
            "facebook": self.facebook_url,
            "instagram": self.instagram_url,
            "youtube": self.youtube_url,
            "map": self.map_url,
        }
        return [(key, urls[key]) for key in RESOURCE_LINK_ORDER if urls[key]]
