"""Builds location DTOs from domain entities."""
import logging
from typing import Optional

from visited_places.application.dto.location_dto import (
    LocationDetailDTO,
    MapPreviewDTO,
    PhotoDTO,
    ProcessedLocationDTO,
    ResourceLinkDTO,
)
from visited_places.constants import get_resource_icon_and_title
from visited_places.domain.entities.location import Location


class LocationPresenter:
    """Turns Location entities into the DTOs the frontend consumes."""

    def __init__(
        self,
        map_link_template: Optional[str] = None,
        map_zoom: int = 15,
        diagnostics: Optional[logging.Logger] = None,
    ):
        self._map_link_template = map_link_template
        self._map_zoom = map_zoom
        self._diagnostics = diagnostics

    def to_processed(self, location: Location, category_name: Optional[str] = None) -> ProcessedLocationDTO:
        """Flatten a location for list views."""
        return ProcessedLocationDTO(
            id=location.id,
            name=location.name,
            location=location.location,
            category_id=location.category_id,
            category_name=category_name or location.category_name or "",
            main_photo_url=location.main_photo_url(),
            map_url=location.map_url,
            web_url=location.web_url,
            instagram_url=location.instagram_url,
            facebook_url=location.facebook_url,
            youtube_url=location.youtube_url,
            visited=location.visited,
            photos=[PhotoDTO(photo_url=p.photo_url, is_main=bool(p.is_main)) for p in location.photos],
        )

    def build_map_preview(self, location: Location) -> Optional[MapPreviewDTO]:
        """Map preview card, or None when the map URL has no usable coordinates."""
        coords = location.coordinates(self._diagnostics)
        if not coords:
            return None
        link = None
        if self._map_link_template:
            link = self._map_link_template.format(lat=coords.lat, lng=coords.lng, zoom=self._map_zoom)
        return MapPreviewDTO(lat=coords.lat, lng=coords.lng, maps_link_url=link)

    def to_detail(self, location: Location, category_name: Optional[str] = None) -> LocationDetailDTO:
        """Full detail view of a location."""
        links = []
        for key, url in location.resource_links():
            meta = get_resource_icon_and_title(key) or {}
            links.append(ResourceLinkDTO(key=key, url=url, icon=meta.get("icon"), title=meta.get("title")))
        return LocationDetailDTO(
            location=self.to_processed(location, category_name),
            map=self.build_map_preview(location),
            links=links,
        )
