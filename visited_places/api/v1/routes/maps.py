"""Map URL parsing endpoints."""
from fastapi import APIRouter, Query

from visited_places.api.v1.schemas.location_schemas import CoordinatesResponseSchema
from visited_places.config import get_settings
from visited_places.utils.map_utils import extract_coordinates_from_url, get_map_diagnostics_logger

router = APIRouter(tags=["maps"])


@router.get("/maps/coordinates", response_model=CoordinatesResponseSchema)
async def get_coordinates_from_url(url: str = Query("", description="Map service URL")):
    """
    Extract coordinates from a mapy.cz, Google Maps or generic map URL.

    Always returns 200; ``matched`` is false when the URL holds no valid coordinates.
    """
    coords = extract_coordinates_from_url(url, get_map_diagnostics_logger(get_settings().DEBUG))
    if not coords:
        return CoordinatesResponseSchema(matched=False)
    return CoordinatesResponseSchema(matched=True, lat=coords.lat, lng=coords.lng)
