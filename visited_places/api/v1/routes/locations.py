"""Location API routes - thin layer delegating to use cases."""
import logging
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from visited_places.api.dependencies import get_current_user_id, get_optional_user_id
from visited_places.api.v1.schemas.location_schemas import (
    LocationCreateSchema,
    LocationDetailResponseSchema,
    LocationListResponseSchema,
    LocationUpdateSchema,
    RemovalResponseSchema,
)
from visited_places.application.use_cases.get_location import GetLocationUseCase
from visited_places.application.use_cases.list_locations import ListLocationsUseCase
from visited_places.application.use_cases.remove_location import LOCATION_NOT_FOUND, RemoveLocationUseCase
from visited_places.application.use_cases.save_location import (
    CreateLocationUseCase,
    UpdateLocationUseCase,
)
from visited_places.config import settings
from visited_places.core.dependencies import (
    get_create_location_use_case,
    get_list_locations_use_case,
    get_location_use_case,
    get_remove_location_use_case,
    get_update_location_use_case,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["locations"])


@router.get("/locations", response_model=LocationListResponseSchema)
async def list_locations(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    user_id: str = Depends(get_current_user_id),
    use_case: ListLocationsUseCase = Depends(get_list_locations_use_case),
):
    """List the signed-in user's locations."""
    result = await use_case.execute(user_id, skip=skip, limit=limit)
    return LocationListResponseSchema(**asdict(result))


@router.get("/locations/{location_id}", response_model=LocationDetailResponseSchema)
async def get_location(
    location_id: int,
    user_id: str = Depends(get_current_user_id),
    use_case: GetLocationUseCase = Depends(get_location_use_case),
):
    """
    Get a location with its map preview and external links.

    ``map`` is null when the stored map URL holds no usable coordinates.
    """
    detail = await use_case.execute(location_id, user_id)
    if not detail:
        raise HTTPException(status_code=404, detail=f"Location {location_id} not found")
    return LocationDetailResponseSchema(**asdict(detail))


@router.post("/locations", response_model=LocationDetailResponseSchema, status_code=201)
async def create_location(
    payload: LocationCreateSchema,
    user_id: str = Depends(get_current_user_id),
    use_case: CreateLocationUseCase = Depends(get_create_location_use_case),
):
    """Add a location to the signed-in user's catalog."""
    try:
        detail = await use_case.execute(user_id, payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return LocationDetailResponseSchema(**asdict(detail))


@router.patch("/locations/{location_id}", response_model=LocationDetailResponseSchema)
async def update_location(
    location_id: int,
    payload: LocationUpdateSchema,
    user_id: str = Depends(get_current_user_id),
    use_case: UpdateLocationUseCase = Depends(get_update_location_use_case),
):
    """Update the fields sent in the payload."""
    try:
        detail = await use_case.execute(location_id, user_id, payload.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not detail:
        raise HTTPException(status_code=404, detail=f"Location {location_id} not found")
    return LocationDetailResponseSchema(**asdict(detail))


@router.delete("/locations/{location_id}", response_model=RemovalResponseSchema)
async def remove_location(
    location_id: int,
    confirm: bool = Query(False, description="Set once the user accepted the confirmation dialog"),
    user_id: Optional[str] = Depends(get_optional_user_id),
    use_case: RemoveLocationUseCase = Depends(get_remove_location_use_case),
):
    """
    Remove a location.

    Without ``confirm=true`` nothing is deleted and ``success`` is false.
    """
    result = await use_case.execute(location_id, user_id, confirmed=confirm)
    if result.error == LOCATION_NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.error)
    if result.error:
        logger.info(f"Location {location_id} not removed: {result.error}")
    return RemovalResponseSchema(**asdict(result))
