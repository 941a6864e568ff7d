"""Use cases: Create and update locations."""
import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from visited_places.application.dto.location_dto import LocationDetailDTO
from visited_places.application.services.location_presenter import LocationPresenter
from visited_places.domain.entities.location import Location, Photo
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.domain.repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "name",
    "location",
    "category_id",
    "map_url",
    "web_url",
    "instagram_url",
    "facebook_url",
    "youtube_url",
    "visited",
)


def _photos_from(data: Dict[str, Any]):
    return [Photo(photo_url=p["photo_url"], is_main=p.get("is_main")) for p in data.get("photos") or []]


class _SaveLocationBase:
    def __init__(
        self,
        location_repository: LocationRepository,
        category_repository: CategoryRepository,
        presenter: LocationPresenter,
    ):
        self._location_repo = location_repository
        self._category_repo = category_repository
        self._presenter = presenter

    async def _check_category(self, category_id: Optional[int]):
        if category_id is None:
            return None
        category = await self._category_repo.get_by_id(category_id)
        if category is None:
            raise ValueError(f"Category {category_id} does not exist")
        return category.name


class CreateLocationUseCase(_SaveLocationBase):
    """Use case to add a location to a user's catalog."""

    async def execute(self, user_id: str, data: Dict[str, Any]) -> LocationDetailDTO:
        """Create a location from validated request data.

        Raises:
            ValueError: If the location or its category is invalid
        """
        fields = {k: data[k] for k in EDITABLE_FIELDS if k in data}
        location = Location(id=None, user_id=user_id, photos=_photos_from(data), **fields)
        if not location.is_valid():
            raise ValueError("Location name is required")

        category_name = await self._check_category(location.category_id)
        created = await self._location_repo.create(location)
        logger.info(f"Created location {created.id} '{created.name}' for user {user_id}")
        return self._presenter.to_detail(created, category_name)


class UpdateLocationUseCase(_SaveLocationBase):
    """Use case to partially update a location."""

    async def execute(self, location_id: int, user_id: str, changes: Dict[str, Any]) -> Optional[LocationDetailDTO]:
        """Apply changes to a location.

        Returns:
            LocationDetailDTO, or None if the location does not exist

        Raises:
            ValueError: If the result would be invalid
        """
        existing = await self._location_repo.get_by_id(location_id, user_id)
        if existing is None:
            return None

        fields = {k: changes[k] for k in EDITABLE_FIELDS if k in changes}
        # Non-nullable columns: an explicit null means "leave as is"
        if fields.get("visited", False) is None:
            del fields["visited"]
        if changes.get("photos") is not None:
            fields["photos"] = _photos_from(changes)
        if "category_id" in fields:
            fields["category_name"] = None
        updated = replace(existing, **fields)
        if not updated.is_valid():
            raise ValueError("Location name is required")

        category_name = await self._check_category(updated.category_id)
        saved = await self._location_repo.update(updated)
        return self._presenter.to_detail(saved, category_name)
