"""Use case: Get location detail."""
from typing import Optional
from visited_places.application.dto.location_dto import LocationDetailDTO
from visited_places.application.services.location_presenter import LocationPresenter
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.domain.repositories.location_repository import LocationRepository


class GetLocationUseCase:
    """Use case to get a location with its map preview and links."""

    def __init__(
        self,
        location_repository: LocationRepository,
        category_repository: CategoryRepository,
        presenter: LocationPresenter,
    ):
        self._location_repo = location_repository
        self._category_repo = category_repository
        self._presenter = presenter

    async def execute(self, location_id: int, user_id: str) -> Optional[LocationDetailDTO]:
        """Execute use case to get location detail.

        Returns:
            LocationDetailDTO if found, None otherwise
        """
        location = await self._location_repo.get_by_id(location_id, user_id)
        if not location:
            return None

        category_name = location.category_name
        if not category_name and location.category_id is not None:
            category = await self._category_repo.get_by_id(location.category_id)
            category_name = category.name if category else None

        return self._presenter.to_detail(location, category_name)
