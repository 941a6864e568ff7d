"""Use case: List a user's locations."""
from visited_places.application.dto.location_dto import LocationListDTO
from visited_places.application.services.location_presenter import LocationPresenter
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.domain.repositories.location_repository import LocationRepository


class ListLocationsUseCase:
    """Use case to list the locations of one user with category names resolved."""

    def __init__(
        self,
        location_repository: LocationRepository,
        category_repository: CategoryRepository,
        presenter: LocationPresenter,
    ):
        self._location_repo = location_repository
        self._category_repo = category_repository
        self._presenter = presenter

    async def execute(self, user_id: str, skip: int = 0, limit: int = 100) -> LocationListDTO:
        """Execute use case to list locations.

        Args:
            user_id: Owner of the locations
            skip: Offset for pagination
            limit: Page size

        Returns:
            LocationListDTO with processed rows and the total count
        """
        locations = await self._location_repo.list_for_user(user_id, skip=skip, limit=limit)
        total = await self._location_repo.count_for_user(user_id)

        names = {c.id: c.name for c in await self._category_repo.list_all()}
        items = [
            self._presenter.to_processed(loc, names.get(loc.category_id))
            for loc in locations
        ]
        return LocationListDTO(items=items, total=total, skip=skip, limit=limit)
