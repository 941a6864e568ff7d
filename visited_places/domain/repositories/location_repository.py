"""Location repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from visited_places.domain.entities.location import Location


class LocationRepository(ABC):
    """Repository interface for Location entity.

    Every lookup is scoped to the owning user.
    """

    @abstractmethod
    async def get_by_id(self, location_id: int, user_id: str) -> Optional[Location]:
        """Get a user's location by ID."""
        pass

    @abstractmethod
    async def create(self, location: Location) -> Location:
        """Create new location."""
        pass

    @abstractmethod
    async def update(self, location: Location) -> Location:
        """Update existing location."""
        pass

    @abstractmethod
    async def delete(self, location_id: int, user_id: str) -> bool:
        """Delete a user's location. Returns False if nothing was deleted."""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str, skip: int = 0, limit: int = 100) -> List[Location]:
        """List a user's locations with pagination."""
        pass

    @abstractmethod
    async def count_for_user(self, user_id: str) -> int:
        """Count a user's locations."""
        pass
