"""In-memory implementation of LocationRepository for testing.
Can replace any LocationRepository."""
from datetime import datetime
from typing import Optional, List, Dict
from visited_places.domain.entities.location import Location
from visited_places.domain.repositories.location_repository import LocationRepository


class InMemoryLocationRepository(LocationRepository):
    """In-memory implementation for testing and local development."""

    def __init__(self):
        self._locations: Dict[int, Location] = {}
        self._next_id = 1

    async def get_by_id(self, location_id: int, user_id: str) -> Optional[Location]:
        """Get a user's location by ID."""
        location = self._locations.get(location_id)
        if location is None or location.user_id != user_id:
            return None
        return location

    async def create(self, location: Location) -> Location:
        """Create new location."""
        if not location.is_valid():
            raise ValueError("Invalid location")

        # Assign ID if not set
        if location.id is None:
            location.id = self._next_id
            self._next_id += 1
        elif location.id in self._locations:
            raise ValueError(f"Location with id {location.id} already exists")
        else:
            self._next_id = max(self._next_id, location.id + 1)

        now = datetime.utcnow()
        location.created_at = location.created_at or now
        location.updated_at = now
        self._locations[location.id] = location
        return location

    async def update(self, location: Location) -> Location:
        """Update existing location."""
        existing = self._locations.get(location.id) if location.id is not None else None
        if existing is None or existing.user_id != location.user_id:
            raise ValueError(f"Location {location.id} not found")
        if not location.is_valid():
            raise ValueError("Invalid location")

        location.updated_at = datetime.utcnow()
        self._locations[location.id] = location
        return location

    async def delete(self, location_id: int, user_id: str) -> bool:
        """Delete a user's location."""
        if await self.get_by_id(location_id, user_id) is None:
            return False
        del self._locations[location_id]
        return True

    async def list_for_user(self, user_id: str, skip: int = 0, limit: int = 100) -> List[Location]:
        """List a user's locations with pagination."""
        locations = [loc for loc in self._locations.values() if loc.user_id == user_id]
        return locations[skip:skip + limit]

    async def count_for_user(self, user_id: str) -> int:
        """Count a user's locations."""
        return sum(1 for loc in self._locations.values() if loc.user_id == user_id)
