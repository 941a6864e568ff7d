"""Repository interfaces."""
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.domain.repositories.location_repository import LocationRepository

__all__ = [
    "CategoryRepository",
    "LocationRepository",
]
