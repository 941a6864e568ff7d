"""Category repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from visited_places.domain.entities.category import Category


class CategoryRepository(ABC):
    """Repository interface for Category entity."""

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """Create new category."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Category]:
        """List all categories."""
        pass
