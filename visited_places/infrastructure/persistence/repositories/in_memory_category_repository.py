"""In-memory implementation of CategoryRepository for testing."""
from typing import Optional, List, Dict
from visited_places.domain.entities.category import Category
from visited_places.domain.repositories.category_repository import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation for testing."""

    def __init__(self):
        self._categories: Dict[int, Category] = {}
        self._next_id = 1

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self._categories.get(category_id)

    async def create(self, category: Category) -> Category:
        """Create new category."""
        if not category.is_valid():
            raise ValueError("Invalid category")

        # Check for duplicate name
        if any(c.name == category.name for c in self._categories.values()):
            raise ValueError(f"Category '{category.name}' already exists")

        if category.id is None:
            category.id = self._next_id
            self._next_id += 1

        self._categories[category.id] = category
        return category

    async def list_all(self) -> List[Category]:
        """List all categories."""
        return sorted(self._categories.values(), key=lambda c: c.name)
