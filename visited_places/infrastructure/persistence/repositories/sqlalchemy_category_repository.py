"""SQLAlchemy implementation of CategoryRepository."""
from typing import Optional, List
from sqlalchemy.orm import Session
from visited_places.domain.entities.category import Category as CategoryEntity
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.infrastructure.persistence import models


def _to_entity(row: models.Category) -> CategoryEntity:
    return CategoryEntity(id=row.id, name=row.name)


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Category repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, category_id: int) -> Optional[CategoryEntity]:
        row = self.session.get(models.Category, category_id)
        return _to_entity(row) if row else None

    async def create(self, category: CategoryEntity) -> CategoryEntity:
        if not category.is_valid():
            raise ValueError("Invalid category")
        existing = self.session.query(models.Category).filter(models.Category.name == category.name).first()
        if existing:
            raise ValueError(f"Category '{category.name}' already exists")
        row = models.Category(id=category.id, name=category.name)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return _to_entity(row)

    async def list_all(self) -> List[CategoryEntity]:
        rows = self.session.query(models.Category).order_by(models.Category.name).all()
        return [_to_entity(r) for r in rows]
