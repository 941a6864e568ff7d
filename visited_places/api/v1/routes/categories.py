"""Category API routes."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from visited_places.api.v1.schemas.location_schemas import CategoryCreateSchema, CategorySchema
from visited_places.core.dependencies import get_category_repository
from visited_places.domain.entities.category import Category
from visited_places.domain.repositories.category_repository import CategoryRepository

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=List[CategorySchema])
async def list_categories(repo: CategoryRepository = Depends(get_category_repository)):
    """List all categories, sorted by name."""
    categories = await repo.list_all()
    return [CategorySchema(id=c.id, name=c.name) for c in categories]


@router.post("/categories", response_model=CategorySchema, status_code=201)
async def create_category(
    payload: CategoryCreateSchema,
    repo: CategoryRepository = Depends(get_category_repository),
):
    """Create a category."""
    try:
        category = await repo.create(Category(id=None, name=payload.name.strip()))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return CategorySchema(id=category.id, name=category.name)
