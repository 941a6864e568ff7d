"""Dependency injection for FastAPI routes.
Routes depend on repository abstractions; the concrete backend is chosen here."""
from functools import lru_cache

from fastapi import Depends

from visited_places.application.services.location_presenter import LocationPresenter
from visited_places.application.use_cases.get_location import GetLocationUseCase
from visited_places.application.use_cases.list_locations import ListLocationsUseCase
from visited_places.application.use_cases.remove_location import RemoveLocationUseCase
from visited_places.application.use_cases.save_location import (
    CreateLocationUseCase,
    UpdateLocationUseCase,
)
from visited_places.config import get_settings
from visited_places.domain.repositories.category_repository import CategoryRepository
from visited_places.domain.repositories.location_repository import LocationRepository
from visited_places.infrastructure.persistence.db import SessionLocal
from visited_places.infrastructure.persistence.repositories.in_memory_category_repository import (
    InMemoryCategoryRepository,
)
from visited_places.infrastructure.persistence.repositories.in_memory_location_repository import (
    InMemoryLocationRepository,
)
from visited_places.infrastructure.persistence.repositories.sqlalchemy_category_repository import (
    SQLAlchemyCategoryRepository,
)
from visited_places.infrastructure.persistence.repositories.sqlalchemy_location_repository import (
    SQLAlchemyLocationRepository,
)
from visited_places.utils.map_utils import get_map_diagnostics_logger


@lru_cache()
def _db_session():
    # Shared session (dev simplicity)
    return SessionLocal()


@lru_cache()
def get_location_repository() -> LocationRepository:
    """Get location repository instance.

    - Default: in-memory (fast tests/dev)
    - If USE_DB_REPOS=true: SQLAlchemy repository with shared session
    """
    if get_settings().USE_DB_REPOS:
        return SQLAlchemyLocationRepository(_db_session())
    return InMemoryLocationRepository()


@lru_cache()
def get_category_repository() -> CategoryRepository:
    """Get category repository instance."""
    if get_settings().USE_DB_REPOS:
        return SQLAlchemyCategoryRepository(_db_session())
    return InMemoryCategoryRepository()


@lru_cache()
def get_location_presenter() -> LocationPresenter:
    """Presenter wired with map link settings and debug-gated diagnostics."""
    settings = get_settings()
    return LocationPresenter(
        map_link_template=settings.MAP_LINK_TEMPLATE,
        map_zoom=settings.MAP_DEFAULT_ZOOM,
        diagnostics=get_map_diagnostics_logger(settings.DEBUG),
    )


def get_list_locations_use_case(
    location_repository: LocationRepository = Depends(get_location_repository),
    category_repository: CategoryRepository = Depends(get_category_repository),
    presenter: LocationPresenter = Depends(get_location_presenter),
) -> ListLocationsUseCase:
    return ListLocationsUseCase(location_repository, category_repository, presenter)


def get_location_use_case(
    location_repository: LocationRepository = Depends(get_location_repository),
    category_repository: CategoryRepository = Depends(get_category_repository),
    presenter: LocationPresenter = Depends(get_location_presenter),
) -> GetLocationUseCase:
    return GetLocationUseCase(location_repository, category_repository, presenter)


def get_create_location_use_case(
    location_repository: LocationRepository = Depends(get_location_repository),
    category_repository: CategoryRepository = Depends(get_category_repository),
    presenter: LocationPresenter = Depends(get_location_presenter),
) -> CreateLocationUseCase:
    return CreateLocationUseCase(location_repository, category_repository, presenter)


def get_update_location_use_case(
    location_repository: LocationRepository = Depends(get_location_repository),
    category_repository: CategoryRepository = Depends(get_category_repository),
    presenter: LocationPresenter = Depends(get_location_presenter),
) -> UpdateLocationUseCase:
    return UpdateLocationUseCase(location_repository, category_repository, presenter)


def get_remove_location_use_case(
    location_repository: LocationRepository = Depends(get_location_repository),
) -> RemoveLocationUseCase:
    return RemoveLocationUseCase(location_repository)
