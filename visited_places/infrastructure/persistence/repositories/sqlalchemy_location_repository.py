"""SQLAlchemy implementation of LocationRepository."""
import logging
from datetime import datetime
from typing import Optional, List
from sqlalchemy.orm import Session
from visited_places.domain.entities.location import Location as LocationEntity, Photo as PhotoEntity
from visited_places.domain.repositories.location_repository import LocationRepository
from visited_places.infrastructure.persistence import models

logger = logging.getLogger(__name__)


def _to_entity(row: models.Location) -> LocationEntity:
    return LocationEntity(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        location=row.location,
        category_id=row.category_id,
        category_name=row.category.name if row.category else None,
        map_url=row.map_url,
        web_url=row.web_url,
        instagram_url=row.instagram_url,
        facebook_url=row.facebook_url,
        youtube_url=row.youtube_url,
        visited=bool(row.visited),
        photos=[PhotoEntity(photo_url=p.photo_url, is_main=p.is_main) for p in row.photos],
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply(row: models.Location, location: LocationEntity):
    row.name = location.name
    row.location = location.location
    row.category_id = location.category_id
    row.map_url = location.map_url
    row.web_url = location.web_url
    row.instagram_url = location.instagram_url
    row.facebook_url = location.facebook_url
    row.youtube_url = location.youtube_url
    row.visited = location.visited
    row.photos = [models.Photo(photo_url=p.photo_url, is_main=p.is_main) for p in location.photos]


class SQLAlchemyLocationRepository(LocationRepository):
    """Location repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def _get_row(self, location_id: int, user_id: str) -> Optional[models.Location]:
        return (
            self.session.query(models.Location)
            .filter(models.Location.id == location_id, models.Location.user_id == user_id)
            .first()
        )

    async def get_by_id(self, location_id: int, user_id: str) -> Optional[LocationEntity]:
        row = self._get_row(location_id, user_id)
        return _to_entity(row) if row else None

    async def create(self, location: LocationEntity) -> LocationEntity:
        if not location.is_valid():
            raise ValueError("Invalid location")
        now = datetime.utcnow()
        row = models.Location(id=location.id, user_id=location.user_id, created_at=now, updated_at=now)
        _apply(row, location)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return _to_entity(row)

    async def update(self, location: LocationEntity) -> LocationEntity:
        if not location.is_valid():
            raise ValueError("Invalid location")
        row = self._get_row(location.id, location.user_id)
        if row is None:
            raise ValueError(f"Location {location.id} not found")
        _apply(row, location)
        row.updated_at = datetime.utcnow()
        self.session.commit()
        self.session.refresh(row)
        return _to_entity(row)

    async def delete(self, location_id: int, user_id: str) -> bool:
        row = self._get_row(location_id, user_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.commit()
        logger.info(f"Deleted location {location_id} for user {user_id}")
        return True

    async def list_for_user(self, user_id: str, skip: int = 0, limit: int = 100) -> List[LocationEntity]:
        rows = (
            self.session.query(models.Location)
            .filter(models.Location.user_id == user_id)
            .order_by(models.Location.id)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [_to_entity(r) for r in rows]

    async def count_for_user(self, user_id: str) -> int:
        return self.session.query(models.Location).filter(models.Location.user_id == user_id).count()
