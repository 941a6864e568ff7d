"""Coordinate value object - immutable and validated."""
from dataclasses import dataclass

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def is_within_bounds(lat: float, lng: float) -> bool:
    """Check latitude/longitude against the inclusive WGS84 ranges."""
    return MIN_LATITUDE <= lat <= MAX_LATITUDE and MIN_LONGITUDE <= lng <= MAX_LONGITUDE


@dataclass(frozen=True)
class Coordinates:
    """Immutable coordinate value object."""
    lat: float
    lng: float

    def __post_init__(self):
        """Validate coordinates."""
        if not MIN_LATITUDE <= self.lat <= MAX_LATITUDE:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")
        if not MIN_LONGITUDE <= self.lng <= MAX_LONGITUDE:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.lng}")

    def is_valid(self) -> bool:
        """Check if coordinates are valid."""
        return is_within_bounds(self.lat, self.lng)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"lat": self.lat, "lng": self.lng}


class NoMatch:
    """Negative extraction result: no valid coordinate pair was found.

    Falsy, so callers can write ``if result:`` and get a ``Coordinates``.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {}


NO_MATCH = NoMatch()
