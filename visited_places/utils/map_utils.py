"""Map utilities for extracting coordinates from map service URLs.

Supports the URL dialects of the map services users paste into the catalog:

- mapy.cz: ``?x=<lng>&y=<lat>`` query parameters
- Google Maps: ``@<lat>,<lng>,<zoom>z`` path fragment
- Generic viewers: ``q=<lat>,<lng>`` or ``ll=<lat>,<lng>`` query parameters
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple, Union

from visited_places.domain.value_objects.coordinates import (
    Coordinates,
    NO_MATCH,
    NoMatch,
    is_within_bounds,
)

logger = logging.getLogger(__name__)

# Silent logger used unless diagnostics are switched on
_null_logger = logging.getLogger(f"{__name__}.null")
_null_logger.addHandler(logging.NullHandler())
_null_logger.propagate = False
_null_logger.disabled = True

CoordinateResult = Union[Coordinates, NoMatch]

# ASCII digits only; one way to split a digit run so matching stays linear
_NUMBER = r"(-?[0-9]+(?:\.[0-9]*)?)"


@dataclass(frozen=True)
class PatternRule:
    """Recognizer for one URL dialect."""
    service: str
    format: str
    regex: Pattern
    reversed: bool = False

    def parse(self, match) -> Tuple[float, float]:
        """Return (lat, lng) from a regex match, honoring the capture order."""
        first, second = float(match.group(1)), float(match.group(2))
        if self.reversed:
            return second, first
        return first, second


# Order is priority: specific dialects before generic ones that could
# match substrings of them.
PATTERN_RULES: Tuple[PatternRule, ...] = (
    PatternRule(
        service="mapy.cz",
        format="x=lng, y=lat",
        regex=re.compile(rf"[?&]x={_NUMBER}&y={_NUMBER}"),
        reversed=True,
    ),
    PatternRule(
        service="Google Maps",
        format="@lat,lng,zoom",
        regex=re.compile(rf"@{_NUMBER},{_NUMBER},([0-9]+(?:\.[0-9]*)?)z"),
    ),
    PatternRule(
        service="Generic",
        format="q=lat,lng",
        regex=re.compile(rf"q={_NUMBER},{_NUMBER}"),
    ),
    PatternRule(
        service="Generic",
        format="ll=lat,lng",
        regex=re.compile(rf"ll={_NUMBER},{_NUMBER}"),
    ),
)


def get_map_diagnostics_logger(debug: bool) -> logging.Logger:
    """Logger for extraction failures: the module logger in debug mode, else a silent one."""
    return logger if debug else _null_logger


def extract_coordinates_from_url(
    url: Optional[str],
    diagnostics: Optional[logging.Logger] = None,
) -> CoordinateResult:
    """
    Extract geographic coordinates from a map service URL.

    The first rule whose pattern matches decides the outcome. If its values
    are out of range the result is NO_MATCH; lower-priority rules are not
    tried for the same input.

    Examples:
    - https://mapy.cz/zakladni?x=14.4378&y=50.0755 → lat 50.0755, lng 14.4378
    - https://maps.google.com/@50.0755,14.4378,15z → lat 50.0755, lng 14.4378

    Args:
        url: Map URL (may be empty, None or unrelated to maps)
        diagnostics: Logger receiving unexpected parse failures

    Returns:
        Coordinates, or NO_MATCH if no valid pair is present
    """
    if not url:
        return NO_MATCH

    diagnostics = diagnostics or _null_logger

    try:
        for rule in PATTERN_RULES:
            match = rule.regex.search(url)
            if not match:
                continue

            lat, lng = rule.parse(match)
            if not is_within_bounds(lat, lng):
                diagnostics.debug(
                    f"{rule.service} coordinates out of range ({rule.format}): lat={lat}, lng={lng}"
                )
                return NO_MATCH
            return Coordinates(lat=lat, lng=lng)

        return NO_MATCH
    except Exception as e:
        diagnostics.error(f"Error extracting coordinates from URL {url!r}: {e}")
        return NO_MATCH
