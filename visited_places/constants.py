"""Application constants that never change across environments."""
from typing import Dict, Optional

# ===== Resource Links =====
# Icon and display title for each kind of link shown next to a location
RESOURCE_LINKS: Dict[str, Dict[str, str]] = {
    "web": {"icon": "i-heroicons-globe-alt", "title": "Website"},
    "facebook": {"icon": "i-simple-icons-facebook", "title": "Facebook"},
    "instagram": {"icon": "i-simple-icons-instagram", "title": "Instagram"},
    "youtube": {"icon": "i-simple-icons-youtube", "title": "YouTube"},
    "location": {"icon": "i-heroicons-map-pin", "title": "Location"},
    "visited": {"icon": "i-heroicons-check-circle", "title": "Visited"},
    "map": {"icon": "i-heroicons-map", "title": "Map"},
}

# Order in which a location's external links are listed
RESOURCE_LINK_ORDER = ("web", "facebook", "instagram", "youtube", "map")

# ===== Database Constraints =====
MAX_VARCHAR_LENGTH_SHORT = 255
MAX_VARCHAR_LENGTH_MEDIUM = 512
MAX_VARCHAR_LENGTH_LONG = 1024


def get_resource_icon_and_title(key: str) -> Optional[Dict[str, str]]:
    """Return the icon and title for a resource key, or None if the key is unknown."""
    entry = RESOURCE_LINKS.get(key)
    return dict(entry) if entry else None
