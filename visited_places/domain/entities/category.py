"""Category domain entity - pure business logic."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Category a location belongs to (castle, lake, museum, ...)."""
    id: Optional[int]
    name: str

    def is_valid(self) -> bool:
        """Validate category business rules."""
        return bool(self.name and self.name.strip())
