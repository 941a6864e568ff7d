"""Use case: Remove a location after the user confirmed it."""
import logging
from typing import Optional

from visited_places.application.dto.location_dto import RemovalResult
from visited_places.domain.repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)

LOCATION_NOT_FOUND = "Error deleting location: not found"


def confirmation_message(title: str) -> str:
    """Text of the confirmation dialog shown before deleting a location."""
    return (
        f'Do you really want to remove the location "{title}"?\n\n'
        "This cannot be undone. All related photos will be deleted as well."
    )


class RemoveLocationUseCase:
    """Use case to delete a location.

    Sequencing only: confirmation, then deletion scoped to the owner,
    then a success/failure result. Never raises.
    """

    def __init__(self, location_repository: LocationRepository):
        self._location_repo = location_repository

    async def execute(
        self,
        location_id: int,
        user_id: Optional[str],
        confirmed: bool,
    ) -> RemovalResult:
        """Execute the removal.

        Args:
            location_id: Location to delete
            user_id: Signed-in user, None if nobody is signed in
            confirmed: Whether the user accepted the confirmation dialog

        Returns:
            RemovalResult
        """
        if not confirmed:
            return RemovalResult(success=False)

        if not user_id:
            return RemovalResult(success=False, error="User is not signed in")

        try:
            deleted = await self._location_repo.delete(location_id, user_id)
        except Exception as e:
            logger.error(f"Unexpected error during location deletion {location_id}: {e}")
            return RemovalResult(success=False, error=str(e) or "Unexpected error while deleting location")

        if not deleted:
            return RemovalResult(success=False, error=LOCATION_NOT_FOUND)

        return RemovalResult(success=True)
