"""Profile repository interface."""

from abc import ABC, abstractmethod

from board.domain.model.profile import Profile
from board.domain.value import AuthToken, ProfileId


class ProfileRepository(ABC):
    """Repository for the Profile entity."""

    @abstractmethod
    async def find_one(self, profile_id: ProfileId) -> Profile:
        """Find a profile by ID.

        Raises:
            NotFoundError: If no profile has this ID
        """
        pass

    @abstractmethod
    async def find_in(self, profile_ids: list[ProfileId]) -> list[Profile]:
        """Find a batch of profiles, newest first.

        Raises:
            PartialNotFoundError: If any identifier did not resolve
        """
        pass

    @abstractmethod
    async def find_all(self, auth: AuthToken) -> list[Profile]:
        """Find every profile owned by the authenticated user, newest first."""
        pass

    @abstractmethod
    async def insert(self, profile: Profile) -> None:
        """Persist a new profile."""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> None:
        """Replace the stored record of an existing profile."""
        pass
