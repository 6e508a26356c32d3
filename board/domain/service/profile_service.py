"""Profile domain service."""

from datetime import UTC, datetime

import logfire

from board.config import ProfileSettings
from board.domain.model.profile import Profile
from board.domain.repository import ProfileRepository
from board.domain.value import AuthToken, ProfileId

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(
        self, profile_repository: ProfileRepository, settings: ProfileSettings
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            settings: Profile field validation rules
        """
        self.profile_repository = profile_repository
        self.settings = settings

    async def create_profile(
        self, auth: AuthToken, name: str, text: str, sn: str
    ) -> Profile:
        """Create and persist a profile for the authenticated user.

        Raises:
            ValidationError: If any field violates its rule
        """
        with logfire.span(
            "profile_service.create_profile", user_id=str(auth.user), sn=sn
        ):
            profile = Profile.create(
                auth, name, text, sn, datetime.now(UTC), self.settings
            )
            await self.profile_repository.insert(profile)
            logfire.info("Profile created", profile_id=str(profile.id))
            return profile

    async def change_profile(
        self,
        auth: AuthToken,
        profile_id: ProfileId,
        name: str,
        text: str,
        sn: str,
    ) -> Profile:
        """Change a profile's fields.

        Raises:
            NotFoundError: If the profile doesn't exist
            NotAuthorizedError: If the caller does not own the profile
            ValidationError: If any field violates its rule
        """
        with logfire.span(
            "profile_service.change_profile",
            profile_id=str(profile_id),
            user_id=str(auth.user),
        ):
            profile = await self.profile_repository.find_one(profile_id)
            changed = profile.change_data(
                auth, name, text, sn, datetime.now(UTC), self.settings
            )
            await self.profile_repository.update(changed)
            logfire.info("Profile changed", profile_id=str(profile_id))
            return changed
