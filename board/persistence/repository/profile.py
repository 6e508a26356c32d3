"""MongoDB implementation of Profile repository."""

import logfire
from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase

from board.domain.error import NotFoundError, PartialNotFoundError
from board.domain.model import Profile
from board.domain.repository.profile import ProfileRepository
from board.domain.value import AuthToken, ProfileId
from board.persistence.database import PROFILES
from board.persistence.mappers import document_to_profile, profile_to_document


class MongoProfileRepository(ProfileRepository):
    """MongoDB implementation of ProfileRepository."""

    def __init__(self, database: AsyncDatabase) -> None:
        self.database = database

    @property
    def _profiles(self):
        return self.database[PROFILES]

    async def find_one(self, profile_id: ProfileId) -> Profile:
        """Find a profile by ID."""
        with logfire.span("profile_repository.find_one", profile_id=str(profile_id)):
            document = await self._profiles.find_one({"_id": profile_id})

            if document is None:
                logfire.warn("Profile not found", profile_id=str(profile_id))
                raise NotFoundError("Profile", str(profile_id))

            return document_to_profile(document)

    async def find_in(self, profile_ids: list[ProfileId]) -> list[Profile]:
        """Find a batch of profiles, newest first."""
        with logfire.span("profile_repository.find_in", requested=len(profile_ids)):
            documents = (
                await self._profiles.find({"_id": {"$in": list(profile_ids)}})
                .sort("date", DESCENDING)
                .to_list()
            )

            if len(documents) != len(profile_ids):
                raise PartialNotFoundError(
                    "Profile",
                    [str(i) for i in profile_ids],
                    [str(d["_id"]) for d in documents],
                )

            return [document_to_profile(d) for d in documents]

    async def find_all(self, auth: AuthToken) -> list[Profile]:
        """Find every profile owned by the authenticated user."""
        with logfire.span("profile_repository.find_all", user_id=str(auth.user)):
            documents = (
                await self._profiles.find({"user": auth.user})
                .sort("date", DESCENDING)
                .to_list()
            )
            return [document_to_profile(d) for d in documents]

    async def insert(self, profile: Profile) -> None:
        """Persist a new profile."""
        with logfire.span("profile_repository.insert", profile_id=str(profile.id)):
            await self._profiles.insert_one(profile_to_document(profile))

    async def update(self, profile: Profile) -> None:
        """Replace the stored record of an existing profile."""
        with logfire.span("profile_repository.update", profile_id=str(profile.id)):
            await self._profiles.replace_one(
                {"_id": profile.id}, profile_to_document(profile)
            )
