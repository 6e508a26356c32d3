"""Unit tests for ProfileService."""

import pytest
from bson import ObjectId

from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.repository import ProfileRepository
from board.domain.service import ProfileService
from board.domain.value import AuthToken, ProfileId, TokenId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_auth() -> AuthToken:
    return AuthToken(id=TokenId(ObjectId()), user=UserId(ObjectId()))


class TestCreateProfile:
    """Tests for create_profile method."""

    @pytest.mark.asyncio
    async def test_create_profile_persists(self, unit_env):
        # Arrange
        service = await unit_env.get(ProfileService)
        repo = await unit_env.get(ProfileRepository)
        auth = make_auth()

        # Act
        profile = await service.create_profile(auth, "Alice", "hello", "alice")

        # Assert
        saved = await repo.find_one(profile.id)
        assert saved.user_id == auth.user
        assert saved.md_text == "<p>hello</p>\n"

    @pytest.mark.asyncio
    async def test_invalid_profile_not_persisted(self, unit_env):
        service = await unit_env.get(ProfileService)
        repo = await unit_env.get(ProfileRepository)
        auth = make_auth()

        with pytest.raises(ValidationError):
            await service.create_profile(auth, "Alice", "hello", "!")

        assert await repo.find_all(auth) == []


class TestChangeProfile:
    """Tests for change_profile method."""

    @pytest.mark.asyncio
    async def test_owner_changes_profile(self, unit_env):
        # Arrange
        service = await unit_env.get(ProfileService)
        repo = await unit_env.get(ProfileRepository)
        auth = make_auth()
        profile = await service.create_profile(auth, "Alice", "old", "alice")

        # Act
        result = await service.change_profile(auth, profile.id, "Alicia", "new", "alicia")

        # Assert
        saved = await repo.find_one(profile.id)
        assert saved == result
        assert saved.text == "new"
        assert saved.md_text == "<p>new</p>\n"

    @pytest.mark.asyncio
    async def test_other_user_cannot_change(self, unit_env):
        # Arrange
        service = await unit_env.get(ProfileService)
        repo = await unit_env.get(ProfileRepository)
        profile = await service.create_profile(make_auth(), "Alice", "t", "alice")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.change_profile(make_auth(), profile.id, "M", "t", "mallory")

        assert (await repo.find_one(profile.id)).name == "Alice"

    @pytest.mark.asyncio
    async def test_missing_profile_raises(self, unit_env):
        service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await service.change_profile(
                make_auth(), ProfileId(ObjectId()), "A", "t", "alice"
            )
