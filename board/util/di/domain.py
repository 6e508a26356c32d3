"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import ProfileSettings
from board.domain.repository import ProfileRepository
from board.domain.service import ProfileService
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository, settings: ProfileSettings
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository, settings=settings)
