"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from board.config import Settings
from board.domain.repository import ProfileRepository, TopicRepository
from board.persistence.database import create_client, get_database
from board.persistence.repository import MongoProfileRepository, MongoTopicRepository
from board.util.di.base import ProviderBase
from board.util.observability import instrument_pymongo


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using MongoDB."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_client(self, settings: Settings) -> AsyncIterator[AsyncMongoClient]:
        """Provide MongoDB client, closed when the container closes."""
        # Instrument before the client exists so its commands are traced
        instrument_pymongo()
        client = create_client(settings)
        try:
            yield client
        finally:
            await client.close()
            logfire.info("MongoDB client closed")

    @provide(scope=Scope.APP)
    def get_database(self, client: AsyncMongoClient, settings: Settings) -> AsyncDatabase:
        """Provide database handle."""
        return get_database(client, settings)

    @provide(scope=Scope.APP)
    def get_topic_repository(self, database: AsyncDatabase) -> TopicRepository:
        """Provide Topic repository."""
        return MongoTopicRepository(database)

    @provide(scope=Scope.APP)
    def get_profile_repository(self, database: AsyncDatabase) -> ProfileRepository:
        """Provide Profile repository."""
        return MongoProfileRepository(database)
