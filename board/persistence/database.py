"""Database connection management.

Provides the async MongoDB client and database handle.
"""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from board.config import Settings

TOPICS = "topics"
RESPONSES = "reses"
PROFILES = "profiles"


def create_client(settings: Settings) -> AsyncMongoClient:
    """Create async MongoDB client.

    Datetimes come back timezone-aware (UTC) so they compare cleanly with
    the aware timestamps the domain produces.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async client (connects lazily)
    """
    return AsyncMongoClient(
        settings.database.url,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
    )


def get_database(client: AsyncMongoClient, settings: Settings) -> AsyncDatabase:
    """Get the application database from a client.

    Args:
        client: MongoDB client
        settings: Application settings with database name

    Returns:
        Database handle
    """
    return client[settings.database.name]
