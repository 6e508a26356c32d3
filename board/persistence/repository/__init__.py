"""MongoDB repository implementations."""

from board.persistence.repository.profile import MongoProfileRepository
from board.persistence.repository.topic import MongoTopicRepository

__all__ = [
    "MongoTopicRepository",
    "MongoProfileRepository",
]
