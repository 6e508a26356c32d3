"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.profile import ProfileRepository
from board.domain.repository.topic import TopicRepository

__all__ = [
    "TopicRepository",
    "ProfileRepository",
]
