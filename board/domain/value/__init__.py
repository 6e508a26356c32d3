"""Domain value objects for the board."""

from board.domain.value.identifiers import ProfileId, TokenId, TopicId, UserId
from board.domain.value.types import AuthToken, TagCount, TopicType

__all__ = [
    # Identifiers
    "TopicId",
    "ProfileId",
    "UserId",
    "TokenId",
    # Types
    "TopicType",
    "TagCount",
    "AuthToken",
]
