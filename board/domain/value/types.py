"""Domain value objects for the board."""

from enum import Enum

from pydantic import Field

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import TokenId, UserId


class TopicType(str, Enum):
    """Topic variant discriminator, stored as the ``type`` field."""

    NORMAL = "normal"  # Standalone thread, never expires
    ONE = "one"  # Single-response thread
    FORK = "fork"  # Branched from a normal topic

    @property
    def time_limited(self) -> bool:
        """Whether topics of this type are deactivated after inactivity."""
        return self in (TopicType.ONE, TopicType.FORK)


class TagCount(ValueObject):
    """Tag name with the number of topics carrying it."""

    name: str
    count: int = Field(ge=0)


class AuthToken(ValueObject):
    """Authenticated caller.

    Tokens are issued elsewhere; this layer only reads the owning user.
    """

    id: TokenId
    user: UserId
