"""Topic aggregate.

Topics are discussion threads in three variants:
- normal: standalone thread, stays active until explicitly closed
- one: single-response thread, expires after a day without updates
- fork: branched from a normal topic, expires like ``one``
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from board.domain.model.common import DomainModel
from board.domain.value import TopicId, TopicType


class TopicBase(DomainModel):
    """Fields shared by every topic variant.

    ``res_count`` is derived from the responses collection at read time and
    is never persisted.
    """

    id: TopicId
    title: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime  # Last content modification
    age_updated_at: datetime  # Last activity, drives listing order
    active: bool = True
    res_count: int = Field(default=0, ge=0)

    @field_validator("tags")
    @classmethod
    def deduplicate_tags(cls, v: list[str]) -> list[str]:
        """Drop repeated tags, keeping first occurrence order."""
        return list(dict.fromkeys(v))


class TopicNormal(TopicBase):
    """Standalone topic. Forks reference it as their parent."""

    type: Literal[TopicType.NORMAL] = TopicType.NORMAL


class TopicOne(TopicBase):
    """Single-response topic."""

    type: Literal[TopicType.ONE] = TopicType.ONE


class TopicFork(TopicBase):
    """Topic branched from a normal topic."""

    type: Literal[TopicType.FORK] = TopicType.FORK
    parent: TopicId


Topic = Annotated[
    Union[TopicNormal, TopicOne, TopicFork],
    Field(discriminator="type"),
]
