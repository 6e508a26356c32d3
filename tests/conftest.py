"""Test configuration and fixtures."""

from datetime import UTC, datetime, timedelta

from bson import ObjectId

from board.domain.model import Topic, TopicFork, TopicNormal, TopicOne
from board.domain.value import TopicId, TopicType

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def make_topic(
    type: TopicType = TopicType.NORMAL,
    title: str = "Test topic",
    tags: list[str] | None = None,
    active: bool = True,
    updated_at: datetime | None = None,
    age_updated_at: datetime | None = None,
    parent: TopicId | None = None,
    res_count: int = 0,
) -> Topic:
    """Helper function to build a topic of any variant for tests.

    Args:
        type: Variant to build
        title: Topic title
        tags: Topic tags
        active: Active flag
        updated_at: Last content update (defaults to BASE_TIME)
        age_updated_at: Last activity (defaults to updated_at)
        parent: Parent topic ID, required for forks
        res_count: Response count to attach

    Returns:
        Topic of the requested variant
    """
    updated_at = updated_at or BASE_TIME
    fields = dict(
        id=TopicId(ObjectId()),
        title=title,
        tags=tags or [],
        created_at=updated_at - timedelta(hours=1),
        updated_at=updated_at,
        age_updated_at=age_updated_at or updated_at,
        active=active,
        res_count=res_count,
    )

    if type == TopicType.NORMAL:
        return TopicNormal(**fields)
    if type == TopicType.ONE:
        return TopicOne(**fields)
    return TopicFork(**fields, parent=parent or TopicId(ObjectId()))


def make_response_documents(topic_id: TopicId, count: int) -> list[dict]:
    """Helper function to build response documents owned by a topic."""
    return [{"_id": ObjectId(), "topic": topic_id, "text": f"res {i}"} for i in range(count)]
