"""Mappers for converting between stored documents and domain models.

Stored field names follow the collections' existing shape (``date``,
``update``, ``ageUpdate``, ``mdtext``); domain models use snake_case.
"""

from typing import Any, Dict

from board.domain.error import CorruptRecordError
from board.domain.model import Profile, Topic, TopicFork, TopicNormal, TopicOne
from board.domain.value import ProfileId, TopicId, TopicType, UserId


def document_to_topic(document: Dict[str, Any], res_count: int) -> Topic:
    """Convert a stored document to its topic variant.

    Args:
        document: Raw document from the topics collection
        res_count: Number of responses, computed for the current batch

    Returns:
        TopicNormal, TopicOne or TopicFork depending on ``type``

    Raises:
        CorruptRecordError: If ``type`` is not a known variant
    """
    fields = {
        "id": TopicId(document["_id"]),
        "title": document["title"],
        "tags": document.get("tags", []),
        "created_at": document["date"],
        "updated_at": document["update"],
        "age_updated_at": document["ageUpdate"],
        "active": document["active"],
        "res_count": res_count,
    }

    topic_type = document.get("type")
    if topic_type == TopicType.NORMAL.value:
        return TopicNormal(**fields)
    elif topic_type == TopicType.ONE.value:
        return TopicOne(**fields)
    elif topic_type == TopicType.FORK.value:
        return TopicFork(**fields, parent=TopicId(document["parent"]))

    raise CorruptRecordError(
        "topic", str(document["_id"]), f"unknown type {topic_type!r}"
    )


def topic_to_document(topic: Topic) -> Dict[str, Any]:
    """Convert a topic to a document for insertion/replacement.

    The response count is derived data and is not written.

    Args:
        topic: Topic of any variant

    Returns:
        Dict suitable for the topics collection
    """
    document: Dict[str, Any] = {
        "_id": topic.id,
        "title": topic.title,
        "tags": list(topic.tags),
        "type": topic.type.value,
        "active": topic.active,
        "date": topic.created_at,
        "update": topic.updated_at,
        "ageUpdate": topic.age_updated_at,
    }

    if isinstance(topic, TopicFork):
        document["parent"] = topic.parent
    elif not isinstance(topic, (TopicNormal, TopicOne)):
        raise TypeError(f"Unsupported topic variant: {type(topic).__name__}")

    return document


def document_to_profile(document: Dict[str, Any]) -> Profile:
    """Convert a stored document to a Profile domain model."""
    return Profile(
        id=ProfileId(document["_id"]),
        user_id=UserId(document["user"]),
        name=document["name"],
        text=document["text"],
        md_text=document["mdtext"],
        created_at=document["date"],
        updated_at=document["update"],
        sn=document["sn"],
    )


def profile_to_document(profile: Profile) -> Dict[str, Any]:
    """Convert a Profile domain model to a stored document."""
    return {
        "_id": profile.id,
        "user": profile.user_id,
        "name": profile.name,
        "text": profile.text,
        "mdtext": profile.md_text,
        "date": profile.created_at,
        "update": profile.updated_at,
        "sn": profile.sn,
    }
