"""Grouped aggregations over the board collections."""

from typing import Any, Sequence

import logfire
from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from board.persistence.database import RESPONSES


async def count_responses(
    database: AsyncDatabase, topic_ids: Sequence[ObjectId]
) -> dict[str, int]:
    """Count responses for a batch of topics in a single query.

    The store groups every response by topic, then the result is narrowed
    to the requested batch.

    Args:
        database: Database handle
        topic_ids: Topics in the batch

    Returns:
        Dict mapping str(topic_id) -> response count. Topics without
        responses are absent and count as zero.
    """
    if not topic_ids:
        return {}

    with logfire.span("aggregation.count_responses", batch_size=len(topic_ids)):
        pipeline = [
            {"$group": {"_id": "$topic", "resCount": {"$sum": 1}}},
            {"$match": {"_id": {"$in": list(topic_ids)}}},
        ]
        cursor = await database[RESPONSES].aggregate(pipeline)
        rows = await cursor.to_list()

        counts = {str(row["_id"]): row["resCount"] for row in rows}
        logfire.debug("Responses counted", topics_with_responses=len(counts))
        return counts


def tag_popularity_pipeline(limit: int) -> list[dict[str, Any]]:
    """Pipeline ranking tags by how many topics carry them.

    Ties are broken by tag name so pages are stable.

    Args:
        limit: Maximum number of tags (must be positive)

    Returns:
        Aggregation pipeline for the topics collection
    """
    return [
        {"$unwind": "$tags"},
        {"$group": {"_id": "$tags", "count": {"$sum": 1}}},
        {"$sort": {"count": -1, "_id": 1}},
        {"$limit": limit},
    ]
