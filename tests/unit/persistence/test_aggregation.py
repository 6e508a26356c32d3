"""Unit tests for grouped aggregations."""

import pytest
from bson import ObjectId

from board.persistence.aggregation import count_responses, tag_popularity_pipeline
from board.persistence.database import RESPONSES
from board.persistence.inmemory import InMemoryDatabase
from tests.conftest import make_response_documents


class TestCountResponses:
    """Tests for count_responses."""

    @pytest.mark.asyncio
    async def test_counts_per_topic_in_one_query(self):
        """Counts come back keyed by str(topic_id) from a single aggregate."""
        # Arrange
        database = InMemoryDatabase()
        busy, quiet, silent, other = (ObjectId() for _ in range(4))
        await database[RESPONSES].insert_many(
            make_response_documents(busy, 3)
            + make_response_documents(quiet, 1)
            + make_response_documents(other, 2)
        )

        # Act
        counts = await count_responses(database, [busy, quiet, silent])

        # Assert
        assert counts == {str(busy): 3, str(quiet): 1}
        assert counts.get(str(silent), 0) == 0
        assert database[RESPONSES].calls["aggregate"] == 1

    @pytest.mark.asyncio
    async def test_empty_batch_issues_no_query(self):
        database = InMemoryDatabase()

        counts = await count_responses(database, [])

        assert counts == {}
        assert database[RESPONSES].calls["aggregate"] == 0


class TestTagPopularityPipeline:
    """Tests for tag_popularity_pipeline."""

    def test_sorts_by_count_then_name_and_limits(self):
        pipeline = tag_popularity_pipeline(5)

        assert pipeline[0] == {"$unwind": "$tags"}
        assert {"$sort": {"count": -1, "_id": 1}} in pipeline
        assert pipeline[-1] == {"$limit": 5}
