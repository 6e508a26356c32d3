"""Unit tests for the in-memory document store."""

import re

import pytest
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from board.persistence.inmemory import InMemoryDatabase
from board.persistence.inmemory.matching import matches, run_pipeline, sort_documents


class TestMatches:
    """Tests for query document evaluation."""

    def test_equality_against_array_field(self):
        assert matches({"tags": ["a", "b"]}, {"tags": "a"})
        assert not matches({"tags": ["a", "b"]}, {"tags": "c"})

    def test_all_requires_every_value(self):
        document = {"tags": ["a", "b", "c"]}

        assert matches(document, {"tags": {"$all": ["a", "c"]}})
        assert not matches(document, {"tags": {"$all": ["a", "d"]}})

    def test_in_and_nin(self):
        assert matches({"type": "one"}, {"type": {"$in": ["normal", "one"]}})
        assert matches({"type": "fork"}, {"type": {"$nin": ["normal", "one"]}})

    def test_regex_with_options(self):
        assert matches({"title": "Hello"}, {"title": {"$regex": "hel", "$options": "i"}})
        assert not matches({"title": "Hello"}, {"title": {"$regex": "hel"}})
        assert matches({"title": "Hello"}, {"title": re.compile("^H")})

    def test_ordering_and_missing_fields(self):
        assert matches({"n": 1}, {"n": {"$lt": 2}})
        assert not matches({}, {"n": {"$lt": 2}})
        assert matches({}, {"n": {"$exists": False}})

    def test_or(self):
        query = {"$or": [{"a": 1}, {"b": 2}]}

        assert matches({"b": 2}, query)
        assert not matches({"a": 2}, query)

    def test_unsupported_operator_raises(self):
        with pytest.raises(NotImplementedError):
            matches({"a": 1}, {"a": {"$mod": [2, 1]}})


class TestPipeline:
    """Tests for aggregation stages."""

    def test_unwind_group_sort_limit(self):
        documents = [{"tags": ["a", "b"]}, {"tags": ["a"]}, {"tags": []}]

        rows = run_pipeline(
            documents,
            [
                {"$unwind": "$tags"},
                {"$group": {"_id": "$tags", "count": {"$sum": 1}}},
                {"$sort": {"count": -1, "_id": 1}},
                {"$limit": 1},
            ],
        )

        assert rows == [{"_id": "a", "count": 2}]

    def test_sort_puts_missing_values_first(self):
        rows = sort_documents([{"n": 2}, {}, {"n": 1}], [("n", 1)])

        assert rows == [{}, {"n": 1}, {"n": 2}]


class TestInMemoryCollection:
    """Tests for collection operations."""

    @pytest.mark.asyncio
    async def test_find_sort_skip_limit(self):
        collection = InMemoryDatabase()["items"]
        await collection.insert_many([{"n": i} for i in range(5)])

        rows = await collection.find({}).sort("n", DESCENDING).skip(1).limit(2).to_list()

        assert [r["n"] for r in rows] == [3, 2]

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self):
        collection = InMemoryDatabase()["items"]
        await collection.insert_one({"_id": 1, "tags": ["a"]})

        found = await collection.find_one({"_id": 1})
        found["tags"].append("b")

        assert (await collection.find_one({"_id": 1}))["tags"] == ["a"]

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self):
        collection = InMemoryDatabase()["items"]
        await collection.insert_one({"_id": 1})

        with pytest.raises(DuplicateKeyError):
            await collection.insert_one({"_id": 1})

    @pytest.mark.asyncio
    async def test_update_many_reports_matched_and_modified(self):
        collection = InMemoryDatabase()["items"]
        await collection.insert_many(
            [{"_id": 1, "on": True}, {"_id": 2, "on": False}, {"_id": 3, "on": True}]
        )

        result = await collection.update_many({"_id": {"$in": [1, 2]}}, {"$set": {"on": False}})

        assert result.matched_count == 2
        assert result.modified_count == 1

    @pytest.mark.asyncio
    async def test_replace_one_without_match(self):
        collection = InMemoryDatabase()["items"]

        result = await collection.replace_one({"_id": 1}, {"x": 1})

        assert result.matched_count == 0
        assert await collection.find_one({}) is None
