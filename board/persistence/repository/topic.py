"""MongoDB implementation of Topic repository."""

from typing import Any

import logfire
from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase

from board.domain.error import NotFoundError, PartialNotFoundError
from board.domain.model import Topic, TopicNormal
from board.domain.repository.topic import TopicRepository
from board.domain.value import TagCount, TopicId
from board.persistence.aggregation import count_responses, tag_popularity_pipeline
from board.persistence.database import TOPICS
from board.persistence.mappers import document_to_topic, topic_to_document
from board.persistence.query import topic_fork_filter, topic_search_filter


class MongoTopicRepository(TopicRepository):
    """MongoDB implementation of TopicRepository."""

    def __init__(self, database: AsyncDatabase) -> None:
        """Initialize repository with a database handle.

        Args:
            database: Async MongoDB database
        """
        self.database = database

    @property
    def _topics(self):
        return self.database[TOPICS]

    async def _aggregate(self, documents: list[dict[str, Any]]) -> list[Topic]:
        """Hydrate a batch of documents with response counts.

        Counts for the whole batch come from one grouped query.

        Args:
            documents: Raw topic documents from a single fetch

        Returns:
            Typed topics in the same order as ``documents``
        """
        counts = await count_responses(self.database, [d["_id"] for d in documents])
        return [
            document_to_topic(document, counts.get(str(document["_id"]), 0))
            for document in documents
        ]

    async def find_one(self, topic_id: TopicId) -> Topic:
        """Find a topic by ID."""
        with logfire.span("topic_repository.find_one", topic_id=str(topic_id)):
            document = await self._topics.find_one({"_id": topic_id})

            if document is None:
                logfire.warn("Topic not found", topic_id=str(topic_id))
                raise NotFoundError("Topic", str(topic_id))

            return (await self._aggregate([document]))[0]

    async def find_in(self, topic_ids: list[TopicId]) -> list[Topic]:
        """Find a batch of topics, most recently active first."""
        with logfire.span("topic_repository.find_in", requested=len(topic_ids)):
            documents = (
                await self._topics.find({"_id": {"$in": list(topic_ids)}})
                .sort("ageUpdate", DESCENDING)
                .to_list()
            )

            if len(documents) != len(topic_ids):
                found_ids = [str(d["_id"]) for d in documents]
                logfire.warn(
                    "Some topics not found",
                    requested=len(topic_ids),
                    found=len(found_ids),
                )
                raise PartialNotFoundError(
                    "Topic", [str(i) for i in topic_ids], found_ids
                )

            return await self._aggregate(documents)

    async def find_tags(self, limit: int) -> list[TagCount]:
        """Find the most used tags across all topics."""
        with logfire.span("topic_repository.find_tags", limit=limit):
            if limit <= 0:
                return []

            cursor = await self._topics.aggregate(tag_popularity_pipeline(limit))
            rows = await cursor.to_list()

            tags = [TagCount(name=row["_id"], count=row["count"]) for row in rows]
            logfire.info("Found tags", count=len(tags))
            return tags

    async def find(
        self,
        title: str,
        tags: list[str],
        skip: int,
        limit: int,
        active_only: bool,
    ) -> list[Topic]:
        """Search normal and one topics."""
        with logfire.span(
            "topic_repository.find",
            title=title,
            tags=tags,
            skip=skip,
            limit=limit,
            active_only=active_only,
        ):
            documents = (
                await self._topics.find(topic_search_filter(title, tags, active_only))
                .sort("ageUpdate", DESCENDING)
                .skip(skip)
                .limit(limit)
                .to_list()
            )

            topics = await self._aggregate(documents)
            logfire.info("Found topics", count=len(topics))
            return topics

    async def find_fork(
        self,
        parent: TopicNormal,
        skip: int,
        limit: int,
        active_only: bool,
    ) -> list[Topic]:
        """List forks of a normal topic."""
        with logfire.span(
            "topic_repository.find_fork",
            parent_id=str(parent.id),
            skip=skip,
            limit=limit,
            active_only=active_only,
        ):
            documents = (
                await self._topics.find(topic_fork_filter(parent.id, active_only))
                .sort("ageUpdate", DESCENDING)
                .skip(skip)
                .limit(limit)
                .to_list()
            )

            topics = await self._aggregate(documents)
            logfire.info("Found forks", parent_id=str(parent.id), count=len(topics))
            return topics

    async def insert(self, topic: Topic) -> None:
        """Persist a new topic."""
        with logfire.span(
            "topic_repository.insert",
            topic_id=str(topic.id),
            type=topic.type.value,
        ):
            await self._topics.insert_one(topic_to_document(topic))
            logfire.info("Topic inserted", topic_id=str(topic.id))

    async def update(self, topic: Topic) -> None:
        """Replace the stored record of an existing topic."""
        with logfire.span("topic_repository.update", topic_id=str(topic.id)):
            result = await self._topics.replace_one(
                {"_id": topic.id}, topic_to_document(topic)
            )

            if result.matched_count == 0:
                logfire.warn("Topic update matched nothing", topic_id=str(topic.id))
            else:
                logfire.info("Topic updated", topic_id=str(topic.id))
