"""Topic repository interface."""

from abc import ABC, abstractmethod

from board.domain.model.topic import Topic, TopicNormal
from board.domain.value import TagCount, TopicId


class TopicRepository(ABC):
    """Repository for the Topic aggregate.

    Every topic returned is hydrated with its response count. Counts are
    computed once per fetched batch, not once per topic.
    """

    @abstractmethod
    async def find_one(self, topic_id: TopicId) -> Topic:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier

        Returns:
            The hydrated topic

        Raises:
            NotFoundError: If no topic has this ID
        """
        pass

    @abstractmethod
    async def find_in(self, topic_ids: list[TopicId]) -> list[Topic]:
        """Find a batch of topics, most recently active first.

        Args:
            topic_ids: Identifiers to fetch

        Returns:
            All requested topics sorted by last activity, descending

        Raises:
            PartialNotFoundError: If any identifier did not resolve
        """
        pass

    @abstractmethod
    async def find_tags(self, limit: int) -> list[TagCount]:
        """Find the most used tags across all topics.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tags with their topic counts, most used first
        """
        pass

    @abstractmethod
    async def find(
        self,
        title: str,
        tags: list[str],
        skip: int,
        limit: int,
        active_only: bool,
    ) -> list[Topic]:
        """Search normal and one topics.

        Forks are never returned here; use ``find_fork``.

        Args:
            title: Literal substring the title must contain
            tags: Tags the topic must all carry (empty for any)
            skip: Number of topics to skip
            limit: Maximum number of topics to return
            active_only: Whether to exclude inactive topics

        Returns:
            Matching topics, most recently active first
        """
        pass

    @abstractmethod
    async def find_fork(
        self,
        parent: TopicNormal,
        skip: int,
        limit: int,
        active_only: bool,
    ) -> list[Topic]:
        """List forks of a normal topic.

        Args:
            parent: The normal topic the forks branch from
            skip: Number of topics to skip
            limit: Maximum number of topics to return
            active_only: Whether to exclude inactive forks

        Returns:
            Forks of ``parent``, most recently active first
        """
        pass

    @abstractmethod
    async def insert(self, topic: Topic) -> None:
        """Persist a new topic."""
        pass

    @abstractmethod
    async def update(self, topic: Topic) -> None:
        """Replace the stored record of an existing topic."""
        pass
