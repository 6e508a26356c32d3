"""Deactivation of stale time-limited topics."""

from datetime import UTC, datetime, timedelta
from typing import Callable

import logfire
from pymongo.asynchronous.database import AsyncDatabase

from board.config import SweeperSettings
from board.domain.value import TopicType
from board.persistence.database import TOPICS


def utc_now() -> datetime:
    return datetime.now(UTC)


class StaleTopicSweeper:
    """Deactivates one/fork topics that have gone without an update.

    Each run is a single bulk update touching only ``active``. Runs keep no
    state, so re-running over already deactivated topics changes nothing.
    """

    def __init__(
        self,
        database: AsyncDatabase,
        settings: SweeperSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize sweeper.

        Args:
            database: Database handle
            settings: Sweeper settings (inactivity window)
            clock: Source of the current time
        """
        self.database = database
        self.settings = settings
        self.clock = clock

    async def run(self, now: datetime | None = None) -> int:
        """Deactivate every expired time-limited topic.

        Args:
            now: Time of the sweep (defaults to the clock)

        Returns:
            Number of topics deactivated
        """
        now = now or self.clock()
        threshold = now - timedelta(hours=self.settings.inactivity_hours)
        expiring_types = [t.value for t in TopicType if t.time_limited]

        with logfire.span(
            "topic_sweeper.run",
            threshold=threshold.isoformat(),
            types=expiring_types,
        ):
            result = await self.database[TOPICS].update_many(
                {
                    "type": {"$in": expiring_types},
                    "update": {"$lt": threshold},
                    "active": True,
                },
                {"$set": {"active": False}},
            )

            logfire.info(
                "Stale topics deactivated",
                matched=result.matched_count,
                deactivated=result.modified_count,
            )
            return result.modified_count
