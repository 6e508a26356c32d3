"""Background worker DI providers."""

from dishka import Scope, provide
from pymongo.asynchronous.database import AsyncDatabase

from board.config import SweeperSettings
from board.persistence.sweeper import StaleTopicSweeper
from board.util.di.base import ProviderBase
from board.util.scheduler import HourlySchedule, ScheduledJob, Scheduler


class ProdWorkerProvider(ProviderBase):
    """Scheduled jobs provider - concrete, no mocks needed.

    The sweeper talks to whichever database the persistence component
    provides, so tests get it backed by the in-memory store.
    """

    scope = Scope.APP

    @provide
    def get_topic_sweeper(
        self, database: AsyncDatabase, settings: SweeperSettings
    ) -> StaleTopicSweeper:
        """Provide stale topic sweeper."""
        return StaleTopicSweeper(database=database, settings=settings)

    @provide
    def get_scheduler(
        self, sweeper: StaleTopicSweeper, settings: SweeperSettings
    ) -> Scheduler:
        """Provide scheduler with the hourly sweep registered when enabled."""
        jobs = []
        if settings.enabled:
            jobs.append(
                ScheduledJob(
                    name="deactivate-stale-topics",
                    schedule=HourlySchedule(
                        minute=settings.minute, timezone=settings.timezone
                    ),
                    handler=sweeper.run,
                )
            )
        return Scheduler(jobs=jobs)
