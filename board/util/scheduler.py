"""Recurring background jobs.

Jobs are explicit descriptors owned by a ``Scheduler`` with a start/stop
lifecycle. Tests drive a job with ``tick`` instead of waiting on the clock.
"""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Awaitable, Callable
from zoneinfo import ZoneInfo

import logfire

from board.util.error import SchedulerError


@dataclass(frozen=True)
class HourlySchedule:
    """Fires once an hour at ``minute`` past the hour in ``timezone``."""

    minute: int = 0
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        if not 0 <= self.minute < 60:
            raise ValueError(f"minute must be 0-59, got {self.minute}")
        ZoneInfo(self.timezone)  # Unknown zones fail at construction

    def next_fire_time(self, after: datetime) -> datetime:
        """First fire time strictly later than ``after``.

        Args:
            after: Timezone-aware reference time

        Returns:
            Next fire time, in the schedule's timezone
        """
        zone = ZoneInfo(self.timezone)
        local = after.astimezone(zone)
        candidate = local.replace(minute=self.minute, second=0, microsecond=0)
        if candidate <= local:
            # Step in UTC so DST transitions don't skip or repeat an hour
            candidate = (candidate.astimezone(UTC) + timedelta(hours=1)).astimezone(zone)
        return candidate


@dataclass(frozen=True)
class ScheduledJob:
    """A named handler run on a schedule."""

    name: str
    schedule: HourlySchedule
    handler: Callable[[], Awaitable[object]]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Scheduler:
    """Runs each job on its own asyncio task until stopped.

    A failing run is logged and the job waits for its next fire time; there
    are no retries and no backoff.
    """

    def __init__(
        self,
        jobs: list[ScheduledJob],
        clock: Callable[[], datetime] = _utc_now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.jobs = jobs
        self.clock = clock
        self.sleep = sleep
        self._tasks: list[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return bool(self._tasks)

    def start(self) -> None:
        """Start every job. Must be called from a running event loop."""
        if self.running:
            raise SchedulerError("Scheduler already started")

        for job in self.jobs:
            task = asyncio.create_task(self._run(job), name=f"scheduler:{job.name}")
            self._tasks.append(task)
        logfire.info("Scheduler started", jobs=[job.name for job in self.jobs])

    async def stop(self) -> None:
        """Cancel every job and wait for them to finish."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logfire.info("Scheduler stopped")

    async def tick(self, job: ScheduledJob) -> bool:
        """Run a job once.

        Args:
            job: Job to run

        Returns:
            True if the handler completed, False if it raised
        """
        with logfire.span("scheduler.tick", job=job.name):
            try:
                await job.handler()
            except asyncio.CancelledError:
                raise
            except Exception:
                logfire.exception("Scheduled job failed", job=job.name)
                return False
            return True

    async def _run(self, job: ScheduledJob) -> None:
        last_fire: datetime | None = None
        while True:
            now = self.clock()
            # An early wake-up must not fire the same slot twice
            reference = now if last_fire is None else max(now, last_fire)
            fire_at = job.schedule.next_fire_time(reference)
            last_fire = fire_at
            delay = (fire_at - now).total_seconds()
            logfire.debug("Next run scheduled", job=job.name, fire_at=fire_at.isoformat())
            await self.sleep(max(0.0, delay))
            await self.tick(job)
