#!/usr/bin/env python3
"""Start the background worker that runs the hourly stale topic sweep."""

import asyncio
import signal
import sys

import logfire

from board.config import Settings
from board.util.di.container import create_container
from board.util.logging import setup_logging
from board.util.observability import configure_logfire
from board.util.scheduler import Scheduler


async def run() -> None:
    """Run scheduled jobs until SIGINT/SIGTERM."""
    container = create_container()
    stop = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    try:
        scheduler = await container.get(Scheduler)
        scheduler.start()
        logfire.info("Worker started")

        await stop.wait()

        logfire.info("Worker shutting down")
        await scheduler.stop()
    finally:
        await container.close()


def main() -> int:
    """Start the worker and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        asyncio.run(run())
        return 0

    except Exception as e:
        logfire.error(
            "Worker failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
