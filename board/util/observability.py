"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Topic inserted", topic_id=str(topic.id))

    # Manual spans for store operations
    with logfire.span("topic_repository.find", title=title):
        ...
"""

import logfire

from board.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Console output is always on. Telemetry is sent to Logfire cloud only
    when explicitly enabled or when a token is configured.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "board-worker",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_pymongo() -> None:
    """Instrument pymongo with Logfire.

    Traces every command sent to MongoDB with its duration and outcome.
    Must run before the client is created.
    """
    logfire.instrument_pymongo()
    logfire.info("pymongo instrumented")
