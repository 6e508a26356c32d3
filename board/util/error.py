"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass


class SchedulerError(UtilError):
    """Scheduler lifecycle error."""

    pass
