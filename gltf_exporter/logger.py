import logging
from enum import IntEnum
from typing import Callable, Protocol


class Severity(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


_LOGGING_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class Reporter(Protocol):
    def report(self, severity: int, message: str) -> None: ...


class CallbackReporter:
    """Adapts a printf-style ``callback(severity, fmt, *args)`` to ``Reporter``."""

    def __init__(self, callback: Callable[..., None]):
        self._callback = callback

    def report(self, severity: int, message: str) -> None:
        self._callback(severity, "%s", message)


class LoggingReporter:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("gltf_exporter")

    def report(self, severity: int, message: str) -> None:
        level = _LOGGING_LEVELS.get(severity, logging.ERROR)
        self._logger.log(level, message)


def as_reporter(logger: Reporter | Callable[..., None] | None) -> Reporter:
    if logger is None:
        return LoggingReporter()
    if hasattr(logger, "report"):
        return logger

    return CallbackReporter(logger)
