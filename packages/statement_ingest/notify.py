"""Notification sinks receiving one ``(message, severity)`` pair per outcome."""

from __future__ import annotations

import logging
from typing import Literal, NamedTuple, Protocol, TypeAlias

from .logging_setup import get_logger

Severity: TypeAlias = Literal["success", "error"]


class NotificationSink(Protocol):
    def notify(self, message: str, severity: Severity) -> None: ...


class Notification(NamedTuple):
    message: str
    severity: Severity


class RecordingSink:
    """Collects notifications in arrival order."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, message: str, severity: Severity) -> None:
        self.notifications.append(Notification(message, severity))

    def messages(self, severity: Severity | None = None) -> list[str]:
        return [n.message for n in self.notifications if severity in (None, n.severity)]


class LoggingSink:
    """Forwards notifications to the package logger (errors at WARNING)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("statement_ingest.notify")

    def notify(self, message: str, severity: Severity) -> None:
        level = logging.INFO if severity == "success" else logging.WARNING
        self._logger.log(level, "%s", message)


__all__ = ["LoggingSink", "Notification", "NotificationSink", "RecordingSink", "Severity"]
