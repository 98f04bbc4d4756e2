"""Diagnostic sinks used while validating doclet options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from .logging import get_logger

ERROR = "error"
WARNING = "warning"
NOTICE = "notice"


class DiagnosticSink(Protocol):
    """Receives user-facing diagnostics on three channels."""

    def error(self, message: str) -> None:
        """Report a fatal problem or a failed item."""

    def warning(self, message: str) -> None:
        """Report an option that was ignored."""

    def notice(self, message: str) -> None:
        """Report an informational confirmation."""


class LoggingReporter:
    """Forwards diagnostics to the xmldoclet logger and keeps tallies."""

    _LEVELS = {ERROR: logging.ERROR, WARNING: logging.WARNING, NOTICE: logging.INFO}

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("options")
        self.error_count = 0
        self.warning_count = 0

    def error(self, message: str) -> None:
        self.error_count += 1
        self.logger.log(self._LEVELS[ERROR], message)

    def warning(self, message: str) -> None:
        self.warning_count += 1
        self.logger.log(self._LEVELS[WARNING], message)

    def notice(self, message: str) -> None:
        self.logger.log(self._LEVELS[NOTICE], message)


@dataclass
class CollectingReporter:
    """Records diagnostics in the order they were emitted."""

    records: List[Tuple[str, str]] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.records.append((ERROR, message))

    def warning(self, message: str) -> None:
        self.records.append((WARNING, message))

    def notice(self, message: str) -> None:
        self.records.append((NOTICE, message))

    @property
    def errors(self) -> List[str]:
        return self._messages(ERROR)

    @property
    def warnings(self) -> List[str]:
        return self._messages(WARNING)

    @property
    def notices(self) -> List[str]:
        return self._messages(NOTICE)

    def _messages(self, level: str) -> List[str]:
        return [message for kind, message in self.records if kind == level]


__all__ = [
    "CollectingReporter",
    "DiagnosticSink",
    "ERROR",
    "LoggingReporter",
    "NOTICE",
    "WARNING",
]
