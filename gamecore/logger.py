"""A severity-filtered logger writing timestamped lines."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from pathlib import Path
from typing import Callable, TextIO


class Severity(IntEnum):
    """Message severities, lowest first."""

    VERBOSE = 0
    DEBUG = 1
    EVENT = 2
    ERROR = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Logger:
    """Writes messages at or above a minimum severity to a file or stream."""

    def __init__(
        self,
        min_level: Severity = Severity.EVENT,
        use_console: bool = False,
        start_time: float | None = None,
        *,
        path: str | Path = "Trace.log",
        stream: TextIO | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.min_level = Severity(min_level)
        self._clock = clock
        self.start_time = clock() if start_time is None else start_time
        self._owns_stream = False
        if stream is not None:
            self._stream = stream
        elif use_console:
            self._stream = sys.stdout
        else:
            self._stream = open(path, "w", encoding="utf-8")
            self._owns_stream = True

    def seconds_since_start(self) -> float:
        return self._clock() - self.start_time

    def log(self, severity: Severity, message: str) -> None:
        """Write ``message`` if ``severity`` meets the minimum level."""
        severity = Severity(severity)
        if severity < self.min_level:
            return
        self._stream.write(
            f"[{self.seconds_since_start():.4f}]\t{severity.label}\t{message}\n"
        )

    def log_error(self, text: str) -> None:
        self.log(Severity.ERROR, text)

    def log_event(self, text: str) -> None:
        self.log(Severity.EVENT, text)

    def log_debug(self, text: str) -> None:
        self.log(Severity.DEBUG, text)

    def log_verbose(self, text: str) -> None:
        self.log(Severity.VERBOSE, text)

    def close(self) -> None:
        """Flush output and close the log file if this logger opened it."""
        self._stream.flush()
        if self._owns_stream and not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()