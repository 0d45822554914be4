"""Process-wide formatting state.

A ``LogConfig`` is shared by every render of the logger that owns it. Values
may change at any time from any thread; each render works from a single
``ConfigSnapshot`` so a concurrent update never mixes old and new values
inside one line.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from .settings import DEFAULT_TIME_FORMAT, Settings

TimeSource = Callable[[], datetime]


@dataclass(frozen=True)
class ConfigSnapshot:
    debug_mode: bool
    time_format: str
    max_line_size: int
    now: TimeSource


def _check_max_line_size(value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"max_line_size must be >= 0, got {value}")
    return value


def _check_now(value: Any) -> TimeSource:
    if not callable(value):
        raise TypeError("now must be a zero-argument callable returning a datetime")
    return value


class LogConfig:
    def __init__(
        self,
        debug_mode: bool = False,
        time_format: str = DEFAULT_TIME_FORMAT,
        max_line_size: int = 0,
        now: TimeSource = datetime.now,
    ) -> None:
        self._lock = threading.Lock()
        self._debug_mode = bool(debug_mode)
        self._time_format = str(time_format)
        self._max_line_size = _check_max_line_size(max_line_size)
        self._now = _check_now(now)

    @classmethod
    def from_settings(cls, settings: Settings) -> LogConfig:
        return cls(
            debug_mode=settings.debug_mode,
            time_format=settings.time_format,
            max_line_size=settings.max_line_size,
        )

    @property
    def debug_mode(self) -> bool:
        with self._lock:
            return self._debug_mode

    @debug_mode.setter
    def debug_mode(self, value: bool) -> None:
        with self._lock:
            self._debug_mode = bool(value)

    @property
    def time_format(self) -> str:
        with self._lock:
            return self._time_format

    @time_format.setter
    def time_format(self, value: str) -> None:
        with self._lock:
            self._time_format = str(value)

    @property
    def max_line_size(self) -> int:
        with self._lock:
            return self._max_line_size

    @max_line_size.setter
    def max_line_size(self, value: int) -> None:
        value = _check_max_line_size(value)
        with self._lock:
            self._max_line_size = value

    @property
    def now(self) -> TimeSource:
        with self._lock:
            return self._now

    @now.setter
    def now(self, value: TimeSource) -> None:
        value = _check_now(value)
        with self._lock:
            self._now = value

    def update(self, **changes: Any) -> None:
        """Apply several changes at once; unknown names raise ``TypeError``."""
        unknown = set(changes) - {"debug_mode", "time_format", "max_line_size", "now"}
        if unknown:
            raise TypeError(f"unknown config option(s): {', '.join(sorted(unknown))}")
        # Validate everything before taking the lock so a bad value changes nothing.
        if "max_line_size" in changes:
            changes["max_line_size"] = _check_max_line_size(changes["max_line_size"])
        if "now" in changes:
            _check_now(changes["now"])
        with self._lock:
            if "debug_mode" in changes:
                self._debug_mode = bool(changes["debug_mode"])
            if "time_format" in changes:
                self._time_format = str(changes["time_format"])
            if "max_line_size" in changes:
                self._max_line_size = changes["max_line_size"]
            if "now" in changes:
                self._now = changes["now"]

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return ConfigSnapshot(
                debug_mode=self._debug_mode,
                time_format=self._time_format,
                max_line_size=self._max_line_size,
                now=self._now,
            )
