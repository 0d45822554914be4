"""Adapter registry and the built-in output adapters."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import IO, Any, Callable, Optional, Protocol

from .formatter import render
from .levels import MsgType, OutType
from .logger_setup import logger
from .settings import DEFAULT_TIME_FORMAT

AdapterConfig = Optional[dict[str, Any]]


class LogAdapter(Protocol):
    def handle(
        self, msg_type: MsgType, out_type: OutType, config: AdapterConfig, *args: Any
    ) -> None: ...


class FunctionAdapter:
    """Wrap a plain handler function as a ``LogAdapter``."""

    def __init__(self, func: Callable[..., None]) -> None:
        self.func = func

    def handle(
        self, msg_type: MsgType, out_type: OutType, config: AdapterConfig, *args: Any
    ) -> None:
        self.func(msg_type, out_type, config, *args)

    def __repr__(self) -> str:
        return f"FunctionAdapter({self.func!r})"


def as_adapter(adapter: Any) -> LogAdapter | None:
    """Wrap anything without a ``handle`` method; it is not checked until dispatch."""
    if adapter is None or hasattr(adapter, "handle"):
        return adapter
    return FunctionAdapter(adapter)


@dataclass
class AdapterPod:
    adapter: LogAdapter | None
    config: AdapterConfig = None


class AdapterRegistry:
    """Name -> ``AdapterPod`` mapping safe to mutate while dispatch runs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pods: dict[str, AdapterPod] = {}

    def add(self, name: str, pod: AdapterPod) -> None:
        with self._lock:
            self._pods[name] = pod

    def set_config(self, name: str, config: AdapterConfig) -> bool:
        """Replace the config of ``name``; returns False when it is not registered."""
        with self._lock:
            pod = self._pods.get(name)
            if pod is None:
                return False
            pod.config = config
            return True

    def remove(self, name: str) -> None:
        with self._lock:
            self._pods.pop(name, None)

    def get(self, name: str) -> AdapterPod | None:
        with self._lock:
            return self._pods.get(name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._pods)

    def snapshot(self) -> list[tuple[str, LogAdapter | None, AdapterConfig]]:
        with self._lock:
            return [(name, pod.adapter, pod.config) for name, pod in self._pods.items()]

    def clear(self) -> None:
        with self._lock:
            self._pods.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._pods

    def __len__(self) -> int:
        with self._lock:
            return len(self._pods)


# Shared by every sink on the process stdout so lines from separate loggers
# never interleave.
_stdout_lock = threading.Lock()


class ConsoleSink:
    """Default console output; writes already rendered text."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._lock = _stdout_lock if stream is None else threading.Lock()

    @property
    def stream(self) -> IO[str] | None:
        # Resolved per write so a replaced sys.stdout is honored.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        try:
            with self._lock:
                stream = self.stream
                # sys.stdout is None under pythonw and detached daemons.
                if stream is None:
                    return
                stream.write(text)
                stream.flush()
        except Exception as exc:
            logger.error("Failed to write log line to console: %s", exc)


class FileAdapter:
    """Append plain (uncolored) lines to ``config["path"]`` or ``config["stream"]``.

    ``config["time_format"]`` overrides the timestamp layout. Formatted calls
    are written as a full line as well, since a file has no cursor to share.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now) -> None:
        self.now = now
        self._lock = threading.Lock()

    def handle(
        self, msg_type: MsgType, out_type: OutType, config: AdapterConfig, *args: Any
    ) -> None:
        config = config or {}
        text = render(
            msg_type,
            out_type,
            args,
            now=self.now(),
            time_format=config.get("time_format", DEFAULT_TIME_FORMAT),
            max_line_size=int(config.get("max_line_size", 0)),
            color=False,
        )
        if not text.endswith("\n"):
            text += "\n"

        stream = config.get("stream")
        path = config.get("path")
        with self._lock:
            if stream is not None:
                stream.write(text)
                stream.flush()
            elif path:
                with open(path, "a", encoding="utf-8") as fh:
                    fh.write(text)
            else:
                raise ValueError("FileAdapter config needs a 'path' or a 'stream'")
