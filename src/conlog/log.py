"""Leveled console logging with pluggable output adapters.

Every call renders one line, writes it to the console sink and then hands the
caller's original arguments to each registered adapter so it can render them
its own way::

    from conlog import log

    log.add_adapter("file", log.FileAdapter(), {"path": "app.log"})
    log.println("listening on", 8080)
    log.errorf("request %s failed: %d", rid, status)
"""

from __future__ import annotations

import os
import sys
from typing import Any

from . import httperror
from .adapters import (
    AdapterConfig,
    AdapterPod,
    AdapterRegistry,
    ConsoleSink,
    FileAdapter,
    FunctionAdapter,
    LogAdapter,
    as_adapter,
)
from .config import ConfigSnapshot, LogConfig
from .formatter import render
from .levels import MsgType, OutType
from .logger_setup import logger
from .settings import settings

__all__ = [
    "AdapterPod",
    "ConsoleLogger",
    "FileAdapter",
    "FunctionAdapter",
    "MsgType",
    "OutType",
    "add_adapter",
    "configure",
    "debugf",
    "debugln",
    "default_logger",
    "error_response",
    "errorf",
    "errorln",
    "get_adapter",
    "http_error",
    "printf",
    "println",
    "remove_adapter",
    "set_adapter_config",
    "warningf",
    "warningln",
]


def _caller_location(stacklevel: int) -> str:
    """``"file.py:line"`` of the frame ``stacklevel`` levels above our caller."""
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return ""
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


class ConsoleLogger:
    def __init__(
        self,
        config: LogConfig | None = None,
        registry: AdapterRegistry | None = None,
        sink: ConsoleSink | None = None,
    ) -> None:
        self.config = config if config is not None else LogConfig()
        self.registry = registry if registry is not None else AdapterRegistry()
        self.sink = sink if sink is not None else ConsoleSink()

    # -- adapters ---------------------------------------------------------

    def add_adapter(self, name: str, adapter: Any, config: AdapterConfig = None) -> None:
        self.registry.add(name, AdapterPod(as_adapter(adapter), config))

    def set_adapter_config(self, name: str, config: AdapterConfig) -> None:
        if not self.registry.set_config(name, config):
            logger.debug("Ignoring config for unknown adapter %r", name)

    def remove_adapter(self, name: str) -> None:
        self.registry.remove(name)

    def get_adapter(self, name: str) -> AdapterPod | None:
        return self.registry.get(name)

    def configure(self, **changes: Any) -> None:
        self.config.update(**changes)

    # -- dispatch ---------------------------------------------------------

    def _dispatch(
        self,
        msg_type: MsgType,
        out_type: OutType,
        args: tuple[Any, ...],
        location: str = "",
        cfg: ConfigSnapshot | None = None,
    ) -> None:
        if cfg is None:
            cfg = self.config.snapshot()
        try:
            text = render(
                msg_type,
                out_type,
                args,
                now=cfg.now(),
                time_format=cfg.time_format,
                max_line_size=cfg.max_line_size,
                location=location,
            )
        except Exception as exc:
            logger.error("Failed to render %s log line: %s", msg_type.value, exc)
            return
        self.sink.write(text)

        for name, adapter, config in self.registry.snapshot():
            if adapter is None:
                logger.debug("Adapter %r has no handler; skipping", name)
                continue
            try:
                adapter.handle(msg_type, out_type, config, *args)
            except Exception as exc:
                logger.error("Adapter %r failed: %s", name, exc)

    def println(self, *args: Any) -> None:
        self._dispatch(MsgType.MESSAGE, OutType.LINE, args)

    def printf(self, fmt: str, *args: Any) -> None:
        self._dispatch(MsgType.MESSAGE, OutType.FORMATTED, (fmt, *args))

    def errorln(self, *args: Any) -> None:
        self._dispatch(MsgType.ERROR, OutType.LINE, args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._dispatch(MsgType.ERROR, OutType.FORMATTED, (fmt, *args))

    def warningln(self, *args: Any) -> None:
        self._dispatch(MsgType.WARNING, OutType.LINE, args)

    def warningf(self, fmt: str, *args: Any) -> None:
        self._dispatch(MsgType.WARNING, OutType.FORMATTED, (fmt, *args))

    def debugln(self, *args: Any, location: str | None = None, stacklevel: int = 1) -> None:
        cfg = self.config.snapshot()
        if not cfg.debug_mode:
            return
        if location is None:
            location = _caller_location(stacklevel)
        self._dispatch(MsgType.DEBUG, OutType.LINE, args, location, cfg)

    def debugf(
        self, fmt: str, *args: Any, location: str | None = None, stacklevel: int = 1
    ) -> None:
        cfg = self.config.snapshot()
        if not cfg.debug_mode:
            return
        if location is None:
            location = _caller_location(stacklevel)
        self._dispatch(MsgType.DEBUG, OutType.FORMATTED, (fmt, *args), location, cfg)

    # -- http -------------------------------------------------------------

    def http_error(self, response: Any, status_code: int) -> None:
        httperror.http_error(self, response, status_code)

    def error_response(self, status_code: int):
        return httperror.error_response(self, status_code)


default_logger = ConsoleLogger(config=LogConfig.from_settings(settings))


def add_adapter(name: str, adapter: LogAdapter | Any, config: AdapterConfig = None) -> None:
    default_logger.add_adapter(name, adapter, config)


def set_adapter_config(name: str, config: AdapterConfig) -> None:
    default_logger.set_adapter_config(name, config)


def remove_adapter(name: str) -> None:
    default_logger.remove_adapter(name)


def get_adapter(name: str) -> AdapterPod | None:
    return default_logger.get_adapter(name)


def configure(**changes: Any) -> None:
    default_logger.configure(**changes)


def println(*args: Any) -> None:
    default_logger.println(*args)


def printf(fmt: str, *args: Any) -> None:
    default_logger.printf(fmt, *args)


def errorln(*args: Any) -> None:
    default_logger.errorln(*args)


def errorf(fmt: str, *args: Any) -> None:
    default_logger.errorf(fmt, *args)


def warningln(*args: Any) -> None:
    default_logger.warningln(*args)


def warningf(fmt: str, *args: Any) -> None:
    default_logger.warningf(fmt, *args)


def debugln(*args: Any, location: str | None = None) -> None:
    default_logger.debugln(*args, location=location, stacklevel=2)


def debugf(fmt: str, *args: Any, location: str | None = None) -> None:
    default_logger.debugf(fmt, *args, location=location, stacklevel=2)


def http_error(response: Any, status_code: int) -> None:
    default_logger.http_error(response, status_code)


def error_response(status_code: int):
    return default_logger.error_response(status_code)
