from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .logger_setup import logger

load_dotenv()

DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _load_debug_mode() -> bool:
    raw = os.getenv("CONLOG_DEBUG_MODE", "false").strip().lower()
    if raw in _TRUE:
        return True
    if raw not in _FALSE:
        logger.error("CONLOG_DEBUG_MODE=%r is not a boolean; defaulting to false", raw)
    return False


def _load_time_format() -> str:
    return os.getenv("CONLOG_TIME_FORMAT") or DEFAULT_TIME_FORMAT


def _load_max_line_size() -> int:
    raw = os.getenv("CONLOG_MAX_LINE_SIZE", "0")
    try:
        value = int(raw)
    except ValueError:
        logger.error("CONLOG_MAX_LINE_SIZE=%r is not an integer; defaulting to 0", raw)
        return 0
    if value < 0:
        logger.error("CONLOG_MAX_LINE_SIZE=%r is negative; defaulting to 0", raw)
        return 0
    return value


@dataclass
class Settings:
    debug_mode: bool = field(default_factory=_load_debug_mode)
    time_format: str = field(default_factory=_load_time_format)
    max_line_size: int = field(default_factory=_load_max_line_size)


settings = Settings()
