"""Build the colored, timestamped, tagged text for one log call."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .levels import RESET, MsgType, OutType

ELLIPSIS = "..."


def _line_body(args: tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)


def _formatted_body(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    fmt = str(args[0])
    params: Any = args[1:]
    # Same convention as logging.LogRecord: a lone mapping feeds %(name)s keys.
    if len(params) == 1 and isinstance(params[0], Mapping) and params[0]:
        params = params[0]
    try:
        return fmt % params
    except (TypeError, ValueError, KeyError) as exc:
        return f"{fmt} <format error: {exc}; args={params!r}>"


def render_body(out_type: OutType, args: tuple[Any, ...]) -> str:
    if out_type is OutType.FORMATTED:
        return _formatted_body(args)
    return _line_body(args)


def truncate(body: str, max_line_size: int) -> str:
    if max_line_size > 0 and len(body) > max_line_size:
        return body[:max_line_size] + ELLIPSIS
    return body


def render(
    msg_type: MsgType,
    out_type: OutType,
    args: tuple[Any, ...],
    *,
    now: datetime,
    time_format: str,
    max_line_size: int = 0,
    location: str = "",
    color: bool = True,
) -> str:
    """Return the final text for one call.

    ``args`` are the caller's original arguments: joined with spaces for
    ``OutType.LINE``, or a format string followed by its parameters for
    ``OutType.FORMATTED``. ``location`` is only rendered for debug messages.
    """
    timestamp = now.strftime(time_format)
    tag = msg_type.tag
    if msg_type is MsgType.DEBUG and location:
        tag = f"{tag} {location}"
    body = truncate(render_body(out_type, args), max_line_size)

    text = f"{timestamp} {tag} {body}"
    if color:
        text = f"{msg_type.color}{text}{RESET}"
    if out_type is OutType.LINE:
        text += "\n"
    return text
