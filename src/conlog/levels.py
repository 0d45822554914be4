"""Severity and output-kind tags shared by the formatter and adapters."""

from enum import Enum

RESET = "\x1b[0;00m"


class MsgType(Enum):
    MESSAGE = "msg"
    ERROR = "error"
    WARNING = "warning"
    DEBUG = "debug"

    @property
    def tag(self) -> str:
        return f"[{self.value}]"

    @property
    def color(self) -> str:
        return COLORS[self]


class OutType(Enum):
    LINE = "line"
    FORMATTED = "formatted"


COLORS = {
    MsgType.MESSAGE: "\x1b[37m",
    MsgType.ERROR: "\x1b[91m",
    MsgType.WARNING: "\x1b[93m",
    MsgType.DEBUG: "\x1b[96m",
}
