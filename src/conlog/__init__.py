__version__ = "0.1.0"

from .adapters import AdapterPod, AdapterRegistry, ConsoleSink, FileAdapter, FunctionAdapter, LogAdapter
from .config import ConfigSnapshot, LogConfig
from .levels import MsgType, OutType
from .log import (
    ConsoleLogger,
    add_adapter,
    configure,
    debugf,
    debugln,
    default_logger,
    error_response,
    errorf,
    errorln,
    get_adapter,
    http_error,
    printf,
    println,
    remove_adapter,
    set_adapter_config,
    warningf,
    warningln,
)
from .settings import DEFAULT_TIME_FORMAT, RFC3339

__all__ = [
    "AdapterPod",
    "AdapterRegistry",
    "ConfigSnapshot",
    "ConsoleLogger",
    "ConsoleSink",
    "DEFAULT_TIME_FORMAT",
    "FileAdapter",
    "FunctionAdapter",
    "LogAdapter",
    "LogConfig",
    "MsgType",
    "OutType",
    "RFC3339",
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
