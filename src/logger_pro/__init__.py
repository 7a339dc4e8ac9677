"""
logger_pro: leveled, colored console logging with a pluggable event sink.

Module-level functions log through a default ``Logger`` created on first
use. Build your own ``Logger`` when you need isolated state::

    from logger_pro import log_info, register_sink
    from logger_pro.listeners import JsonSink

    register_sink(JsonSink())
    log_info("Hello, world!", name="Demo", ms_diff=True)
"""

from typing import Iterable, SupportsInt, Unpack

from .colors import AnsiColor, default_color_for
from .core import Logger
from .errors import ConflictingOptionsError, LoggerProError
from .types import ConsoleChannel, ConsoleLine, Kind, LogEvent, LogOptions, LogSink

_logger: Logger | None = None


def get_logger() -> Logger:
    """Get the module-level Logger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_logger(logger: Logger | None) -> None:
    """Replace the module-level Logger. ``None`` resets it to a fresh default."""
    global _logger
    _logger = logger


def register_sink(sink: LogSink) -> None:
    get_logger().register_sink(sink)


def unregister_sink() -> None:
    get_logger().unregister_sink()


def ansi_color_enabled() -> bool:
    return get_logger().ansi_enabled


def set_ansi_color_enabled(enabled: bool) -> None:
    get_logger().ansi_enabled = enabled


def log_info(message: str, **options: Unpack[LogOptions]) -> None:
    get_logger().log_info(message, **options)


def log_warn(message: str, **options: Unpack[LogOptions]) -> None:
    get_logger().log_warn(message, **options)


def log_error(message: str, **options: Unpack[LogOptions]) -> None:
    get_logger().log_error(message, **options)


def log_debug(message: str, **options: Unpack[LogOptions]) -> None:
    get_logger().log_debug(message, **options)


def log_buffer_hex(buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
    get_logger().log_buffer_hex(buf, **options)


def log_buffer_char(buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
    get_logger().log_buffer_char(buf, **options)


def log_buffer_ansi(buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
    get_logger().log_buffer_ansi(buf, **options)


logi = log_info
logw = log_warn
loge = log_error
logd = log_debug
log_buf_hex = log_buffer_hex
log_buf_chr = log_buffer_char
log_buf_ansi = log_buffer_ansi

__all__ = [
    "AnsiColor",
    "ConflictingOptionsError",
    "ConsoleChannel",
    "ConsoleLine",
    "Kind",
    "LogEvent",
    "LogOptions",
    "LogSink",
    "Logger",
    "LoggerProError",
    "ansi_color_enabled",
    "default_color_for",
    "get_logger",
    "log_buf_ansi",
    "log_buf_chr",
    "log_buf_hex",
    "log_buffer_ansi",
    "log_buffer_char",
    "log_buffer_hex",
    "log_debug",
    "log_error",
    "log_info",
    "log_warn",
    "logd",
    "loge",
    "logi",
    "logw",
    "register_sink",
    "set_ansi_color_enabled",
    "set_logger",
    "unregister_sink",
]
