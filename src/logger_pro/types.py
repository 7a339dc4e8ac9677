from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, TypedDict

if TYPE_CHECKING:
    from .colors import AnsiColor

LogEvent: TypeAlias = dict[str, Any]


class Kind(StrEnum):
    """Tag of the entry point that produced a log call."""

    INFO = "logi"
    WARN = "logw"
    ERROR = "loge"
    DEBUG = "logd"
    HEX = "hex"
    CHR = "chr"
    ANSI = "ansi"


class LogOptions(TypedDict, total=False):
    """Keyword options accepted by every entry point."""

    time: bool
    ms_diff: bool
    sequence_number: int | None
    level: int
    name: str
    zone: object | None
    error: object | None
    stack_trace: object | None
    color: "AnsiColor | str | None"


@dataclass(slots=True, frozen=True)
class ConsoleLine:
    """What a log call hands to the console channel."""

    message: str  # prefixed, colored when ANSI is enabled
    name: str  # colored when ANSI is enabled, empty when unset
    time: datetime
    level: int = 0
    sequence_number: int | None = None
    zone: object | None = None
    error: object | None = None
    stack_trace: str | None = None


class LogSink(Protocol):
    """Protocol for structured event destinations."""

    def on_log(self, event: LogEvent) -> None:
        """Receive one JSON-serializable event."""
        ...


class ConsoleChannel(Protocol):
    """Protocol for the human-readable console output."""

    def emit(self, line: ConsoleLine) -> None:
        """Write one formatted line."""
        ...
