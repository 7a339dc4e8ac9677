import traceback
from datetime import datetime
from types import TracebackType
from typing import Any, Iterable, SupportsInt, Unpack

from . import buffers
from .clock import DiffTracker, format_diff, format_hhmmss
from .colors import colorize, resolve_color
from .errors import ConflictingOptionsError
from .listeners.rich import RichConsoleChannel
from .types import ConsoleChannel, ConsoleLine, Kind, LogEvent, LogOptions, LogSink

OPTION_NAMES = LogOptions.__optional_keys__


def format_stack_trace(stack_trace: object | None) -> str | None:
    if stack_trace is None:
        return None
    if isinstance(stack_trace, TracebackType):
        return "".join(traceback.format_tb(stack_trace))
    return str(stack_trace)


class _State:
    """Mutable state shared by a logger and every logger bound from it."""

    __slots__ = ("sink", "channel", "ansi_enabled", "tracker")

    def __init__(
        self,
        sink: LogSink | None,
        channel: ConsoleChannel,
        ansi_enabled: bool,
    ) -> None:
        self.sink = sink
        self.channel = channel
        self.ansi_enabled = ansi_enabled
        self.tracker = DiffTracker()


class Logger:
    """
    Logger is the single chokepoint every log call goes through.
    Each call is written to the console channel and, when a sink is
    registered, delivered to it as a structured event.
    """

    __slots__ = ("_state", "defaults")

    def __init__(
        self,
        sink: LogSink | None = None,
        channel: ConsoleChannel | None = None,
        ansi_enabled: bool = True,
        **defaults: Unpack[LogOptions],
    ):
        if channel is None:
            channel = RichConsoleChannel()
        self._state = _State(sink, channel, ansi_enabled)
        self.defaults = _check_options(defaults)

    def bind(self, **kwargs: Unpack[LogOptions]) -> "Logger":
        """
        Bind default options. Returns a new logger sharing this logger's sink,
        channel, ANSI flag and diff timestamp.
        """
        bound = type(self).__new__(type(self))
        bound._state = self._state
        bound.defaults = {**self.defaults, **_check_options(kwargs)}
        return bound

    # --- Sink registry ---

    @property
    def sink(self) -> LogSink | None:
        return self._state.sink

    def register_sink(self, sink: LogSink) -> None:
        """Register ``sink``, replacing any sink registered before."""
        self._state.sink = sink

    def unregister_sink(self) -> None:
        self._state.sink = None

    # --- Settings ---

    @property
    def ansi_enabled(self) -> bool:
        return self._state.ansi_enabled

    @ansi_enabled.setter
    def ansi_enabled(self, value: bool) -> None:
        self._state.ansi_enabled = value

    @property
    def channel(self) -> ConsoleChannel:
        return self._state.channel

    @channel.setter
    def channel(self, channel: ConsoleChannel) -> None:
        self._state.channel = channel

    @property
    def tracker(self) -> DiffTracker:
        return self._state.tracker

    # --- Entry points ---

    def log(self, kind: Kind | str, message: str, **options: Unpack[LogOptions]) -> None:
        self._dispatch(message, Kind(kind), options)

    def log_buffer(
        self,
        kind: Kind | str,
        buf: Iterable[SupportsInt],
        **options: Unpack[LogOptions],
    ) -> None:
        kind = Kind(kind)
        data = buffers.to_bytes(buf)
        if kind is Kind.HEX:
            text = buffers.render_hex(data)
            message = buffers.with_count(data, text)
        elif kind is Kind.CHR:
            text = buffers.render_chr(data)
            message = buffers.with_count(data, text)
        elif kind is Kind.ANSI:
            text = message = buffers.render_ansi(data)
        else:
            raise ValueError(f"Not a buffer kind: {kind!r}")

        self._dispatch(
            message,
            kind,
            options,
            extra={"bytes": data, "render": kind.value, "text": text},
        )

    def log_info(self, message: str, **options: Unpack[LogOptions]) -> None:
        """Log an informational message (green by default)."""
        self._dispatch(message, Kind.INFO, options)

    def log_warn(self, message: str, **options: Unpack[LogOptions]) -> None:
        """Log a warning (yellow by default)."""
        self._dispatch(message, Kind.WARN, options)

    def log_error(self, message: str, **options: Unpack[LogOptions]) -> None:
        """Log an error (red by default)."""
        self._dispatch(message, Kind.ERROR, options)

    def log_debug(self, message: str, **options: Unpack[LogOptions]) -> None:
        """Log debug details (cyan by default)."""
        self._dispatch(message, Kind.DEBUG, options)

    def log_buffer_hex(self, buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
        """Log bytes as hex, e.g. ``[10, 11]`` -> ``(2 bytes) 0A 0B``."""
        self.log_buffer(Kind.HEX, buf, **options)

    def log_buffer_char(self, buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
        """Log printable bytes as characters, the rest as hex.

        ``[72, 101, 108, 108, 111, 10]`` -> ``(6 bytes) H e l l o 0x0A``
        """
        self.log_buffer(Kind.CHR, buf, **options)

    def log_buffer_ansi(self, buf: Iterable[SupportsInt], **options: Unpack[LogOptions]) -> None:
        """
        Log bytes as a raw string so the terminal interprets the escape
        sequences in it (colors, cursor movement, clearing...).

        ``[27, 91, 72]`` (ESC [ H) moves the cursor home.
        """
        self.log_buffer(Kind.ANSI, buf, **options)

    logi = log_info
    logw = log_warn
    loge = log_error
    logd = log_debug
    log_buf_hex = log_buffer_hex
    log_buf_chr = log_buffer_char
    log_buf_ansi = log_buffer_ansi

    # --- Dispatch ---

    def _dispatch(
        self,
        message: str,
        kind: Kind,
        options: LogOptions,
        extra: dict[str, Any] | None = None,
    ) -> None:
        opts: LogOptions = {**self.defaults, **_check_options(options)}
        time = bool(opts.get("time", False))
        ms_diff = bool(opts.get("ms_diff", False))
        if time and ms_diff:
            raise ConflictingOptionsError("time", "ms_diff")

        state = self._state
        now = datetime.now()
        color = resolve_color(kind, opts.get("color"))
        name = opts.get("name", "")
        level = opts.get("level", 0)
        sequence_number = opts.get("sequence_number")
        zone = opts.get("zone")
        error = opts.get("error")
        stack_trace = format_stack_trace(opts.get("stack_trace"))

        prefix = ""
        if time:
            prefix = f"[{format_hhmmss(now)}] "
        elif ms_diff:
            diff_ms = state.tracker.record_and_diff(now)
            prefix = f"[{format_hhmmss(now)}] [{format_diff(diff_ms)}] "

        state.channel.emit(
            ConsoleLine(
                message=colorize(prefix + message, color, state.ansi_enabled),
                name=colorize(name, color, state.ansi_enabled) if name else "",
                time=now,
                level=level,
                sequence_number=sequence_number,
                zone=zone,
                error=error,
                stack_trace=stack_trace,
            )
        )

        sink = state.sink
        if sink is None:
            return

        event: LogEvent = {
            "kind": kind.value,
            "timestamp": now.isoformat(),
            "message": message,
            "timePrinted": time,
            "msDiffPrinted": ms_diff,
        }
        if time or ms_diff:
            event["timeHHmmss"] = format_hhmmss(now)
        event.update(
            {
                "sequenceNumber": sequence_number,
                "level": level,
                "name": name,
                "zone": None if zone is None else str(zone),
                "error": None if error is None else str(error),
                "stackTrace": stack_trace,
                "ansiEnabled": state.ansi_enabled,
                "color": color.value,
            }
        )
        if extra:
            event.update(extra)

        sink.on_log(event)


def _check_options(options: dict[str, Any]) -> dict[str, Any]:
    if unknown := options.keys() - OPTION_NAMES:
        raise TypeError(f"Unknown log option(s): {', '.join(sorted(unknown))}")
    return options
