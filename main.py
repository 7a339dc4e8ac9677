import json
import sys
import time

from logger_pro import (
    AnsiColor,
    log_buffer_ansi,
    log_buffer_char,
    log_buffer_hex,
    log_debug,
    log_error,
    log_info,
    log_warn,
    register_sink,
    set_ansi_color_enabled,
)
from logger_pro.types import LogEvent


class BackendSink:
    """Pretend to ship every event to a backend."""

    def on_log(self, event: LogEvent) -> None:
        print(f"Sending to backend: {json.dumps(event)[:150]}... ", file=sys.stderr)


set_ansi_color_enabled(True)
register_sink(BackendSink())

log_info(" Basic Logging ", name="Example", color=AnsiColor.MAGENTA)
log_info("Info message", name="Demo")
log_warn("Warning message", name="Demo")
try:
    raise RuntimeError("hello, i'm exception")
except RuntimeError as e:
    log_error("Error with channel", name="ExceptionChannel", error=e, stack_trace=e.__traceback__)
log_debug("Debug details", name="Demo")

log_info(" Timestamping ", name="Example", color=AnsiColor.MAGENTA)
log_info("Message with [HH:MM:SS]", time=True, name="Demo")

log_info(" ms_diff ", name="Example", color=AnsiColor.MAGENTA)
log_info("First", ms_diff=True, name="MSDIFF")
time.sleep(0.08)
log_info("After ~80ms", ms_diff=True, name="MSDIFF")
time.sleep(1.5)
log_info("After ~1.5s", ms_diff=True, name="MSDIFF")

log_info(" Buffers ", name="Example", color=AnsiColor.MAGENTA)
log_buffer_hex([0x44, 0x41, 0x52, 0x54], name="Buffers")
log_buffer_char([72, 101, 108, 108, 111, 10], name="Buffers")
log_buffer_ansi([27, 91, 51, 49, 109, *b"ANSI red", 27, 91, 48, 109], name="Buffers")
