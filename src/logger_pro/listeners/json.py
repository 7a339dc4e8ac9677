import json
import sys
from typing import TextIO

from logger_pro.types import LogEvent


def json_dumps(event: LogEvent) -> str:
    return json.dumps(event, default=str, separators=(",", ":"), ensure_ascii=False)


class JsonSink:
    """JSON output sink for structured logging.

    Each event is written as one line of newline-delimited JSON and the
    stream is flushed right away.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def on_log(self, event: LogEvent) -> None:
        self.stream.write(json_dumps(event) + "\n")
        self.stream.flush()
