import pytest

import logger_pro
from logger_pro import Logger
from logger_pro.types import ConsoleLine, LogEvent


class CaptureSink:
    """Sink that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[LogEvent] = []

    def on_log(self, event: LogEvent) -> None:
        self.events.append(event)

    @property
    def last(self) -> LogEvent | None:
        return self.events[-1] if self.events else None


class CaptureChannel:
    """Console channel that keeps lines instead of printing them."""

    def __init__(self) -> None:
        self.lines: list[ConsoleLine] = []

    def emit(self, line: ConsoleLine) -> None:
        self.lines.append(line)

    @property
    def last(self) -> ConsoleLine | None:
        return self.lines[-1] if self.lines else None


@pytest.fixture
def sink() -> CaptureSink:
    return CaptureSink()


@pytest.fixture
def channel() -> CaptureChannel:
    return CaptureChannel()


@pytest.fixture
def logger(sink: CaptureSink, channel: CaptureChannel) -> Logger:
    return Logger(sink=sink, channel=channel)


@pytest.fixture
def default_logger(channel: CaptureChannel):
    """Install a fresh module-level logger for the test, reset afterwards."""
    installed = Logger(channel=channel)
    logger_pro.set_logger(installed)
    yield installed
    logger_pro.set_logger(None)
