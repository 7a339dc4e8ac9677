from datetime import datetime


def format_hhmmss(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def current_hhmmss() -> str:
    """Wall-clock local time as ``HH:MM:SS``."""
    return format_hhmmss(datetime.now())


def format_diff(diff_ms: float) -> str:
    """Format a delta in milliseconds.

    Formats:
    - < 1s: +12.34ms (milliseconds, two decimals)
    - >= 1s: +1.500s (seconds, three decimals)
    """
    if diff_ms >= 1000:
        return f"+{diff_ms / 1000:.3f}s"
    return f"+{diff_ms:.2f}ms"


class DiffTracker:
    """Remembers the instant of the last diff-mode log call."""

    __slots__ = ("last",)

    def __init__(self) -> None:
        self.last: datetime | None = None

    def record_and_diff(self, now: datetime) -> float:
        """Return milliseconds since the previous call (0.0 on the first) and store ``now``."""
        last = self.last
        self.last = now
        if last is None:
            return 0.0
        return (now - last).total_seconds() * 1000

    def reset(self) -> None:
        self.last = None
