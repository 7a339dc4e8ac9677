"""Exceptions raised by logger_pro."""


class LoggerProError(Exception):
    """Base exception for all logger_pro errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConflictingOptionsError(LoggerProError, ValueError):
    """Raised when two mutually exclusive log options are requested together."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(
            f"Cannot provide both {first} and {second}.",
            details={"options": [first, second]},
        )
