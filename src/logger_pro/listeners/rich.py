from rich.console import Console
from rich.traceback import Traceback

from logger_pro.types import ConsoleLine


def format_line(line: ConsoleLine) -> str:
    """``[name] message``, or just the message when the line has no name."""
    if line.name:
        return f"[{line.name}] {line.message}"
    return line.message


class RichConsoleChannel:
    """Console output through a rich Console (stderr by default).

    The line goes straight to the console's file: escape and control codes
    (CR, BEL, BS...) reach the terminal untouched, so colorization is
    decided by the logger alone. Errors and stack traces go through rich.
    """

    def __init__(self, console: Console | None = None, max_frames: int = 2):
        self.console = console if console is not None else Console(stderr=True)
        self.max_frames = max_frames

    def emit(self, line: ConsoleLine) -> None:
        # rich strips control codes from Text, so bypass it for the line itself
        file = self.console.file
        file.write(format_line(line) + "\n")
        file.flush()

        error = line.error
        if error is not None:
            tb = getattr(error, "__traceback__", None)
            if isinstance(error, BaseException) and tb is not None:
                # Suppress frames from this file
                self.console.print(
                    Traceback.from_exception(
                        type(error),
                        error,
                        tb,
                        suppress=[__file__],
                        width=self.console.width,
                        max_frames=self.max_frames,
                    )
                )
            else:
                self.console.out(f"  error: {error}", style="red", highlight=False)

        if line.stack_trace:
            self.console.out(line.stack_trace.rstrip("\n"), style="grey70", highlight=False)
