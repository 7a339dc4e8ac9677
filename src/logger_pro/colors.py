from enum import StrEnum

RESET = "\x1b[0m"


class AnsiColor(StrEnum):
    """Named terminal colors. The value is the name recorded in events."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "brightBlack"
    BRIGHT_RED = "brightRed"
    BRIGHT_GREEN = "brightGreen"
    BRIGHT_YELLOW = "brightYellow"
    BRIGHT_BLUE = "brightBlue"
    BRIGHT_MAGENTA = "brightMagenta"
    BRIGHT_CYAN = "brightCyan"
    BRIGHT_WHITE = "brightWhite"

    @property
    def code(self) -> str:
        return _CODES[self]


_CODES: dict[AnsiColor, str] = {
    AnsiColor.BLACK: "\x1b[30m",
    AnsiColor.RED: "\x1b[31m",
    AnsiColor.GREEN: "\x1b[32m",
    AnsiColor.YELLOW: "\x1b[33m",
    AnsiColor.BLUE: "\x1b[34m",
    AnsiColor.MAGENTA: "\x1b[35m",
    AnsiColor.CYAN: "\x1b[36m",
    AnsiColor.WHITE: "\x1b[37m",
    AnsiColor.BRIGHT_BLACK: "\x1b[90m",
    AnsiColor.BRIGHT_RED: "\x1b[91m",
    AnsiColor.BRIGHT_GREEN: "\x1b[92m",
    AnsiColor.BRIGHT_YELLOW: "\x1b[93m",
    AnsiColor.BRIGHT_BLUE: "\x1b[94m",
    AnsiColor.BRIGHT_MAGENTA: "\x1b[95m",
    AnsiColor.BRIGHT_CYAN: "\x1b[96m",
    AnsiColor.BRIGHT_WHITE: "\x1b[97m",
}


def code_of(color: AnsiColor) -> str:
    return _CODES[color]


def default_color_for(kind: str) -> AnsiColor:
    return {
        "logi": AnsiColor.GREEN,
        "logw": AnsiColor.YELLOW,
        "loge": AnsiColor.RED,
        "logd": AnsiColor.CYAN,
        "hex": AnsiColor.CYAN,
        "chr": AnsiColor.CYAN,
        "ansi": AnsiColor.WHITE,
    }.get(kind, AnsiColor.WHITE)


def resolve_color(kind: str, color: AnsiColor | str | None = None) -> AnsiColor:
    """Return the explicit color if given, otherwise the default for ``kind``.

    Color names are accepted as well, e.g. ``"brightRed"``.
    """
    if color is None:
        return default_color_for(kind)
    return AnsiColor(color)


def colorize(text: str, color: AnsiColor, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{_CODES[color]}{text}{RESET}"
