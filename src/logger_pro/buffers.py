"""
Byte buffer rendering.

Every value is reduced to its low 8 bits before rendering, so out-of-range
numbers never raise::

    >>> render_hex(to_bytes([10, 11, 256 + 15]))
    '0A 0B 0F'
    >>> render_chr(to_bytes([72, 105, 10]))
    'H i 0x0A'
"""

import math
from typing import Iterable, SupportsInt

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126


def to_byte(value: SupportsInt) -> int:
    # NaN and infinities have no integer value
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value) & 0xFF


def to_bytes(buf: Iterable[SupportsInt]) -> list[int]:
    return [to_byte(b) for b in buf]


def hex_byte(b: int) -> str:
    return f"{b:02X}"


def render_hex(data: list[int]) -> str:
    """Two uppercase hex digits per byte, space separated."""
    return " ".join(hex_byte(b) for b in data)


def render_chr(data: list[int]) -> str:
    """Printable ASCII as the character itself, anything else as ``0xHH``."""
    return " ".join(
        chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else f"0x{hex_byte(b)}"
        for b in data
    )


def render_ansi(data: list[int]) -> str:
    """
    Reinterpret the bytes as a string, one character per byte.

    Escape sequences are not validated; the terminal interprets them.
    """
    return "".join(map(chr, data))


def with_count(data: list[int], body: str) -> str:
    return f"({len(data)} bytes) {body}"
