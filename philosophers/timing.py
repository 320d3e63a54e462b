"""Clock and number parsing helpers."""

import time

INT_MAX = 2147483647
_DIGITS = frozenset("0123456789")


def get_time() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def parse_int(text: str) -> int:
    """Parse a non-negative decimal integer that fits in a signed 32-bit int.

    Only the characters 0-9 are accepted; signs, spaces and anything else
    are rejected, as are values above INT_MAX.
    """
    if not text or not _DIGITS.issuperset(text):
        raise ValueError(f"not a non-negative integer: {text!r}")
    value = int(text)
    if value > INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value