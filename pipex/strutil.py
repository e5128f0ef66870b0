"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    return (value + (1 << 31)) % (1 << 32) - (1 << 31)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading optionally signed decimal integer, as C ``atoi``.

    Leading whitespace is skipped, parsing stops at the first non-digit,
    and the result wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_to_int32(int(n)))


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    position = haystack.find(needle, 0, length)
    return position if position >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strncmp(left: str, right: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    differing character codes, or 0. A NUL character ends a string."""
    if n < 0:
        raise ValueError("n must not be negative")
    left = left.split("\0", 1)[0][:n]
    right = right.split("\0", 1)[0][:n]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0