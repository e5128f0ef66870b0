"""Small printf-style formatter used for diagnostics on standard error."""

from __future__ import annotations

import re
import sys
from typing import Any

_CONVERSIONS = "cspdiuxX%"
_PIECE = re.compile(r"%(.?)|[^%]+", re.DOTALL)

_UINT_MOD = 1 << 32
_PTR_MOD = 1 << 64


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument.

    ``partial`` holds the text produced before the error was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def is_conversion(char: str) -> bool:
    """Return True if ``char`` is a supported conversion letter."""
    return len(char) == 1 and char in _CONVERSIONS


def _to_int32(value: int) -> int:
    return (int(value) + (1 << 31)) % _UINT_MOD - (1 << 31)


def _render(conversion: str, value: Any) -> str:
    if conversion == "c":
        return value if isinstance(value, str) else chr(int(value))
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in "di":
        return str(_to_int32(value))
    if conversion == "u":
        return str(int(value) % _UINT_MOD)
    if conversion == "x":
        return format(int(value) % _UINT_MOD, "x")
    if conversion == "X":
        return format(int(value) % _UINT_MOD, "X")
    # conversion == "p"
    if value is None or int(value) == 0:
        return "(nil)"
    return "0x" + format(int(value) % _PTR_MOD, "x")


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` using %c %s %p %d %i %u %x %X and %%."""
    pieces: list[str] = []
    remaining = iter(args)
    for match in _PIECE.finditer(fmt):
        if not match.group(0).startswith("%"):
            pieces.append(match.group(0))
            continue
        conversion = match.group(1)
        if not is_conversion(conversion):
            raise FormatError(
                f"invalid conversion %{conversion!s}", "".join(pieces)
            )
        if conversion == "%":
            pieces.append("%")
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(
                f"missing argument for %{conversion}", "".join(pieces)
            ) from None
        pieces.append(_render(conversion, value))
    return "".join(pieces)


def eprint(fmt: str, *args: Any) -> int:
    """Write the formatted message to standard error and return its length.

    On a format error the text produced so far is still written before
    the error is raised.
    """
    try:
        text = format_message(fmt, *args)
    except FormatError as error:
        sys.stderr.write(error.partial)
        sys.stderr.flush()
        raise
    sys.stderr.write(text)
    sys.stderr.flush()
    return len(text)