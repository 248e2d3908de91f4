"""Strict conversions of text fields to numbers.

The conversions follow the C library's ``strtod``/``strtol`` rules: leading
white space is skipped, but the whole remaining text must be consumed, and
values out of the target range are rejected.
"""

from __future__ import annotations

import math
import re
import struct
import sys

__all__ = [
    "to_double",
    "to_float",
    "to_int32",
    "to_uint32",
    "to_int8",
    "to_uint8",
    "trim_decimal_places",
    "contains_space",
]

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT32_MAX = (1 << 32) - 1

_FLT_MIN = 2.0**-126

_DECIMAL = re.compile(
    r"[+-]?(?P<mant>[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEXADECIMAL = re.compile(
    r"[+-]?0[xX](?P<mant>[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)


def _strtod(string: str) -> tuple[float, bool]:
    """Parse a whole floating-point text.

    Returns the value and whether it is subject to range checks (i.e. it was
    not written as infinity or NaN and its mantissa is non-zero).
    """
    if not string:
        raise ValueError("empty string")
    body = string.lstrip(_C_SPACE)

    if _SPECIAL.fullmatch(body):
        return float(body.split("(", 1)[0]), False

    match = _HEXADECIMAL.fullmatch(body)
    if match:
        try:
            value = float.fromhex(body)
        except OverflowError as exc:
            raise ValueError(f"value out of range: {string!r}") from exc
        return value, re.search(r"[1-9a-fA-F]", match["mant"]) is not None

    match = _DECIMAL.fullmatch(body)
    if match:
        return float(body), re.search(r"[1-9]", match["mant"]) is not None

    raise ValueError(f"not a floating-point number: {string!r}")


def to_double(string: str) -> float:
    """Convert ``string`` to a double, raising ValueError if it is not one."""
    value, checked = _strtod(string)
    if checked and (math.isinf(value) or abs(value) < sys.float_info.min):
        raise ValueError(f"value out of range: {string!r}")
    return value


def to_float(string: str) -> float:
    """Convert ``string`` to a single-precision value, raising ValueError."""
    value, checked = _strtod(string)
    if not checked:
        return value
    if math.isinf(value):
        raise ValueError(f"value out of range: {string!r}")
    try:
        (single,) = struct.unpack("<f", struct.pack("<f", value))
    except OverflowError as exc:
        raise ValueError(f"value out of range: {string!r}") from exc
    if math.isinf(single) or abs(single) < _FLT_MIN:
        raise ValueError(f"value out of range: {string!r}")
    return single


def _scan_integer(string: str, base: int) -> tuple[int, int]:
    """Scan the longest integer prefix of ``string``.

    Returns the value and the index just past it; the index is 0 when no
    digits were found.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")

    pos = len(string) - len(string.lstrip(_C_SPACE))
    negative = False
    if pos < len(string) and string[pos] in "+-":
        negative = string[pos] == "-"
        pos += 1

    rest = string[pos:]
    if (
        base in (0, 16)
        and rest[:2].lower() == "0x"
        and len(rest) > 2
        and rest[2].lower() in _DIGITS[:16]
    ):
        base = 16
        pos += 2
    elif base == 0:
        base = 8 if rest.startswith("0") else 10

    valid = _DIGITS[:base]
    start = pos
    while pos < len(string) and len(string[pos].lower()) == 1 and string[pos].lower() in valid:
        pos += 1
    if pos == start:
        return 0, 0

    value = int(string[start:pos], base)
    return (-value if negative else value), pos


def _parse_whole_integer(string: str, base: int) -> int:
    if not string:
        raise ValueError("empty string")
    value, end = _scan_integer(string, base)
    if end != len(string):
        raise ValueError(f"not an integer in base {base}: {string!r}")
    return value


def to_int32(string: str, base: int = 10) -> int:
    """Convert ``string`` to a signed 32-bit integer, raising ValueError."""
    value = _parse_whole_integer(string, base)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"value out of 32-bit signed range: {string!r}")
    return value


def to_uint32(string: str, base: int = 10) -> int:
    """Convert ``string`` to an unsigned 32-bit integer, raising ValueError."""
    value = _parse_whole_integer(string, base)
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"value out of 32-bit unsigned range: {string!r}")
    return value


def _lenient_integer(string: str, base: int) -> int:
    try:
        value, _ = _scan_integer(string, base)
    except ValueError:
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, value))


def to_int8(string: str, base: int = 10) -> int:
    """Lenient conversion: parse the leading integer and wrap it to 8 signed bits."""
    byte = _lenient_integer(string, base) & 0xFF
    return byte - 0x100 if byte >= 0x80 else byte


def to_uint8(string: str, base: int = 10) -> int:
    """Lenient conversion: parse the leading integer and wrap it to 8 bits."""
    return _lenient_integer(string, base) & 0xFF


def trim_decimal_places(num: float) -> str:
    """Round to three decimals (halves away from zero) and format fixed-point."""
    if math.isfinite(num):
        scaled = num * 1000
        whole = math.trunc(scaled)
        if abs(scaled - whole) >= 0.5:
            whole += 1 if scaled > 0 else -1
        num = math.copysign(float(whole), scaled) / 1000
    return f"{num:.3f}"


def contains_space(text: str) -> bool:
    """Tell whether ``text`` holds any white-space character."""
    return any(char in _C_SPACE for char in text)