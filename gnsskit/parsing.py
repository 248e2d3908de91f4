"""Field and binary-block parsing helpers for receiver messages."""

from __future__ import annotations

import calendar
import struct
from datetime import datetime, timedelta, timezone

from gnsskit import strings

__all__ = [
    "ParseError",
    "unpack_double",
    "unpack_float",
    "unpack_int16",
    "unpack_uint16",
    "unpack_int32",
    "unpack_uint32",
    "parse_double",
    "parse_float",
    "parse_int16",
    "parse_int32",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "convert_utc_double_to_seconds",
    "convert_dms_to_degrees",
    "convert_utc_to_unix",
    "convert_user_period_to_rx_command",
    "get_crc",
    "get_id",
    "get_length",
    "get_tow",
    "get_wnc",
]

_BLOCK_NUMBER_MASK = 0x1FFF


class ParseError(ValueError):
    """Raised when a message or one of its fields cannot be parsed."""


def _unpack(fmt: str, buffer, offset: int):
    try:
        (value,) = struct.unpack_from(fmt, buffer, offset)
    except struct.error as exc:
        raise ParseError(f"buffer too short at offset {offset}") from exc
    return value


def unpack_double(buffer, offset: int = 0) -> float:
    """Read a little-endian 64-bit float."""
    return _unpack("<d", buffer, offset)


def unpack_float(buffer, offset: int = 0) -> float:
    """Read a little-endian 32-bit float."""
    return _unpack("<f", buffer, offset)


def unpack_int16(buffer, offset: int = 0) -> int:
    """Read a little-endian signed 16-bit integer."""
    return _unpack("<h", buffer, offset)


def unpack_uint16(buffer, offset: int = 0) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    return _unpack("<H", buffer, offset)


def unpack_int32(buffer, offset: int = 0) -> int:
    """Read a little-endian signed 32-bit integer."""
    return _unpack("<i", buffer, offset)


def unpack_uint32(buffer, offset: int = 0) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    return _unpack("<I", buffer, offset)


def _convert(converter, string: str, *args):
    try:
        return converter(string, *args)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_double(string: str) -> float:
    """Parse an optional double field; an empty field yields 0.0."""
    return _convert(strings.to_double, string) if string else 0.0


def parse_float(string: str) -> float:
    """Parse an optional single-precision field; an empty field yields 0.0."""
    return _convert(strings.to_float, string) if string else 0.0


def parse_int16(string: str, base: int = 10) -> int:
    """Parse an optional signed 16-bit field; an empty field yields 0."""
    if not string:
        return 0
    value = _convert(strings.to_int32, string, base)
    if not -(1 << 15) <= value <= (1 << 15) - 1:
        raise ParseError(f"value out of 16-bit signed range: {string!r}")
    return value


def parse_int32(string: str, base: int = 10) -> int:
    """Parse an optional signed 32-bit field; an empty field yields 0."""
    return _convert(strings.to_int32, string, base) if string else 0


def parse_uint8(string: str, base: int = 10) -> int:
    """Parse an optional unsigned 8-bit field; an empty field yields 0."""
    if not string:
        return 0
    value = _convert(strings.to_uint32, string, base)
    if value > 0xFF:
        raise ParseError(f"value out of 8-bit unsigned range: {string!r}")
    return value


def parse_uint16(string: str, base: int = 10) -> int:
    """Parse an optional unsigned 16-bit field; an empty field yields 0."""
    if not string:
        return 0
    value = _convert(strings.to_uint32, string, base)
    if value > 0xFFFF:
        raise ParseError(f"value out of 16-bit unsigned range: {string!r}")
    return value


def parse_uint32(string: str, base: int = 10) -> int:
    """Parse an optional unsigned 32-bit field; an empty field yields 0."""
    return _convert(strings.to_uint32, string, base) if string else 0


def _split_hhmmss(utc_double: float) -> tuple[int, int, int]:
    whole = int(utc_double)
    hours = whole // 10000
    minutes = (whole - hours * 10000) // 100
    seconds = whole - hours * 10000 - minutes * 100
    return hours, minutes, seconds


def convert_utc_double_to_seconds(utc_double: float) -> float:
    """Turn an NMEA ``hhmmss.ss`` time into seconds since midnight."""
    hours, minutes, _ = _split_hhmmss(utc_double)
    return utc_double - float(hours * 10000 + minutes * 100) + float(
        hours * 3600 + minutes * 60
    )


def convert_dms_to_degrees(dms: float) -> float:
    """Turn an NMEA ``dddmm.mmmm`` angle into decimal degrees."""
    whole_degrees = int(dms) // 100
    minutes = dms - float(whole_degrees * 100)
    return float(whole_degrees) + minutes / 60.0


def convert_utc_to_unix(utc_double: float, now=None) -> int:
    """Combine an NMEA ``hhmmss.ss`` time with the UTC date of ``now``.

    ``now`` may be an aware or naive (taken as UTC) datetime, a Unix time in
    seconds, or None for the current time. Fractions of a second are dropped
    and out-of-range fields roll over into the following day.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif isinstance(now, (int, float)):
        now = datetime.fromtimestamp(now, timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    midnight = datetime(now.year, now.month, now.day)
    hours, minutes, seconds = _split_hhmmss(utc_double)
    moment = midnight + timedelta(hours=hours, minutes=minutes, seconds=seconds)
    return calendar.timegm(moment.timetuple())


def convert_user_period_to_rx_command(period_user: int) -> str:
    """Express a period in milliseconds as a receiver interval keyword."""
    if period_user == 0:
        return "OnChange"
    if period_user < 1000:
        return f"msec{period_user}"
    if period_user <= 60000:
        return f"sec{period_user // 1000}"
    return f"min{period_user // 60000}"


def get_crc(message) -> int:
    """CRC field of an SBF block header."""
    return unpack_uint16(message, 2)


def get_id(message) -> int:
    """Block number of an SBF block, without the revision bits."""
    return unpack_uint16(message, 4) & _BLOCK_NUMBER_MASK


def get_length(message) -> int:
    """Length field of an SBF block header."""
    return unpack_uint16(message, 6)


def get_tow(message) -> int:
    """Time-of-week field of an SBF block."""
    return unpack_uint32(message, 8)


def get_wnc(message) -> int:
    """Week-number field of an SBF block."""
    return unpack_uint16(message, 12)