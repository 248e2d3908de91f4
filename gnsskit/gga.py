"""Parsing of GGA (fix data) sentences."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from gnsskit import parsing, strings
from gnsskit.parsing import ParseError

__all__ = ["GgaMessage", "GgaParser"]

_NANOSECONDS = 1_000_000_000


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class GgaMessage:
    """Contents of one GGA sentence."""

    frame_id: str = ""
    stamp: int = 0
    message_id: str = ""
    utc_seconds: float = 0.0
    lat: float = 0.0
    lon: float = 0.0
    lat_dir: str = ""
    lon_dir: str = ""
    gps_qual: int = 0
    num_sats: int = 0
    hdop: float = 0.0
    alt: float = 0.0
    altitude_units: str = ""
    undulation: float = 0.0
    undulation_units: str = ""
    diff_age: int = 0
    station_id: str = ""


class GgaParser:
    """Parses GGA sentences and remembers whether the last one was valid."""

    MESSAGE_ID = "$GPGGA"
    LENGTH = 16

    def __init__(self) -> None:
        self._last_valid = False

    def parse(
        self,
        body: Sequence[str],
        frame_id: str = "",
        use_gnss_time: bool = False,
        timestamp: int = 0,
        now=None,
    ) -> GgaMessage:
        """Parse the comma-separated fields of a GGA sentence.

        ``body`` holds the fields including the message id and the checksum.
        With ``use_gnss_time`` the stamp (in nanoseconds) is derived from the
        sentence time and the UTC date of ``now``; otherwise ``timestamp`` is
        used.
        """
        if len(body) != self.LENGTH:
            raise ParseError(
                f"GGA parsing failed: Expected GPGGA length is {self.LENGTH}, "
                f"but actual length is {len(body)}"
            )

        msg = GgaMessage(frame_id=frame_id, message_id=body[0])

        utc_field = body[1]
        if utc_field and utc_field != "0":
            try:
                utc_double = strings.to_double(utc_field)
            except ValueError as exc:
                raise ParseError("Error parsing UTC seconds in GPGGA") from exc
            if use_gnss_time:
                msg.utc_seconds = parsing.convert_utc_double_to_seconds(utc_double)
                unix_seconds = parsing.convert_utc_to_unix(utc_double, now)
                msg.stamp = (
                    unix_seconds * _NANOSECONDS
                    + (int(utc_double * 100) % 100) * 10000
                )
            else:
                msg.stamp = timestamp

        try:
            msg.lat = parsing.convert_dms_to_degrees(parsing.parse_double(body[2]))
            msg.lon = parsing.convert_dms_to_degrees(parsing.parse_double(body[4]))
            msg.lat_dir = body[3]
            msg.lon_dir = body[5]
            msg.gps_qual = parsing.parse_uint32(body[6])
            msg.num_sats = parsing.parse_uint32(body[7])
            msg.hdop = parsing.parse_float(body[8])
            msg.alt = parsing.parse_float(body[9])
            msg.altitude_units = body[10]
            msg.undulation = parsing.parse_float(body[11])
            msg.undulation_units = body[12]
            diff_age = parsing.parse_double(body[13])
        except ParseError as exc:
            self._last_valid = False
            raise ParseError("GPGGA message was invalid.") from exc

        msg.diff_age = _round_half_away(diff_age) % (1 << 32)
        msg.station_id = body[14]

        self._last_valid = True
        return msg

    def was_last_valid(self) -> bool:
        """Tell whether the last GGA sentence parsed was valid."""
        return self._last_valid