"""Parsing of RMC (recommended minimum data) sentences."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

from gnsskit import parsing, strings
from gnsskit.parsing import ParseError

__all__ = ["RmcMessage", "RmcParser"]

_NANOSECONDS = 1_000_000_000


def _to_single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    (single,) = struct.unpack("<f", struct.pack("<f", value))
    return single


@dataclass
class RmcMessage:
    """Contents of one RMC sentence."""

    frame_id: str = ""
    stamp: int = 0
    message_id: str = ""
    utc_seconds: float = 0.0
    position_status: str = ""
    lat: float = 0.0
    lon: float = 0.0
    lat_dir: str = ""
    lon_dir: str = ""
    speed: float = 0.0
    track: float = 0.0
    date: str = ""
    mag_var: float = 0.0
    mag_var_direction: str = ""
    mode_indicator: str = ""


class RmcParser:
    """Parses RMC sentences and remembers whether the last one was usable."""

    MESSAGE_ID = "$GPRMC"
    LEN_MIN = 13
    LEN_MAX = 14
    KNOTS_TO_MPS = 0.5144444

    def __init__(self) -> None:
        self._last_valid = False

    def parse(
        self,
        body: Sequence[str],
        frame_id: str = "",
        use_gnss_time: bool = False,
        timestamp: int = 0,
        now=None,
    ) -> RmcMessage:
        """Parse the comma-separated fields of an RMC sentence.

        ``body`` holds the fields including the message id and the checksum.
        With ``use_gnss_time`` the stamp (in nanoseconds) is derived from the
        sentence time and the UTC date of ``now``; otherwise ``timestamp`` is
        used. Speed is converted from knots to metres per second.
        """
        if not self.LEN_MIN <= len(body) <= self.LEN_MAX:
            raise ParseError(
                f"Expected GPRMC length is between {self.LEN_MIN} and "
                f"{self.LEN_MAX}. The actual length is {len(body)}"
            )

        msg = RmcMessage(frame_id=frame_id, message_id=body[0])

        utc_field = body[1]
        if utc_field and utc_field != "0":
            try:
                utc_double = strings.to_double(utc_field)
            except ValueError as exc:
                raise ParseError("Error parsing UTC seconds in GPRMC") from exc
            msg.utc_seconds = parsing.convert_utc_double_to_seconds(utc_double)
            if use_gnss_time:
                unix_seconds = parsing.convert_utc_to_unix(utc_double, now)
                msg.stamp = (
                    unix_seconds * _NANOSECONDS
                    + (int(utc_double * 100) % 100) * 10000
                )
            else:
                msg.stamp = timestamp

        msg.position_status = body[2]
        msg.lat_dir = body[4]
        msg.lon_dir = body[6]

        date_str = body[9]
        if date_str:
            if len(date_str) < 4:
                raise ParseError(f"GPRMC date field is too short: {date_str!r}")
            msg.date = f"20{date_str[4:6]}-{date_str[2:4]}-{date_str[0:2]}"

        try:
            msg.lat = parsing.convert_dms_to_degrees(parsing.parse_double(body[3]))
            msg.lon = parsing.convert_dms_to_degrees(parsing.parse_double(body[5]))
            msg.speed = _to_single(parsing.parse_float(body[7]) * self.KNOTS_TO_MPS)
            msg.track = parsing.parse_float(body[8])
            msg.mag_var = parsing.parse_float(body[10])
        except ParseError as exc:
            self._last_valid = False
            raise ParseError("Error parsing GPRMC message.") from exc

        msg.mag_var_direction = body[11]
        if len(body) == self.LEN_MAX:
            msg.mode_indicator = body[12]

        self._last_valid = True
        return msg

    def was_last_valid(self) -> bool:
        """Tell whether the last RMC sentence parsed was valid."""
        return self._last_valid