"""Parsing of GSA (DOP and active satellites) sentences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from gnsskit import parsing
from gnsskit.parsing import ParseError

__all__ = ["GsaMessage", "GsaParser"]


@dataclass
class GsaMessage:
    """Contents of one GSA sentence."""

    frame_id: str = ""
    message_id: str = ""
    auto_manual_mode: str = ""
    fix_mode: int = 0
    sv_ids: list[int] = field(default_factory=list)
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0


class GsaParser:
    """Parses GSA sentences."""

    MESSAGE_ID = "$GPGSA"
    LENGTH = 19
    _SV_FIELDS = slice(3, 15)

    def parse(
        self,
        body: Sequence[str],
        frame_id: str = "",
        use_gnss_time: bool = False,
        timestamp: int = 0,
        now=None,
    ) -> GsaMessage:
        """Parse the comma-separated fields of a GSA sentence.

        ``body`` holds the fields including the message id and the checksum.
        The time arguments are accepted for a uniform parser interface and
        are not used, since GSA carries no time.
        """
        if len(body) != self.LENGTH:
            raise ParseError(
                f"Expected GPGSA length is {self.LENGTH}. "
                f"The actual length is {len(body)}"
            )

        msg = GsaMessage(
            frame_id=frame_id, message_id=body[0], auto_manual_mode=body[1]
        )

        try:
            msg.fix_mode = parsing.parse_uint8(body[2])
        except ParseError as exc:
            raise ParseError("GPGSA fix_mode parsing error.") from exc

        try:
            msg.sv_ids = [
                parsing.parse_uint8(sv) for sv in body[self._SV_FIELDS] if sv
            ]
        except ParseError as exc:
            raise ParseError("GPGSA sv_ids parsing error.") from exc

        for name, text in (("pdop", body[15]), ("hdop", body[16]), ("vdop", body[17])):
            try:
                setattr(msg, name, parsing.parse_float(text))
            except ParseError as exc:
                raise ParseError(f"GPGSA {name} parsing error.") from exc

        return msg