"""Locating the ends of NMEA sentences in received datagrams."""

from __future__ import annotations

__all__ = ["find_nmea_end"]

_CRLF = b"\r\n"


def find_nmea_end(buffer: bytes, start: int = 0, stop: int | None = None) -> int:
    """Return the index of the LF that ends the sentence starting at ``start``.

    The search looks for a CR LF pair whose LF lies at ``start + 2`` or later
    and before ``stop``, which defaults to the length of ``buffer``. When no
    such pair exists the result is ``stop``, or ``start + 2`` if that lies
    further on, so that the sentence is taken to run to the end of the data.
    """
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    if stop is None:
        stop = len(buffer)
    if stop < 0:
        raise ValueError(f"stop must not be negative: {stop}")

    carriage_return = bytes(buffer).find(_CRLF, start + 1, stop)
    if carriage_return == -1:
        return max(start + 2, stop)
    return carriage_return + 1