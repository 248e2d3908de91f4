"""Stepwise change of a serial port's baud rate towards a target."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["BAUDRATES", "baudrate_steps"]

#: Baud rates the receiver supports, in ascending order.
BAUDRATES: tuple[int, ...] = (
    1200,
    2400,
    4800,
    9600,
    19200,
    38400,
    57600,
    115200,
    230400,
    460800,
    500000,
    576000,
    921600,
    1000000,
    1152000,
    1500000,
    2000000,
    2500000,
    3000000,
    3500000,
    4000000,
)


def baudrate_steps(current: int, target: int) -> Iterator[int]:
    """Yield the rates to set, in order, to move from ``current`` to ``target``.

    The supported rates are walked in ascending order. Rates at or below the
    current one that are still below the target are skipped; every other rate
    is set in turn until the port runs at the target. A target that is not a
    supported rate is never reached, so the walk runs to the highest rate.
    """
    for rate in BAUDRATES:
        if current == target:
            return
        if current >= rate and target > rate:
            continue
        yield rate
        current = rate