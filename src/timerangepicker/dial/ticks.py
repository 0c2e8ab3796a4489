"""Tick table construction for the 24-hour dial."""

from __future__ import annotations

from typing import List

from ..codec import HOUR_ANGLE, TICK_ANGLE, angle_to_time
from ..models import Point, Tick, TickKind, TickTable
from ..utils.geometry import point_from_angle

HOURS_PER_DIAL = 24
TICKS_PER_HOUR = 6  # the hour tick plus five minute ticks


def build_tick_table(center: Point, radius: float) -> TickTable:
    """Build the 144 snap positions for a dial of ``radius`` around ``center``.

    The result is sorted by angle, which is the precondition of
    :func:`~timerangepicker.dial.snapping.nearest_tick`.
    """
    ticks: List[Tick] = []
    for i in range(HOURS_PER_DIAL):
        for j in range(TICKS_PER_HOUR):
            angle = i * HOUR_ANGLE + j * TICK_ANGLE
            ticks.append(
                Tick(
                    position=point_from_angle(center, radius, angle),
                    angle=angle,
                    kind=TickKind.HOUR if j == 0 else TickKind.MINUTE,
                    time=angle_to_time(angle),
                )
            )
    ticks.sort(key=lambda t: t.angle)
    return TickTable(ticks)


__all__ = ["build_tick_table", "HOURS_PER_DIAL", "TICKS_PER_HOUR"]
