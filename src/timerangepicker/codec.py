"""Conversions between dial angles and 24-hour times."""

from __future__ import annotations

import math

from .models import TimeOfDay

MAX_ANGLE = 360.0
HOUR_ANGLE = MAX_ANGLE / 24.0  # 15 degrees per hour
MINUTE_ANGLE = HOUR_ANGLE / 60.0  # 0.25 degrees per minute
TICK_ANGLE = HOUR_ANGLE / 6.0  # 10-minute snap spacing
QUARTER_TURN = 90.0  # rotation moving 0 degrees from "right" to "up"


def time_to_angle(hour: int, minute: int) -> float:
    """Return the dial angle for ``hour:minute``.

    Inputs are not validated; out-of-range values simply produce angles
    outside ``[0, 360)``.
    """
    return hour * HOUR_ANGLE + minute * MINUTE_ANGLE


def angle_to_time(angle: float, minute_span: float = MINUTE_ANGLE) -> TimeOfDay:
    """Floor ``angle`` to the time it represents.

    ``minute_span`` is the number of degrees counted as one minute step;
    coarser spans give coarser minute values. ``angle_to_time(360)`` is
    ``24:00``.
    """
    hour = math.floor(angle / HOUR_ANGLE)
    minute = math.floor(math.fmod(angle, HOUR_ANGLE) / minute_span)
    return TimeOfDay(hour=int(hour), minute=int(minute))


def format_time(hour: int, minute: int) -> str:
    return TimeOfDay(hour, minute).format_text


__all__ = [
    "MAX_ANGLE",
    "HOUR_ANGLE",
    "MINUTE_ANGLE",
    "TICK_ANGLE",
    "QUARTER_TURN",
    "time_to_angle",
    "angle_to_time",
    "format_time",
]
