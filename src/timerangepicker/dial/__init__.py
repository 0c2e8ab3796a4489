"""Dial engine: tick table construction and snapping."""

from .snapping import nearest_tick
from .ticks import HOURS_PER_DIAL, TICKS_PER_HOUR, build_tick_table

__all__ = [
    "build_tick_table",
    "nearest_tick",
    "HOURS_PER_DIAL",
    "TICKS_PER_HOUR",
]
