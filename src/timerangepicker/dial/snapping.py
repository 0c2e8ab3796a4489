"""Nearest-tick search used while a handle is dragged."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from ..codec import MAX_ANGLE
from ..models import Tick, TickTable


def _angles_of(table: Sequence[Tick]) -> np.ndarray:
    if isinstance(table, TickTable):
        return table.angles
    return np.asarray([t.angle for t in table], dtype=np.float64)


def _candidates(angles: np.ndarray, angle: float) -> Tuple[int, int]:
    """Return ``(lower, upper)`` indices bracketing ``angle``.

    An exact hit yields the same index twice. Queries below the first
    angle clamp both indices to 0 rather than wrapping to the end.
    """
    last = int(angles.size) - 1
    idx = int(np.searchsorted(angles, angle, side="left"))
    if idx <= last and angles[idx] == angle:
        return idx, idx
    if idx == 0:
        return 0, 0
    return max(0, idx - 1), min(last, idx)


def nearest_tick(table: Sequence[Tick], angle: float, wrap: bool = False) -> Tick:
    """Return the tick whose angle is closest to ``angle``.

    ``table`` must be sorted by angle and ``angle`` canonical. On an exact
    tie the upper (larger-angle) candidate wins.

    By default the search does not wrap: an angle below the first tick
    snaps to the first tick and one above the last tick snaps to the last,
    even though the dial is circular. Pass ``wrap=True`` to compare across
    the 0/360 seam as well.
    """
    angles = _angles_of(table)
    if angles.size == 0:
        raise ValueError("cannot snap to an empty tick table")

    lower, upper = _candidates(angles, angle)
    lower_diff = abs(angle - float(angles[lower]))
    upper_diff = abs(angle - float(angles[upper]))

    if wrap and lower == upper and angles[lower] != angle:
        # Outside the table span: the neighbour lies across the seam.
        last = int(angles.size) - 1
        if angle < angles[0]:
            lower = last
            lower_diff = abs(angle - (float(angles[last]) - MAX_ANGLE))
        else:
            upper = 0
            upper_diff = abs(angle - (float(angles[0]) + MAX_ANGLE))

    if upper_diff > lower_diff:
        return table[lower]
    return table[upper]


__all__ = ["nearest_tick"]
