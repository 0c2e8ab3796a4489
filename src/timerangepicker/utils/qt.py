"""Qt helper utilities."""

from typing import Tuple

from PySide6 import QtCore, QtGui

from ..models import Point

# QPainter arcs are measured in 1/16th degree, counter-clockwise from 3 o'clock.
QT_ARC_UNITS = 16


def to_qpointf(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(float(p.x), float(p.y))


def from_qpointf(p: QtCore.QPointF) -> Point:
    return Point(float(p.x()), float(p.y()))


def qt_arc_angles(start_angle: float, sweep: float) -> Tuple[int, int]:
    """Convert a dial ``start_angle``/``sweep`` into ``QPainter.drawArc`` units.

    Dial angles start at 12 o'clock and run clockwise; Qt's start at
    3 o'clock and run counter-clockwise.
    """
    start = (90.0 - start_angle) * QT_ARC_UNITS
    span = -sweep * QT_ARC_UNITS
    return int(round(start)), int(round(span))


def qcolor(spec: str) -> QtGui.QColor:
    color = QtGui.QColor(spec)
    if not color.isValid():
        raise ValueError(f"invalid color: {spec!r}")
    return color


__all__ = ["to_qpointf", "from_qpointf", "qt_arc_angles", "qcolor"]
