"""Qt widget and demo application for the timerangepicker dial."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import logging
import os
import sys

from PySide6 import QtCore, QtGui, QtWidgets

APP_VERSION: str

if __package__ in (None, ""):
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    import timerangepicker as _pkg

    from timerangepicker.controller import TimeRangeController
    from timerangepicker.models import PickerConfig, TickKind, TimeOfDay
    from timerangepicker.utils import is_within_hit_radius, point_from_angle
    from timerangepicker.utils.qt import (
        from_qpointf,
        qcolor,
        qt_arc_angles,
        to_qpointf,
    )

    APP_VERSION = getattr(_pkg, "__version__", "0.0.0")
else:
    from . import __version__ as APP_VERSION
    from .controller import TimeRangeController
    from .models import PickerConfig, TickKind, TimeOfDay
    from .utils import is_within_hit_radius, point_from_angle
    from .utils.qt import from_qpointf, qcolor, qt_arc_angles, to_qpointf

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TIMERANGEPICKER_LOG_LEVEL"
TICK_INNER_RATIO = 0.95  # inner end of a tick line relative to the tick radius


# ------------------------------ Picker Widget ---------------------------------


class TimeRangePickerWidget(QtWidgets.QWidget):
    """Square 24-hour dial with draggable start/end handles."""

    timeRangeChanged = QtCore.Signal(int, int, int, int)

    def __init__(
        self, cfg: PickerConfig, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._cfg = cfg
        self.controller = TimeRangeController(on_changed=self._emit_range, config=cfg)
        self.setMouseTracking(True)
        self.setMinimumSize(240, 240)
        policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)

    # ----------------------------- Properties ---------------------------------

    def start_time(self) -> TimeOfDay:
        return self.controller.start

    def end_time(self) -> TimeOfDay:
        return self.controller.end

    def set_time_range(self, start: TimeOfDay, end: TimeOfDay) -> None:
        self.controller.set_range(start, end)
        self.update()

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(360, 360)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return width

    def _emit_range(
        self, start_hour: int, start_minute: int, end_hour: int, end_minute: int
    ) -> None:
        self.timeRangeChanged.emit(start_hour, start_minute, end_hour, end_minute)

    # ----------------------------- Interaction --------------------------------

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        size = e.size()
        self.controller.resize(float(size.width()), float(size.height()))
        super().resizeEvent(e)

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if self.controller.press(from_qpointf(e.position())) is not None:
            self.setCursor(QtCore.Qt.CursorShape.ClosedHandCursor)
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        pos = from_qpointf(e.position())
        if self.controller.active_handle is not None:
            if self.controller.move(pos):
                self.update()
            e.accept()
            return
        radius = self._cfg.handle_hit_radius
        over = is_within_hit_radius(
            pos, self.controller.start_handle, radius
        ) or is_within_hit_radius(pos, self.controller.end_handle, radius)
        self.setCursor(
            QtCore.Qt.CursorShape.OpenHandCursor
            if over
            else QtCore.Qt.CursorShape.ArrowCursor
        )

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        self.controller.release()
        self.setCursor(QtCore.Qt.CursorShape.ArrowCursor)
        e.accept()

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        try:
            self._paint_track(painter)
            self._paint_dial(painter)
            self._paint_labels(painter)
            self._paint_handles(painter)
        finally:
            painter.end()

    def _arc_rect(self) -> QtCore.QRectF:
        c = self.controller.center
        r = self.controller.track_radius
        return QtCore.QRectF(c.x - r, c.y - r, 2 * r, 2 * r)

    def _paint_track(self, painter: QtGui.QPainter) -> None:
        style = self._cfg.style
        if self.controller.track_radius <= 0:
            return
        rect = self._arc_rect()

        track_pen = QtGui.QPen(qcolor(style.track_color))
        track_pen.setWidthF(style.bar_width)
        track_pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawEllipse(rect)

        start, span = qt_arc_angles(self.controller.start_angle, self.controller.sweep)
        range_pen = QtGui.QPen(qcolor(style.range_color))
        range_pen.setWidthF(style.bar_width)
        range_pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        painter.setPen(range_pen)
        painter.drawArc(rect, start, span)

    def _paint_dial(self, painter: QtGui.QPainter) -> None:
        style = self._cfg.style
        span = max(1, int(self._cfg.hour_span))
        center = self.controller.center
        inner_radius = self.controller.tick_radius * TICK_INNER_RATIO

        hour_pen = QtGui.QPen(qcolor(style.hour_tick_color))
        hour_pen.setWidthF(3.0)
        hour_pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        minute_color = qcolor(style.minute_tick_color)
        minute_color.setAlphaF(0.5)
        minute_pen = QtGui.QPen(minute_color)
        minute_pen.setWidthF(2.0)
        minute_pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)

        font = QtGui.QFont(self.font())
        font.setPointSize(style.hour_font_pt)

        for tick in self.controller.table:
            hour = tick.time.hour
            inner = point_from_angle(center, inner_radius, tick.angle)
            if tick.kind is TickKind.HOUR:
                if hour % span == 0:
                    self._draw_centered_text(
                        painter, str(hour), inner.x, inner.y, font, style.text_color
                    )
                    continue
                painter.setPen(hour_pen)
            else:
                sub = tick.time.minute // 10
                # Leave room around the numbered hours.
                if hour % span == 0 and sub == 1:
                    continue
                if hour % span == span - 1 and sub == 5:
                    continue
                painter.setPen(minute_pen)
            painter.drawLine(to_qpointf(tick.position), to_qpointf(inner))

    def _paint_labels(self, painter: QtGui.QPainter) -> None:
        style = self._cfg.style
        c = self.controller.center
        step = c.y / 10.0
        label_font = QtGui.QFont(self.font())
        label_font.setPointSize(style.label_font_pt)
        time_font = QtGui.QFont(self.font())
        time_font.setPointSize(style.time_font_pt)

        rows = (
            (self._cfg.start_label, label_font, c.y - step * 3),
            (self.controller.start.format_text, time_font, c.y - step),
            (self._cfg.end_label, label_font, c.y + step),
            (self.controller.end.format_text, time_font, c.y + step * 3),
        )
        for text, font, y in rows:
            self._draw_centered_text(painter, text, c.x, y, font, style.text_color)

    def _paint_handles(self, painter: QtGui.QPainter) -> None:
        r = max(4.0, self._cfg.style.bar_width * 0.4)
        painter.setBrush(QtGui.QBrush(QtGui.QColor(255, 255, 255, 240)))
        dot_pen = QtGui.QPen(QtGui.QColor(0, 0, 0, 200))
        dot_pen.setWidth(1)
        painter.setPen(dot_pen)
        painter.drawEllipse(to_qpointf(self.controller.start_handle), r, r)
        painter.drawEllipse(to_qpointf(self.controller.end_handle), r, r)

    @staticmethod
    def _draw_centered_text(
        painter: QtGui.QPainter,
        text: str,
        x: float,
        y: float,
        font: QtGui.QFont,
        color: str,
    ) -> None:
        painter.setFont(font)
        painter.setPen(QtGui.QPen(qcolor(color)))
        metrics = QtGui.QFontMetricsF(font)
        width = metrics.horizontalAdvance(text)
        baseline = y + (metrics.ascent() - metrics.descent()) / 2.0
        painter.drawText(QtCore.QPointF(x - width / 2.0, baseline), text)


# ---------------------------- Main Controller ---------------------------------


def _check_colors(cfg: PickerConfig) -> None:
    """Raise ``ValueError`` if any style color is not a valid Qt color."""
    style = cfg.style
    for spec in (
        style.track_color,
        style.range_color,
        style.hour_tick_color,
        style.minute_tick_color,
        style.text_color,
    ):
        qcolor(spec)


class MainController(QtCore.QObject):
    def __init__(self, app: QtWidgets.QApplication) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = self._load_config()
        self._app_version = app.applicationVersion() or APP_VERSION

        self.window = QtWidgets.QWidget()
        self.window.setWindowTitle(f"timerangepicker {self._app_version}")
        self.picker = TimeRangePickerWidget(self.cfg, self.window)
        self.status_label = QtWidgets.QLabel(self._range_text())
        self.status_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)

        v = QtWidgets.QVBoxLayout(self.window)
        v.addWidget(self.picker, stretch=1)
        v.addWidget(self.status_label, stretch=0)

        self.picker.timeRangeChanged.connect(self._on_range_changed)

        self.window.resize(420, 460)
        self.window.show()

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        return Path.home() / ".timerangepicker_config.json"

    def _load_config(self) -> PickerConfig:
        p = self._config_path()
        if p.exists():
            try:
                cfg = PickerConfig.from_json(p.read_text(encoding="utf-8"))
                _check_colors(cfg)
                return cfg
            except (OSError, ValueError, TypeError, KeyError, IndexError) as exc:
                logger.warning("Ignoring unreadable config %s: %s", p, exc)
        return PickerConfig()

    def save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save config to %s: %s", p, exc)

    # ---------------------------- Event Handlers ------------------------------

    def _range_text(self) -> str:
        return (
            f"{self.picker.start_time().format_text}"
            f" - {self.picker.end_time().format_text}"
        )

    def _on_range_changed(
        self, start_hour: int, start_minute: int, end_hour: int, end_minute: int
    ) -> None:
        logger.info(
            "startHour: %d, startMinute: %d, endHour: %d, endMinute: %d",
            start_hour,
            start_minute,
            end_hour,
            end_minute,
        )
        self.status_label.setText(self._range_text())


# ---------------------------------- Main --------------------------------------


def _resolve_log_level() -> int:
    raw = os.getenv(LOG_LEVEL_ENV, "INFO").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> None:
    logging.basicConfig(
        level=_resolve_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("timerangepicker")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()

    ctrl.save_config()
    sys.exit(ret)


if __name__ == "__main__":
    main()
