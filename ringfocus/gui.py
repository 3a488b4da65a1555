"""PySide6 window switcher driving the focus navigator."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QKeyEvent, QKeySequence, QPaintEvent, QPainter, QPen, QRadialGradient
from PySide6.QtWidgets import QLabel, QMainWindow, QPushButton, QHBoxLayout, QSizePolicy, QVBoxLayout, QWidget

from .config import NavigatorConfig
from .desktop import DemoDesktop, DemoWindow
from .navigator import FocusCycler

logger = logging.getLogger(__name__)

BACKGROUND_COLORS = ("#0f172a", "#111b2c", "#1f2937")
TILE_COLOR = "#1f2937"
TILE_TEXT_COLOR = "#e2e8f0"
FOCUS_COLOR = "#38bdf8"
FOCUS_TEXT_COLOR = "#0f172a"
RING_RADIUS_RATIO = 0.34
TILE_RADIUS_RATIO = 0.11


def binding_name(event: QKeyEvent) -> str:
    """Render a key event the way bindings are written in the configuration."""
    key = event.key()
    shift = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
    if key == Qt.Key.Key_Backtab:
        key = Qt.Key.Key_Tab
        shift = True
    name = QKeySequence(int(key)).toString()
    return f"Shift+{name}" if shift else name


class WindowRingWidget(QWidget):
    """Draws the desktop's windows as tiles around a ring."""

    def __init__(self, desktop: DemoDesktop, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._desktop = desktop
        self.setMinimumSize(360, 360)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        painter.save()
        gradient = QRadialGradient(QPointF(self.width() / 2.0, self.height() / 2.0), max(self.width(), self.height()) * 0.65)
        inner, mid, outer = BACKGROUND_COLORS
        gradient.setColorAt(0.0, QColor(inner))
        gradient.setColorAt(0.5, QColor(mid))
        gradient.setColorAt(1.0, QColor(outer))
        painter.fillRect(self.rect(), gradient)
        painter.restore()

        windows = self._desktop.windows
        if not windows:
            return

        size = min(self.width(), self.height())
        ring_radius = size * RING_RADIUS_RATIO
        tile_radius = size * TILE_RADIUS_RATIO
        painter.translate(self.width() / 2.0, self.height() / 2.0)

        ring_pen = QPen(QColor(TILE_COLOR))
        ring_pen.setWidthF(size * 0.008)
        painter.setPen(ring_pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QRectF(-ring_radius, -ring_radius, ring_radius * 2, ring_radius * 2))

        font = painter.font()
        font.setPointSizeF(max(7.0, tile_radius * 0.28))
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)

        step = 360.0 / len(windows)
        for index, window in enumerate(windows):
            self._draw_tile(painter, window, self._point_on_circle(ring_radius, index * step), tile_radius)

    def _draw_tile(self, painter: QPainter, window: DemoWindow, center: QPointF, radius: float) -> None:
        focused = window is self._desktop.focused
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(FOCUS_COLOR if focused else TILE_COLOR))
        rect = QRectF(center.x() - radius, center.y() - radius, radius * 2, radius * 2)
        painter.drawRoundedRect(rect, radius * 0.25, radius * 0.25)
        painter.setPen(QPen(QColor(FOCUS_TEXT_COLOR if focused else TILE_TEXT_COLOR)))
        label = f"[{window.title}]" if window.is_maximized() else window.title
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, label)
        painter.restore()

    @staticmethod
    def _point_on_circle(radius: float, angle_degrees: float) -> QPointF:
        radians = math.radians(angle_degrees - 90.0)
        return QPointF(radius * math.cos(radians), radius * math.sin(radians))


class WindowSwitcher(QMainWindow):
    """Main application window."""

    def __init__(self, config: Optional[NavigatorConfig] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Ring Focus")
        self._config = config or NavigatorConfig()
        self._desktop = DemoDesktop(self._config.windows)
        self._cycler = FocusCycler(lambda: self._desktop.windows, self._desktop.get_focused)
        self._bindings: dict[str, Callable[[], object]] = {}
        for key in self._config.next_keys:
            self._bindings[key] = self._cycler.focus_next
        for key in self._config.previous_keys:
            self._bindings[key] = self._cycler.focus_previous
        for key in self._config.swap_next_keys:
            self._bindings[key] = self._cycler.swap_next
        for key in self._config.swap_previous_keys:
            self._bindings[key] = self._cycler.swap_previous

        self._ring_widget = WindowRingWidget(self._desktop)
        self._ring_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)

        self._status = QLabel()
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status.setStyleSheet(f"color: {TILE_TEXT_COLOR}; font-weight: 600;")
        layout.addWidget(self._status)
        layout.addWidget(self._ring_widget, stretch=1)

        controls_layout = QHBoxLayout()
        controls_layout.setSpacing(12)
        controls_layout.addStretch(1)
        self._maximize_button = QPushButton("Maximize")
        self._open_button = QPushButton("Open")
        self._close_button = QPushButton("Close")
        self._maximize_button.clicked.connect(self._handle_maximize)
        self._open_button.clicked.connect(self._handle_open)
        self._close_button.clicked.connect(self._handle_close)
        for button in (self._maximize_button, self._open_button, self._close_button):
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            button.setMinimumWidth(100)
            button.setStyleSheet(
                f"QPushButton {{background-color: {FOCUS_COLOR}; color: {FOCUS_TEXT_COLOR}; padding: 10px 16px; "
                f"border-radius: 12px; font-weight: 600;}}"
            )
            controls_layout.addWidget(button)
        controls_layout.addStretch(1)
        layout.addLayout(controls_layout)

        self.setCentralWidget(central)
        self.setStyleSheet(f"QMainWindow {{background-color: {BACKGROUND_COLORS[0]};}}")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.resize(720, 760)
        self._refresh()

    def focusNextPrevChild(self, next: bool) -> bool:
        # Tab and Shift+Tab are navigation bindings here.
        return False

    def keyPressEvent(self, event: QKeyEvent) -> None:
        name = binding_name(event)
        command = self._bindings.get(name)
        if command is None:
            super().keyPressEvent(event)
            return
        logger.debug("Key %s", name)
        command()
        self._refresh()

    def _handle_maximize(self) -> None:
        focused = self._desktop.focused
        if focused is not None:
            focused.set_maximized(not focused.is_maximized())
            self._refresh()

    def _handle_open(self) -> None:
        self._desktop.open_window(f"window {len(self._desktop.windows) + 1}")
        self._refresh()

    def _handle_close(self) -> None:
        focused = self._desktop.focused
        if focused is not None:
            self._desktop.close_window(focused)
            self._refresh()

    def _refresh(self) -> None:
        focused = self._desktop.focused
        self._status.setText(focused.title if focused is not None else "no windows")
        self._ring_widget.update()
