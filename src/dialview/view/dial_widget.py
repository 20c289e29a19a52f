"""
Dial Widget
===========
A QWidget hosting a Dial.

The widget does no geometry or state logic of its own: it forwards Qt's
resize, mouse and paint callbacks to the Dial controller and schedules a
repaint when the selection changes.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from dialview.config import DEFAULT_OFF_COLOR, DEFAULT_ON_COLOR
from dialview.controller.dial import Dial
from dialview.model.hit_test import PointerPhase
from dialview.view.qt_surface import QPainterSurface, to_qcolor

logger = logging.getLogger(__name__)


class DialWidget(QWidget):
    # Emits the new selection index after each advance
    selection_changed = Signal(int)

    def __init__(
        self,
        on_color: str = DEFAULT_ON_COLOR,
        off_color: str = DEFAULT_OFF_COLOR,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)

        # Fail at construction rather than on the first paint
        to_qcolor(on_color)
        to_qcolor(off_color)

        self.dial = Dial(on_color=on_color, off_color=off_color, width=self.width(), height=self.height())

        # Clickable for the accessibility layer
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAccessibleName("Dial")
        self.setAccessibleDescription("Tap the dial to select the next position.")
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(1, 1)

    def sizeHint(self) -> QSize:
        return QSize(400, 400)

    @property
    def selection(self) -> int:
        return self.dial.index

    # ------------------------------------------------------------------------------
    # Qt callbacks
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.dial.resize(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.dial.render(QPainterSurface(painter))
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self._forward(event, PointerPhase.PRESS, super().mousePressEvent)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._forward(event, PointerPhase.MOVE, super().mouseMoveEvent)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._forward(event, PointerPhase.RELEASE, super().mouseReleaseEvent)

    def _forward(self, event: QMouseEvent, phase: PointerPhase, fallback) -> None:
        pos = event.position()
        if self.dial.pointer_event(pos.x(), pos.y(), phase):
            event.accept()
            self.update()
            self.selection_changed.emit(self.dial.index)
            return
        fallback(event)
