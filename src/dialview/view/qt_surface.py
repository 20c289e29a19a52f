"""
QPainter Drawing Surface
Adapts the renderer's DrawSurface protocol to a QPainter.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen

from dialview.view.renderer import DrawStyle, TextAlign


def to_qcolor(name: str) -> QColor:
    """Parse a color name or #RRGGBB string, raising ValueError when Qt cannot."""
    color = QColor(name)
    if not color.isValid():
        raise ValueError(f"Invalid color: '{name}'")
    return color


class QPainterSurface:
    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.painter.setRenderHint(QPainter.Antialiasing, True)

    def _apply(self, style: DrawStyle) -> None:
        color = to_qcolor(style.color)
        self.painter.setPen(QPen(color) if style.stroke else Qt.NoPen)
        self.painter.setBrush(QBrush(color) if style.fill else Qt.NoBrush)

    def draw_circle(self, x: float, y: float, radius: float, style: DrawStyle) -> None:
        self._apply(style)
        self.painter.drawEllipse(QPointF(x, y), radius, radius)

    def draw_text(self, text: str, x: float, y: float, style: DrawStyle) -> None:
        # Text is drawn with the pen, the point is the baseline anchor
        self.painter.setPen(QPen(to_qcolor(style.color)))

        font = QFont(self.painter.font())
        font.setPixelSize(max(1, round(style.text_size)))
        self.painter.setFont(font)

        width = QFontMetricsF(font).horizontalAdvance(text)
        if style.align == TextAlign.CENTER:
            x -= width / 2
        elif style.align == TextAlign.RIGHT:
            x -= width

        self.painter.drawText(QPointF(x, y), text)
