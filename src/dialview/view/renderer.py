"""
Dial Renderer
=============
Turns the dial state into a sequence of draw commands.

The renderer knows nothing about Qt: it talks to any object implementing the
DrawSurface protocol. The Qt adapter lives in qt_surface.py.

Draw order per frame:
    1. the disc, filled with the on/off color,
    2. the marker at the active position, inside the disc edge,
    3. the labels 0..3, outside the disc edge.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Protocol

from dialview.config import (
    LABEL_TEXT_SIZE,
    MARKER_COLOR,
    MARKER_RADIUS,
    SELECTION_COUNT,
    DialColors,
)
from dialview.model.geometry import Circle, position_for_index, positions_for_indices


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class DrawStyle:
    """Immutable paint settings handed to every draw command."""
    color: str
    fill: bool = True
    stroke: bool = False
    align: TextAlign = TextAlign.LEFT
    text_size: float = 12.0


class DrawSurface(Protocol):
    def draw_circle(self, x: float, y: float, radius: float, style: DrawStyle) -> None: ...
    def draw_text(self, text: str, x: float, y: float, style: DrawStyle) -> None: ...


class DialRenderer:
    """Issues the draw commands for one frame of the dial."""

    def __init__(self, colors: DialColors | None = None) -> None:
        self.colors = colors or DialColors()

        self.marker_style = DrawStyle(
            color=MARKER_COLOR,
            fill=True,
            stroke=True,
            align=TextAlign.CENTER,
            text_size=LABEL_TEXT_SIZE,
        )
        self._dial_off_style = DrawStyle(color=self.colors.off)
        self._dial_on_style = replace(self._dial_off_style, color=self.colors.on)

    def dial_style(self, is_on: bool) -> DrawStyle:
        return self._dial_on_style if is_on else self._dial_off_style

    def render(self, surface: DrawSurface, circle: Circle, selection: int, is_on: bool) -> None:
        self.draw_dial(surface, circle, is_on)
        self.draw_marker(surface, circle, selection)
        self.draw_labels(surface, circle)

    def draw_dial(self, surface: DrawSurface, circle: Circle, is_on: bool) -> None:
        surface.draw_circle(circle.center_x, circle.center_y, circle.radius, self.dial_style(is_on))

    def draw_marker(self, surface: DrawSurface, circle: Circle, selection: int) -> None:
        x, y = position_for_index(selection, circle.marker_radius, circle.center_x, circle.center_y)
        surface.draw_circle(x, y, MARKER_RADIUS, self.marker_style)

    def draw_labels(self, surface: DrawSurface, circle: Circle) -> None:
        points = positions_for_indices(
            range(SELECTION_COUNT), circle.label_radius, circle.center_x, circle.center_y
        )
        for position, (x, y) in enumerate(points):
            surface.draw_text(str(position), float(x), float(y), self.marker_style)
