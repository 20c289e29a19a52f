"""
Dial Controller
===============
The dial as a plain stateful object with three entry points the host wires
its callbacks to.

Why is this file needed?
------------------------
1. Decoupling: The host toolkit (Qt) only forwards resize, pointer and paint
   callbacks; no dial logic lives in a widget subclass.
2. State: It owns the lifetime state of the widget (viewport size, fitted
   circle, selection) and keeps them consistent.

Classes:
    Dial: resize(width, height), pointer_event(x, y, phase), render(surface).
"""
from __future__ import annotations

import logging
from typing import Union

from dialview.config import DEFAULT_OFF_COLOR, DEFAULT_ON_COLOR, DialColors
from dialview.model.geometry import Circle, fit_circle
from dialview.model.hit_test import PointerPhase, is_hit
from dialview.model.selection import SelectionState
from dialview.view.renderer import DialRenderer, DrawSurface

logger = logging.getLogger(__name__)


class Dial:
    def __init__(
        self,
        on_color: str = DEFAULT_ON_COLOR,
        off_color: str = DEFAULT_OFF_COLOR,
        *,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self.colors = DialColors(on=on_color, off=off_color)
        self.selection = SelectionState()
        self.renderer = DialRenderer(self.colors)

        self.width: int = 0
        self.height: int = 0
        self.circle: Circle = Circle()
        self.resize(width, height)

    # ------------------------------------------------------------------------------
    # Host entry points
    # ------------------------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Viewport changed size: refit the circle before the next draw."""
        self.circle = fit_circle(width, height)
        self.width, self.height = max(width, 0), max(height, 0)
        logger.debug(f"Resized to {self.width}x{self.height}, radius={self.circle.radius:g}")

    def pointer_event(self, x: float, y: float, phase: Union[PointerPhase, str]) -> bool:
        """
        Feed a pointer event to the dial.

        Returns:
            True if the event was a release inside the disc and the selection
            advanced, False if the event was ignored.
        """
        if not is_hit(x, y, phase, self.circle.center_x, self.circle.center_y, self.circle.radius):
            return False
        self.selection.advance()
        return True

    def render(self, surface: DrawSurface) -> None:
        self.renderer.render(surface, self.circle, self.selection.index, self.selection.is_on)

    # ------------------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------------------

    @property
    def index(self) -> int:
        return self.selection.index

    @property
    def is_on(self) -> bool:
        return self.selection.is_on

    @property
    def fill_color(self) -> str:
        return self.selection.fill_color(self.colors)
