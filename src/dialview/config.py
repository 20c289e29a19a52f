"""
Dial Configuration & Constants
==============================
This module serves as the central registry for the fixed constants of the dial
and for its construction-time color configuration.

Why is this file needed?
------------------------
1. Abstraction: The paddings, sizes and angles are presentation constants that
   would otherwise be scattered as magic numbers through geometry and drawing code.
2. Configuration: The on/off fill colors are the only user-supplied options and
   they live in one immutable value.

Exports:
    SELECTION_COUNT (int): Number of selectable positions on the dial.
    DialColors: Fill colors for the "on" and "off" visual states.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

# Selection
SELECTION_COUNT: int = 4

# Fitted circle: fraction of the half of the smaller viewport side
RADIUS_FACTOR: float = 0.8

# Angular placement of the positions (radians)
INITIAL_ANGLE: float = 9 / 8.0 * math.pi
ANGLE_STEP: float = math.pi / 4

# Marker sits inside the disc edge, labels just outside it
MARKER_PADDING: float = 35.0
LABEL_PADDING: float = 20.0
MARKER_RADIUS: float = 20.0
LABEL_TEXT_SIZE: float = 40.0

# Colors (any name or #RRGGBB understood by QColor)
DEFAULT_ON_COLOR: str = "cyan"
DEFAULT_OFF_COLOR: str = "gray"
MARKER_COLOR: str = "black"


@dataclass(frozen=True)
class DialColors:
    """Fill colors of the disc for the two visual states."""
    on: str = DEFAULT_ON_COLOR
    off: str = DEFAULT_OFF_COLOR

    def for_state(self, is_on: bool) -> str:
        return self.on if is_on else self.off
