"""
Dial Geometry
=============
Pure functions that fit the dial circle into a viewport and place the
selection positions on it.

The viewport uses screen coordinates: the origin is the top-left corner and
y grows downwards. A position is found with the parametric equation of a
circle, shifted to the circle center:

    x = radius * cos(angle) + center_x
    y = radius * sin(angle) + center_y

Exports:
    Circle: The fitted circle (center + radius).
    compute_radius: Radius of the circle that fits a viewport.
    fit_circle: Circle centered in a viewport.
    position_for_index: Coordinate of one selection position.
    positions_for_indices: Vectorised variant returning an (N, 2) array.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

import numpy as np

from dialview.config import (
    ANGLE_STEP,
    INITIAL_ANGLE,
    LABEL_PADDING,
    MARKER_PADDING,
    RADIUS_FACTOR,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle:
    """The dial disc, fitted to the viewport."""
    center_x: float = 0.0
    center_y: float = 0.0
    radius: float = 0.0

    @property
    def marker_radius(self) -> float:
        """Radius of the ring the marker travels on (inside the disc edge)."""
        return self.radius - MARKER_PADDING

    @property
    def label_radius(self) -> float:
        """Radius of the ring the labels are placed on (outside the disc edge)."""
        return self.radius + LABEL_PADDING


def compute_radius(width: int, height: int) -> float:
    """
    Radius of the dial for a viewport of the given size.

    The radius is based on the smaller side, otherwise the disc would leave the
    viewport along the other one. It is then shrunk to leave a visual margin.

    Args:
        width: Viewport width in pixels (>= 0).
        height: Viewport height in pixels (>= 0).

    Returns:
        RADIUS_FACTOR * min(width, height) / 2
    """
    smaller_side = min(width, height)
    return RADIUS_FACTOR * (smaller_side / 2)


def fit_circle(width: int, height: int) -> Circle:
    """Center the dial in the viewport and fit its radius."""
    if width < 0 or height < 0:
        logger.warning(f"Negative viewport size {width}x{height}, clamping to 0.")
        width, height = max(width, 0), max(height, 0)

    return Circle(
        center_x=width / 2,
        center_y=height / 2,
        radius=compute_radius(width, height),
    )


def angle_for_index(index: int) -> float:
    """Angle (radians) of a selection position, measured clockwise on screen."""
    return INITIAL_ANGLE + index * ANGLE_STEP


def position_for_index(
    index: int,
    radius: float,
    center_x: float,
    center_y: float
) -> tuple[float, float]:
    """
    Coordinate of a selection position on a circle.

    Args:
        index: Selection or label index. Any integer is accepted.
        radius: Radius of the ring the point lies on.
        center_x: X coordinate of the circle center.
        center_y: Y coordinate of the circle center.

    Returns:
        The (x, y) point in viewport coordinates.
    """
    angle = angle_for_index(index)
    x = radius * math.cos(angle) + center_x
    y = radius * math.sin(angle) + center_y
    return x, y


def positions_for_indices(
    indices: Iterable[int],
    radius: float,
    center_x: float,
    center_y: float
) -> npt.NDArray[np.float64]:
    """
    Coordinates of several positions at once.

    Returns:
        An array of shape (n, 2) whose rows equal position_for_index(i, ...).
    """
    idx = np.fromiter(indices, dtype=float)
    angles = INITIAL_ANGLE + idx * ANGLE_STEP
    return np.c_[radius * np.cos(angles) + center_x, radius * np.sin(angles) + center_y]
