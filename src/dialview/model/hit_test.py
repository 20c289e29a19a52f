"""
Pointer Hit-Testing
===================
Decides whether a pointer event activates the dial.
"""
from __future__ import annotations

import math
from enum import StrEnum
from typing import Optional, Union


class PointerPhase(StrEnum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"
    CANCEL = "cancel"

    @classmethod
    def coerce(cls, value: Union[PointerPhase, str, None]) -> Optional[PointerPhase]:
        """Map a phase name to the enum, or None when it is not recognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


def is_hit(
    pointer_x: float,
    pointer_y: float,
    phase: Union[PointerPhase, str, None],
    center_x: float,
    center_y: float,
    radius: float
) -> bool:
    """
    True iff the pointer was released inside or on the circle.

    Only the release position matters; press, move and cancel never hit, and
    neither does an unrecognized phase.
    """
    if PointerPhase.coerce(phase) is not PointerPhase.RELEASE:
        return False

    # distance between two points, boundary counts as inside
    distance = math.hypot(pointer_x - center_x, pointer_y - center_y)
    return distance <= radius
