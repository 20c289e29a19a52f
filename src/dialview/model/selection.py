"""
Selection State
===============
Cyclic selection over the dial positions and the on/off state derived from it.
"""
from __future__ import annotations

import logging

from dialview.config import SELECTION_COUNT, DialColors

logger = logging.getLogger(__name__)


class SelectionState:
    """
    Active selection index, advancing 0 -> 1 -> 2 -> 3 -> 0.

    Index 0 is the only "off" state; 1, 2 and 3 are all "on".
    """

    def __init__(self, index: int = 0) -> None:
        if not 0 <= index < SELECTION_COUNT:
            raise ValueError(f"Selection index must be in [0, {SELECTION_COUNT - 1}], got {index}.")
        self._index: int = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_on(self) -> bool:
        return self._index >= 1

    def advance(self) -> int:
        """Move to the next position, wrapping around. Returns the new index."""
        self._index = (self._index + 1) % SELECTION_COUNT
        logger.debug(f"Selection advanced to {self._index} (on={self.is_on}).")
        return self._index

    def fill_color(self, colors: DialColors) -> str:
        return colors.for_state(self.is_on)

    def __repr__(self) -> str:
        return f"SelectionState(index={self._index})"
