"""Shared constants for the grid generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


MIN_SIZE = 3
MAX_SIZE = 50
MAX_BLACK_RATIO = 0.6

DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 12
DEFAULT_BLACK_RATIO = 0.18

# A white cell may see at most this many white cells among its 8 neighbours.
MAX_WHITE_NEIGHBORS = 5

# Loop guards, expressed as multiples of the grid area.
PLACEMENT_GUARD_FACTOR = 10
REPAIR_GUARD_FACTOR = 40

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

# Row-major order; the repair phase draws candidates in this order.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    @property
    def area(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
