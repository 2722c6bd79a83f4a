"""Data models supporting the grid generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Zero-argument callable returning a float in [0, 1), e.g. ``random.Random(7).random``.
RandomSource = Callable[[], float]


@dataclass
class Cell:
    """A single grid square: blocked (black) or fillable (white)."""

    is_black: bool = False
    value: str = ""

    def blacken(self) -> None:
        self.is_black = True
        self.value = ""

    def whiten(self) -> None:
        self.is_black = False
        self.value = ""
