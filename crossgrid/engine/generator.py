"""Black/white grid generation.

Pipeline of bounded passes over a freshly allocated grid:
  1. Initialize an all-white grid.
  2. Blacken random cells until the configured ratio is reached.
  3. Repair local white density (at most 5 white cells around any white cell).
  4. Blacken isolated white cells.
  5. Fall back to a white centre cell if nothing white survived.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_BLACK_RATIO,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_BLACK_RATIO,
    MAX_SIZE,
    MAX_WHITE_NEIGHBORS,
    MIN_SIZE,
    PLACEMENT_GUARD_FACTOR,
    REPAIR_GUARD_FACTOR,
)
from ..core.exceptions import GridConfigError
from ..core.models import RandomSource
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


def _as_number(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise GridConfigError(f"{name} must be a number, got {value!r}") from exc
    if math.isnan(number):
        raise GridConfigError(f"{name} must not be NaN")
    return number


def clamp_size(value: float) -> int:
    """Floor ``value`` and clamp it to ``[MIN_SIZE, MAX_SIZE]``."""
    number = min(max(_as_number("size", value), MIN_SIZE), MAX_SIZE)
    return int(math.floor(number))


def clamp_ratio(value: float) -> float:
    return min(max(_as_number("black_ratio", value), 0.0), MAX_BLACK_RATIO)


@dataclass
class GridConfig:
    """Configuration values driving grid generation.

    Values are accepted as given; :meth:`clamped` produces the normalised
    configuration the generator actually uses.
    """

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    black_ratio: float = DEFAULT_BLACK_RATIO

    def clamped(self) -> "GridConfig":
        return GridConfig(
            width=clamp_size(self.width),
            height=clamp_size(self.height),
            black_ratio=clamp_ratio(self.black_ratio),
        )

    @property
    def target_blacks(self) -> int:
        """Cells blackened by the placement phase, rounding halves up."""
        config = self.clamped()
        return int(math.floor(config.width * config.height * config.black_ratio + 0.5))


class GridGenerator:
    """Builds grids for one configuration, drawing entropy from ``rng``.

    The generator keeps no reference to the grids it returns; calling
    :meth:`generate` again consumes more of ``rng`` and yields a new grid.
    """

    def __init__(self, config: Optional[GridConfig] = None, rng: Optional[RandomSource] = None) -> None:
        self.config = (config or GridConfig()).clamped()
        self.rng: RandomSource = rng or random.random

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> Grid:
        width = int(self.config.width)
        height = int(self.config.height)
        grid = Grid(width=width, height=height)

        target = self.config.target_blacks
        placed = self._place_blacks(grid, target)
        repaired = self._repair_density(grid)
        isolated = self._clear_isolated(grid)
        forced = self._ensure_white(grid)

        LOGGER.info(
            "Generated %sx%s grid: %s black cells (placed %s/%s, repaired %s, isolated %s%s)",
            height,
            width,
            grid.black_count,
            placed,
            target,
            repaired,
            isolated,
            ", centre forced white" if forced else "",
        )
        return grid

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _draw(self, n: int) -> int:
        """Uniform integer in ``[0, n)`` from the float source."""
        return min(max(int(self.rng() * n), 0), n - 1)

    def _place_blacks(self, grid: Grid, target: int) -> int:
        area = grid.bounds.area
        placed = 0
        guard = 0
        while placed < target and guard < area * PLACEMENT_GUARD_FACTOR:
            guard += 1
            row = self._draw(grid.height)
            col = self._draw(grid.width)
            cell = grid.cell(row, col)
            if cell.is_black:
                continue
            cell.blacken()
            placed += 1

        if placed < target:
            LOGGER.warning(
                "Placement guard exhausted after %s draws: %s/%s black cells placed",
                guard,
                placed,
                target,
            )
        else:
            LOGGER.debug("Placed %s black cells in %s draws", placed, guard)
        return placed

    def _repair_density(self, grid: Grid) -> int:
        """Blacken neighbours of over-dense white cells, first violator first.

        Each fix conceptually restarts the row-major scan. Blackening a cell
        only lowers neighbour counts, so every cell before the current
        violator is still clean and the scan can resume in place with the
        same outcome.
        """

        area = grid.bounds.area
        limit = area * REPAIR_GUARD_FACTOR
        steps = 0
        index = 0
        while index < area:
            row, col = grid.position(index)
            if grid.cells[index].is_black or grid.white_neighbor_count(row, col) <= MAX_WHITE_NEIGHBORS:
                index += 1
                continue
            if steps >= limit:
                LOGGER.warning(
                    "Density repair stopped after %s steps; violation left at (%s,%s)",
                    steps,
                    row,
                    col,
                )
                break
            candidates = grid.white_neighbors(row, col)
            if not candidates:
                index += 1
                continue
            nr, nc = candidates[self._draw(len(candidates))]
            grid.cell(nr, nc).blacken()
            steps += 1

        LOGGER.debug("Density repair blackened %s cells", steps)
        return steps

    def _clear_isolated(self, grid: Grid) -> int:
        # One pass suffices: an isolated cell counts towards no orthogonal neighbour.
        cleared = 0
        for index, cell in enumerate(grid.cells):
            if cell.is_black:
                continue
            row, col = grid.position(index)
            if grid.white_orthogonal_count(row, col) == 0:
                cell.blacken()
                cleared += 1
        LOGGER.debug("Blackened %s isolated white cells", cleared)
        return cleared

    def _ensure_white(self, grid: Grid) -> bool:
        if grid.white_count:
            return False
        row, col = grid.height // 2, grid.width // 2
        LOGGER.debug("Grid fully black; forcing centre (%s,%s) white", row, col)
        grid.cell(row, col).whiten()
        return True


def generate_grid(
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    black_ratio: float = DEFAULT_BLACK_RATIO,
    rng: Optional[RandomSource] = None,
) -> Grid:
    """Generate a crossword skeleton grid.

    ``width`` and ``height`` are floored and clamped to ``[3, 50]``,
    ``black_ratio`` to ``[0, 0.6]``; out-of-range input is never an error.
    ``rng`` is a zero-argument callable returning floats in ``[0, 1)``
    (``random.random`` when omitted). The same ``rng`` sequence always yields
    the same grid.
    """

    return GridGenerator(GridConfig(width=width, height=height, black_ratio=black_ratio), rng).generate()
