"""Deterministic structural validation for generated grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import MAX_SIZE, MAX_WHITE_NEIGHBORS, MIN_SIZE
from ..core.exceptions import ValidationError
from .grid import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Re-checks the structural guarantees of a generated grid."""

    def validate(self, grid: Grid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(grid)
            self._check_has_white(grid)
            self._check_density(grid)
            self._check_no_isolated_cells(grid)
            self._check_values(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, grid: Grid) -> None:
        for name, size in (("width", grid.width), ("height", grid.height)):
            if not MIN_SIZE <= size <= MAX_SIZE:
                raise ValidationError(f"Grid {name} {size} outside [{MIN_SIZE}, {MAX_SIZE}]")
        if len(grid.cells) != grid.width * grid.height:
            raise ValidationError(
                f"Grid holds {len(grid.cells)} cells, expected {grid.width * grid.height}"
            )

    def _check_has_white(self, grid: Grid) -> None:
        if grid.white_count == 0:
            raise ValidationError("Grid has no white cells")

    def _check_density(self, grid: Grid) -> None:
        for r in range(grid.height):
            for c in range(grid.width):
                if not grid.is_white(r, c):
                    continue
                count = grid.white_neighbor_count(r, c)
                if count > MAX_WHITE_NEIGHBORS:
                    raise ValidationError(
                        f"White cell at ({r},{c}) has {count} white neighbours"
                    )

    def _check_no_isolated_cells(self, grid: Grid) -> None:
        # A single surviving white cell is the fully-black fallback.
        if grid.white_count == 1:
            return
        for r in range(grid.height):
            for c in range(grid.width):
                if grid.is_white(r, c) and grid.white_orthogonal_count(r, c) == 0:
                    raise ValidationError(f"Isolated white cell at ({r},{c})")

    def _check_values(self, grid: Grid) -> None:
        for index, cell in enumerate(grid.cells):
            r, c = grid.position(index)
            if cell.is_black:
                if cell.value:
                    raise ValidationError(f"Black cell at ({r},{c}) holds '{cell.value}'")
                continue
            if cell.value and (len(cell.value) != 1 or not cell.value.isalpha() or not cell.value.isupper()):
                raise ValidationError(f"Invalid letter '{cell.value}' at ({r},{c})")
