"""Pretty-print helpers for generated grids."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from ..core.models import Cell
from ..engine.grid import Grid
from ..engine.validator import GridValidator


BLACK_SYMBOL = "#"
EMPTY_SYMBOL = "."


@dataclass
class GridStats:
    rows: int
    cols: int
    black_cells: int
    white_cells: int

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def black_ratio(self) -> float:
        return self.black_cells / self.total_cells if self.total_cells else 0.0


def cell_symbol(cell: Cell) -> str:
    if cell.is_black:
        return BLACK_SYMBOL
    return cell.value or EMPTY_SYMBOL


def format_grid(grid: Grid) -> str:
    width = grid.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.rows()):
        row_render = " ".join(f"{cell_symbol(cell):>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def grid_stats(grid: Grid) -> GridStats:
    black = grid.black_count
    return GridStats(
        rows=grid.height,
        cols=grid.width,
        black_cells=black,
        white_cells=grid.white_count,
    )


def print_grid_stats(
    grid: Grid,
    target_ratio: Optional[float] = None,
    *,
    stream=None,
) -> None:
    """Print grid + stats + validation outcome."""

    stream = stream or sys.stdout
    print(format_grid(grid), file=stream)

    stats = grid_stats(grid)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {stats.rows} x {stats.cols} ({stats.total_cells} cells)", file=stream)
    print(f"  White:         {stats.white_cells}", file=stream)
    print(f"  Black:         {stats.black_cells} ({stats.black_ratio * 100:.0f}%)", file=stream)
    if target_ratio is not None:
        print(f"  Target ratio:  {target_ratio * 100:.0f}%", file=stream)

    validation = GridValidator().validate(grid)
    if validation.messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in validation.messages:
            print(f"  {msg}", file=stream)
