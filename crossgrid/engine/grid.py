"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from ..core.constants import NEIGHBOR_STEPS, ORTHOGONAL_STEPS, Bounds
from ..core.models import Cell


class Grid:
    """Rectangular grid of cells stored as a flat row-major arena.

    Cell ``(r, c)`` lives at ``r * width + c``; every row therefore has exactly
    ``width`` cells.
    """

    def __init__(self, width: int, height: int, cells: Optional[List[Cell]] = None) -> None:
        self.bounds = Bounds(rows=height, cols=width)
        if cells is None:
            cells = [Cell() for _ in range(width * height)]
        elif len(cells) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {height}x{width} grid, got {len(cells)}"
            )
        self.cells: List[Cell] = cells

    @property
    def width(self) -> int:
        return self.bounds.cols

    @property
    def height(self) -> int:
        return self.bounds.rows

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    def index(self, row: int, col: int) -> int:
        return row * self.bounds.cols + col

    def position(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.bounds.cols)

    def cell(self, row: int, col: int) -> Cell:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.height}x{self.width} grid")
        return self.cells[self.index(row, col)]

    def row(self, row: int) -> List[Cell]:
        start = self.index(row, 0)
        return self.cells[start:start + self.bounds.cols]

    def rows(self) -> List[List[Cell]]:
        return [self.row(r) for r in range(self.bounds.rows)]

    def __iter__(self) -> Iterator[List[Cell]]:
        return iter(self.rows())

    def __len__(self) -> int:
        return self.bounds.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, blacks={self.black_count})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_white(self, row: int, col: int) -> bool:
        """True for an in-bounds white cell; off-grid positions are never white."""
        if not self.bounds.contains(row, col):
            return False
        return not self.cells[self.index(row, col)].is_black

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in NEIGHBOR_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def orthogonal_neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def white_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        return [(nr, nc) for nr, nc in self.neighbors(row, col) if self.is_white(nr, nc)]

    def white_neighbor_count(self, row: int, col: int) -> int:
        return sum(1 for nr, nc in self.neighbors(row, col) if self.is_white(nr, nc))

    def white_orthogonal_count(self, row: int, col: int) -> int:
        return sum(1 for nr, nc in self.orthogonal_neighbors(row, col) if self.is_white(nr, nc))

    @property
    def black_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_black)

    @property
    def white_count(self) -> int:
        return len(self.cells) - self.black_count

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [{"is_black": cell.is_black, "value": cell.value} for cell in row]
            for row in self.rows()
        ]

    def to_rows(self) -> List[str]:
        """Compact one-string-per-row form: ``#`` black, ``.`` empty white."""
        lines: List[str] = []
        for row in self.rows():
            lines.append(
                "".join("#" if cell.is_black else (cell.value or ".") for cell in row)
            )
        return lines

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from the :meth:`to_rows` form."""
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        cells: List[Cell] = []
        for line in rows:
            if len(line) != width:
                raise ValueError("All rows must have the same width")
            for symbol in line:
                if symbol == "#":
                    cells.append(Cell(is_black=True))
                elif symbol == ".":
                    cells.append(Cell())
                else:
                    cells.append(Cell(value=symbol.upper()))
        return cls(width=width, height=len(rows), cells=cells)
