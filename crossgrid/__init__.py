"""Procedural black/white crossword grid generator.

This package exposes the public API surface via:

- ``crossgrid.engine.generator.generate_grid``: one-call grid generation.
- ``crossgrid.engine.generator.GridGenerator`` / ``GridConfig``: reusable
  generator bound to a configuration and random source.
- ``crossgrid.engine.validator.GridValidator``: structural checks over a grid.
"""

from .core.models import Cell
from .engine.generator import GridConfig, GridGenerator, generate_grid
from .engine.grid import Grid
from .engine.validator import GridValidator, ValidationResult

__all__ = [
    "Cell",
    "Grid",
    "GridConfig",
    "GridGenerator",
    "GridValidator",
    "ValidationResult",
    "generate_grid",
]

__version__ = "0.1.0"
