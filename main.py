"""CLI entrypoint for the crossword grid generator."""

from __future__ import annotations

import argparse
import io
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from crossgrid.core.constants import DEFAULT_BLACK_RATIO, DEFAULT_HEIGHT, DEFAULT_WIDTH
from crossgrid.core.exceptions import GridConfigError
from crossgrid.core.models import RandomSource
from crossgrid.engine.generator import GridConfig, GridGenerator
from crossgrid.engine.grid import Grid
from crossgrid.engine.validator import GridValidator
from crossgrid.utils.logger import configure_logging
from crossgrid.utils.pretty import print_grid_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate black/white crossword grid skeletons",
    )
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="Grid width in cells (clamped to 3-50)")
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="Grid height in cells (clamped to 3-50)")
    parser.add_argument(
        "--black-ratio",
        type=float,
        default=DEFAULT_BLACK_RATIO,
        help="Target fraction of black cells (clamped to 0-0.6)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=1, help="Number of grids to generate")
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_rng(seed: Optional[int]) -> Optional[RandomSource]:
    if seed is None:
        return None
    return random.Random(seed).random


def render_json(config: GridConfig, seed: Optional[int], grids: List[Grid]) -> str:
    validator = GridValidator()
    payload: Dict[str, Any] = {
        "width": config.width,
        "height": config.height,
        "black_ratio": config.black_ratio,
        "seed": seed,
        "grids": [],
    }
    for grid in grids:
        validation = validator.validate(grid)
        payload["grids"].append(
            {
                "cells": grid.to_jsonable(),
                "rows": grid.to_rows(),
                "validation": validation.messages,
            }
        )
    return json.dumps(payload, ensure_ascii=False, indent=2)


def render_text(config: GridConfig, grids: List[Grid]) -> str:
    buffer = io.StringIO()
    for number, grid in enumerate(grids, start=1):
        if len(grids) > 1:
            print(f"=== Grid {number}/{len(grids)} ===", file=buffer)
        print_grid_stats(grid, target_ratio=config.black_ratio, stream=buffer)
        if number < len(grids):
            print(file=buffer)
    return buffer.getvalue().rstrip("\n")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.count < 1:
        parser.error("--count must be at least 1")

    try:
        config = GridConfig(
            width=args.width,
            height=args.height,
            black_ratio=args.black_ratio,
        ).clamped()
    except GridConfigError as exc:
        parser.error(str(exc))

    # One generator for the whole run: each grid is a "regenerate" on the same source.
    generator = GridGenerator(config, rng=build_rng(args.seed))
    grids = [generator.generate() for _ in range(args.count)]

    if args.format == "json":
        output_text = render_json(config, args.seed, grids)
    else:
        output_text = render_text(config, grids)

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
