import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main
from crossgrid.engine.grid import Grid
from crossgrid.utils.pretty import cell_symbol, format_grid, grid_stats, pretty_print_grid, print_grid_stats


class PrettyTests(unittest.TestCase):
    def test_cell_symbols(self) -> None:
        grid = Grid.from_rows(["#A."])
        self.assertEqual([cell_symbol(cell) for cell in grid.cells], ["#", "A", "."])

    def test_format_grid_has_header_and_rows(self) -> None:
        lines = format_grid(Grid.from_rows(["#..", ".#.", "..#"])).splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "     0  1  2")
        self.assertEqual(lines[2], " 0 |  #  .  .")

    def test_pretty_print_grid_with_label(self) -> None:
        stream = io.StringIO()
        pretty_print_grid(Grid.from_rows(["#..", ".#.", "..#"]), label="Seed 3", stream=stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "Seed 3")
        self.assertEqual(len(lines), 6)

    def test_grid_stats(self) -> None:
        stats = grid_stats(Grid.from_rows(["#..", ".#.", "..#"]))
        self.assertEqual(stats.total_cells, 9)
        self.assertEqual(stats.black_cells, 3)
        self.assertEqual(stats.white_cells, 6)
        self.assertAlmostEqual(stats.black_ratio, 1 / 3)

    def test_print_grid_stats_reports_validation(self) -> None:
        stream = io.StringIO()
        with self.assertLogs("crossgrid.engine.validator", level="ERROR"):
            print_grid_stats(Grid.from_rows(["...", "...", "..."]), target_ratio=0.2, stream=stream)
        text = stream.getvalue()
        self.assertIn("Target ratio:  20%", text)
        self.assertIn("--- Validation ---", text)


class CliTests(unittest.TestCase):
    def test_json_output_is_reproducible(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            first = Path(tmpdir) / "a.json"
            second = Path(tmpdir) / "b.json"
            main.main(["--width", "8", "--height", "6", "--seed", "42", "--format", "json", "--output", str(first)])
            main.main(["--width", "8", "--height", "6", "--seed", "42", "--format", "json", "--output", str(second)])
            payload = json.loads(first.read_text(encoding="utf-8"))
            self.assertEqual(first.read_text(encoding="utf-8"), second.read_text(encoding="utf-8"))

        self.assertEqual(payload["width"], 8)
        self.assertEqual(payload["height"], 6)
        self.assertEqual(payload["seed"], 42)
        self.assertEqual(len(payload["grids"]), 1)
        grid = payload["grids"][0]
        self.assertEqual(len(grid["cells"]), 6)
        self.assertTrue(all(len(row) == 8 for row in grid["cells"]))
        self.assertEqual(len(grid["rows"]), 6)
        self.assertEqual(grid["validation"], [])

    def test_json_header_reports_clamped_values(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main.main(["--width", "1", "--height", "80", "--black-ratio", "3", "--seed", "1", "--format", "json"])
        payload = json.loads(stdout.getvalue())
        self.assertEqual((payload["width"], payload["height"]), (3, 50))
        self.assertEqual(payload["black_ratio"], 0.6)

    def test_count_regenerates_several_grids(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main.main(["--seed", "7", "--count", "3"])
        text = stdout.getvalue()
        self.assertIn("=== Grid 1/3 ===", text)
        self.assertIn("=== Grid 3/3 ===", text)
        self.assertEqual(text.count("--- Grid ---"), 3)

    def test_count_below_one_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--count", "0"])

    def test_nan_size_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--width", "nan"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
