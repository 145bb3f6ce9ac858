"""CLI argument, default-path and output tests."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from newassets import cli
from newassets.config import BrowserDefaults


def run_cli(argv: list[str], default_path: Path | None = None) -> str:
    stdout = io.StringIO()
    with (
        mock.patch.object(sys, "argv", ["newassets", *argv]),
        mock.patch("newassets.cli.load_defaults", return_value=BrowserDefaults()),
        mock.patch.object(sys, "stdout", stdout),
    ):
        cli.main(default_path=default_path)
    return stdout.getvalue()


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "src" / "textures").mkdir(parents=True)
        (self.root / "src" / "textures" / "wall.png").write_bytes(b"png")
        (self.root / "src" / "main.py").write_text("print('x')\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_prints_expanded_tree_sorted_by_name(self) -> None:
        output = run_cli([str(self.root), "--sort", "name", "--direction", "ascending"])
        lines = output.splitlines()
        self.assertTrue(lines[0].startswith("Last 24 hours · Name (ascending) · 2 assets"))
        self.assertEqual(lines[1], "▾ src/")
        self.assertTrue(lines[2].startswith("    main.py  "))
        self.assertEqual(lines[3], "  ▾ textures/")
        self.assertTrue(lines[4].startswith("      wall.png  "))

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            output = run_cli(["--collapse"])
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(output.splitlines()[1:], ["▸ src/"])

    def test_collapse_with_expand_opens_only_named_directories(self) -> None:
        output = run_cli([str(self.root), "--collapse", "--expand", "src", "--sort", "name"])
        names = [line.strip().split("  ")[0] for line in output.splitlines()[1:]]
        self.assertEqual(names, ["▾ src/", "▸ textures/", "main.py"])

    def test_expand_accepts_trailing_separator(self) -> None:
        output = run_cli([str(self.root), "--collapse", "--expand", "src/", "--sort", "name"])
        names = [line.strip().split("  ")[0] for line in output.splitlines()[1:]]
        self.assertEqual(names, ["▾ src/", "▸ textures/", "main.py"])

    def test_search_without_matches_prints_hint(self) -> None:
        output = run_cli([str(self.root), "--search", "nothing-here"])
        self.assertIn("(no matching assets)", output)

    def test_invalid_range_is_argparse_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with mock.patch.object(sys, "stderr", io.StringIO()):
                run_cli([str(self.root), "--range", "fortnight"])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_directory_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            run_cli([str(self.root / "missing")])
        self.assertIn("Not a directory", str(ctx.exception.code))


if __name__ == "__main__":
    unittest.main()
