"""Metadata provider tests for filesystem walks and in-memory mappings."""

from __future__ import annotations

import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest import mock

from newassets.gitignore import GitIgnoreMatcher
from newassets.metadata import (
    AssetRecord,
    FilesystemMetadataProvider,
    MappingMetadataProvider,
    collect_records,
    normalize_separators,
    stat_creation_time,
)


class FilesystemProviderTests(unittest.TestCase):
    def test_all_paths_lists_files_relative_with_forward_slashes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "src" / "textures").mkdir(parents=True)
            (root / "src" / "textures" / "wall.png").write_bytes(b"png")
            (root / "src" / "main.py").write_text("print('x')\n", encoding="utf-8")
            (root / "README.md").write_text("# readme\n", encoding="utf-8")
            (root / ".hidden").write_text("secret\n", encoding="utf-8")
            (root / "empty").mkdir()

            provider = FilesystemMetadataProvider(root)
            self.assertEqual(
                provider.all_paths(),
                ["README.md", "src/main.py", "src/textures/wall.png"],
            )

            with_hidden = FilesystemMetadataProvider(root, show_hidden=True)
            self.assertIn(".hidden", with_hidden.all_paths())

    def test_creation_time_is_recent_for_new_file_and_none_when_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "new.txt").write_text("x", encoding="utf-8")
            provider = FilesystemMetadataProvider(root)

            created = provider.creation_time("new.txt")
            self.assertIsNotNone(created)
            self.assertLess(abs((datetime.now() - created).total_seconds()), 300)
            self.assertIsNone(provider.creation_time("vanished.txt"))
            self.assertIsNone(stat_creation_time(root / "vanished.txt"))

    def test_gitignored_paths_are_skipped_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "build").mkdir()
            (root / "build" / "out.bin").write_bytes(b"0")
            (root / "keep.txt").write_text("k", encoding="utf-8")
            (root / "debug.log").write_text("l", encoding="utf-8")
            matcher = GitIgnoreMatcher(
                root=root.resolve(),
                ignored_files=frozenset({"debug.log"}),
                ignored_dirs=frozenset({"build"}),
            )
            with mock.patch("newassets.metadata.load_gitignore_matcher", return_value=matcher) as load:
                provider = FilesystemMetadataProvider(root, skip_gitignored=True)
                self.assertEqual(provider.all_paths(), ["keep.txt"])
            load.assert_called_once()

    def test_missing_root_yields_no_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            provider = FilesystemMetadataProvider(Path(tmp) / "missing")
            self.assertEqual(provider.all_paths(), [])


class MappingProviderTests(unittest.TestCase):
    def test_mapping_preserves_order_and_reports_missing_as_none(self) -> None:
        created = datetime(2024, 5, 1, 12, 0)
        provider = MappingMetadataProvider.from_records(
            [AssetRecord("b.png", created), AssetRecord("a.png", None)]
        )
        self.assertEqual(provider.all_paths(), ["b.png", "a.png"])
        self.assertEqual(provider.creation_time("b.png"), created)
        self.assertIsNone(provider.creation_time("a.png"))
        self.assertIsNone(provider.creation_time("other.png"))
        self.assertEqual(provider.records()[0], AssetRecord("b.png", created))

    def test_collect_records_looks_up_each_path_once(self) -> None:
        created = datetime(2024, 5, 1, 12, 0)
        provider = MappingMetadataProvider({"b.png": created, "a.png": None})
        with (
            mock.patch.object(provider, "all_paths", return_value=["b.png", "a.png", "b.png"]),
            mock.patch.object(provider, "creation_time", wraps=provider.creation_time) as lookup,
        ):
            records = collect_records(provider)

        self.assertEqual(records, [AssetRecord("b.png", created), AssetRecord("a.png", None)])
        self.assertEqual([call.args[0] for call in lookup.call_args_list], ["b.png", "a.png"])

    def test_normalize_separators(self) -> None:
        self.assertEqual(normalize_separators("a\\b\\c.png"), "a/b/c.png")


class GitIgnoreMatcherTests(unittest.TestCase):
    def test_is_ignored_checks_files_and_ancestor_directories(self) -> None:
        matcher = GitIgnoreMatcher(
            root=Path("/project"),
            ignored_files=frozenset({"notes.tmp"}),
            ignored_dirs=frozenset({"build", "src/cache"}),
        )
        self.assertTrue(matcher.is_ignored("notes.tmp"))
        self.assertTrue(matcher.is_ignored("build/a/b.o"))
        self.assertTrue(matcher.is_ignored("src/cache/x"))
        self.assertFalse(matcher.is_ignored("src/main.py"))
        self.assertFalse(matcher.is_ignored("buildings/x"))

    def test_loader_returns_none_without_git(self) -> None:
        from newassets.gitignore import load_gitignore_matcher

        with mock.patch("newassets.gitignore.shutil.which", return_value=None):
            self.assertIsNone(load_gitignore_matcher(Path(".")))


if __name__ == "__main__":
    unittest.main()
