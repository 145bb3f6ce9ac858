"""Asset metadata providers.

A provider answers two questions for the pipeline: which asset paths exist,
and when each one was created. Hosts may plug in their own implementation;
two ship here, one walking a directory and one backed by a mapping.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from loguru import logger

from .gitignore import GitIgnoreMatcher, load_gitignore_matcher


@dataclass(frozen=True)
class AssetRecord:
    """One tracked asset path and its creation instant, when known."""

    path: str
    creation_time: datetime | None = None


class MetadataProvider(Protocol):
    """Host collaborator that enumerates assets and reports creation times."""

    def all_paths(self) -> list[str]:
        ...

    def creation_time(self, path: str) -> datetime | None:
        ...


def collect_records(provider: MetadataProvider) -> list[AssetRecord]:
    """Enumerate ``provider`` and look up each creation time exactly once.

    Enumeration order is kept; repeated paths keep their first record.
    """
    records: dict[str, AssetRecord] = {}
    for path in provider.all_paths():
        if path not in records:
            records[path] = AssetRecord(path, provider.creation_time(path))
    return list(records.values())


def normalize_separators(path: str) -> str:
    """Map native and backslash separators to ``/``."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path.replace("\\", "/")


def stat_creation_time(path: Path) -> datetime | None:
    """Return the creation instant of ``path`` as local naive time.

    Uses ``st_birthtime`` where the platform records it and falls back to
    ``st_ctime``. Returns ``None`` when the file cannot be stat'ed.
    """
    try:
        stat = path.stat()
    except OSError:
        return None
    timestamp = getattr(stat, "st_birthtime", None)
    if timestamp is None:
        timestamp = stat.st_ctime
    return datetime.fromtimestamp(timestamp)


class FilesystemMetadataProvider:
    """Enumerate regular files under ``root`` as root-relative ``/`` paths."""

    def __init__(self, root: Path, show_hidden: bool = False, skip_gitignored: bool = False) -> None:
        self.root = root.resolve()
        self.show_hidden = show_hidden
        self.skip_gitignored = skip_gitignored

    def _ignore_matcher(self) -> GitIgnoreMatcher | None:
        if not self.skip_gitignored:
            return None
        return load_gitignore_matcher(self.root)

    def all_paths(self) -> list[str]:
        """Walk ``root`` depth-first and return every visible file path."""
        matcher = self._ignore_matcher()
        paths: list[str] = []

        def walk(directory: Path, prefix: str) -> None:
            try:
                with os.scandir(directory) as entries:
                    children = sorted(entries, key=lambda entry: entry.name)
            except OSError as exc:
                logger.debug(f"skipping unreadable directory {directory}: {exc}")
                return
            for child in children:
                name = child.name
                if not self.show_hidden and name.startswith("."):
                    continue
                relative = f"{prefix}{name}"
                if matcher is not None and matcher.is_ignored(relative):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    continue
                if is_dir:
                    walk(Path(child.path), f"{relative}/")
                else:
                    paths.append(relative)

        walk(self.root, "")
        return paths

    def absolute_path(self, path: str) -> Path:
        """Resolve an enumerated relative path back to a filesystem location."""
        return self.root / path

    def creation_time(self, path: str) -> datetime | None:
        return stat_creation_time(self.absolute_path(path))


class MappingMetadataProvider:
    """Provider backed by an in-memory ``{path: creation instant}`` mapping.

    Enumeration order is the mapping's insertion order. Paths mapped to
    ``None`` are known but have no readable creation time.
    """

    def __init__(self, creation_times: Mapping[str, datetime | None]) -> None:
        self._creation_times = dict(creation_times)

    @classmethod
    def from_records(cls, records: Iterable[AssetRecord]) -> MappingMetadataProvider:
        return cls({record.path: record.creation_time for record in records})

    def all_paths(self) -> list[str]:
        return list(self._creation_times)

    def creation_time(self, path: str) -> datetime | None:
        return self._creation_times.get(path)

    def records(self) -> list[AssetRecord]:
        return [AssetRecord(path, created) for path, created in self._creation_times.items()]
