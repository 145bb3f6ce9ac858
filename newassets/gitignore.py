"""Gitignore-aware filtering for root-relative asset paths.

Asks git once per root for ignored files and directories.
The filesystem provider uses the matcher to drop ignored assets from a walk.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from loguru import logger


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Ignored paths under one walk root, as forward-slash relative strings.

    ``ignored_dirs`` holds directory prefixes so a single lookup per ancestor
    rejects a whole subtree.
    """

    root: Path
    ignored_files: frozenset[str]
    ignored_dirs: frozenset[str]

    def is_ignored(self, relative_path: str) -> bool:
        """Return whether ``relative_path`` (relative to ``root``) is ignored."""
        if relative_path in self.ignored_files:
            return True
        current = PurePosixPath(relative_path)
        while current.parts:
            if current.as_posix() in self.ignored_dirs:
                return True
            current = current.parent
        return False


def _git_output(args: list[str]) -> bytes | None:
    """Run a git command and return stdout, or ``None`` when it fails."""
    try:
        proc = subprocess.run(
            ["git", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return proc.stdout


def load_gitignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Build a matcher for ``root`` by querying git.

    Returns ``None`` when git is unavailable or ``root`` is not inside a work
    tree. Only ignored paths inside ``root`` are tracked, even when the
    repository top level is higher up.
    """
    if shutil.which("git") is None:
        return None

    root = root.resolve()
    top_output = _git_output(["-C", str(root), "rev-parse", "--show-toplevel"])
    if top_output is None:
        return None
    top_level = top_output.decode("utf-8", errors="replace").strip()
    if not top_level:
        return None
    repo_root = Path(top_level).resolve()
    if not root.is_relative_to(repo_root):
        return None

    listing = _git_output(
        [
            "-C",
            str(repo_root),
            "ls-files",
            "-z",
            "--others",
            "-i",
            "--exclude-standard",
            "--directory",
        ]
    )
    if listing is None:
        return None

    ignored_files: set[str] = set()
    ignored_dirs: set[str] = set()
    for raw in listing.split(b"\x00"):
        if not raw:
            continue
        rel = raw.decode("utf-8", errors="replace")
        is_dir = rel.endswith("/")
        absolute = repo_root / rel.rstrip("/")
        if not absolute.is_relative_to(root) or absolute == root:
            continue
        relative = absolute.relative_to(root).as_posix()
        if is_dir or absolute.is_dir():
            ignored_dirs.add(relative)
        else:
            ignored_files.add(relative)

    logger.debug(f"gitignore matcher for {root}: {len(ignored_files)} files, {len(ignored_dirs)} dirs")
    return GitIgnoreMatcher(
        root=root,
        ignored_files=frozenset(ignored_files),
        ignored_dirs=frozenset(ignored_dirs),
    )
