"""Command-line front door for newassets.

Walks a directory, keeps the files created inside the selected time window,
and prints them as a sorted tree. Startup selections come from the config
file and are overridden by flags.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import load_defaults
from .metadata import FilesystemMetadataProvider
from .session import AssetBrowserSession
from .sorting import SortDirection, SortKey
from .state import ViewSettings
from .time_window import TimeRange
from .tree_model import format_tree
from .ui_theme import UITheme, available_theme_names, resolve_theme


def _enum_argument(parse):
    """argparse type adapter for enum ``from_name`` parsers."""

    def convert(value: str):
        try:
            return parse(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return convert


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List recently created files under a directory as a tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument(
        "--range",
        dest="time_range",
        type=_enum_argument(TimeRange.from_name),
        default=None,
        help=f"Time window ({', '.join(member.value for member in TimeRange)}).",
    )
    parser.add_argument(
        "--sort",
        dest="sort_key",
        type=_enum_argument(SortKey.from_name),
        default=None,
        help=f"Sort key ({', '.join(member.value for member in SortKey)}).",
    )
    parser.add_argument(
        "--direction",
        dest="sort_direction",
        type=_enum_argument(SortDirection.from_name),
        default=None,
        help="Sort direction (ascending, descending).",
    )
    parser.add_argument("--search", default="", help="Only show names containing this text (case-sensitive).")
    parser.add_argument(
        "--collapse",
        action="store_true",
        help="Start with directories collapsed instead of fully expanded.",
    )
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="DIR",
        help="Expand this directory (relative path) when --collapse is set. Repeatable.",
    )
    parser.add_argument("--show-hidden", action="store_true", default=None, help="Include dot-files.")
    parser.add_argument(
        "--skip-gitignored",
        action="store_true",
        default=None,
        help="Leave out files ignored by git.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details to stderr.")
    return parser


def render_session(session: AssetBrowserSession, theme: UITheme) -> str:
    """Render a status line plus the visible tree rows."""
    settings = session.settings
    status = (
        f"{settings.time_range.label} · {settings.sort_key.label} "
        f"({settings.sort_direction.label.lower()}) · {len(session.sorted_paths)} assets"
    )
    lines = [f"{theme.status_hint}{status}{theme.reset}"]
    rows = session.rows()
    if not rows:
        lines.append(f"{theme.status_hint}(no matching assets){theme.reset}")
    lines.extend(
        format_tree(
            rows,
            settings.search_query,
            theme,
            created_for_path=session.creation_time,
        )
    )
    return "\n".join(lines) + "\n"


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the recent-asset tree for a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    defaults = load_defaults()
    settings = ViewSettings(
        time_range=args.time_range or defaults.settings.time_range,
        sort_key=args.sort_key or defaults.settings.sort_key,
        sort_direction=args.sort_direction or defaults.settings.sort_direction,
        search_query=args.search,
    )
    provider = FilesystemMetadataProvider(
        root,
        show_hidden=defaults.show_hidden if args.show_hidden is None else args.show_hidden,
        skip_gitignored=defaults.skip_gitignored if args.skip_gitignored is None else args.skip_gitignored,
    )
    session = AssetBrowserSession(provider, settings)
    session.refresh()
    if args.collapse:
        session.expand_keys(args.expand)
    else:
        session.expand_all()

    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme or defaults.theme, no_color=no_color)
    sys.stdout.write(render_session(session, theme))


if __name__ == "__main__":
    main()
