"""Visible-row projection and row formatting for the asset tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..ui_theme import DEFAULT_THEME, UITheme
from .expansion import ExpansionState
from .search import matching_node_ids
from .types import TreeNode

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class TreeRow:
    """One painted row: a node plus how it is currently shown."""

    node: TreeNode
    expanded: bool

    @property
    def depth(self) -> int:
        return self.node.depth


def visible_rows(tree: TreeNode, state: ExpansionState, query: str = "") -> list[TreeRow]:
    """Flatten ``tree`` into the rows a renderer should paint.

    Collapsed directories hide their subtree. With a non-empty ``query`` only
    matching nodes are listed, and directories holding matches are shown open
    without touching ``state``, so clearing the query restores the previous
    rows exactly.
    """
    visible_ids = matching_node_ids(tree, query) if query else None
    rows: list[TreeRow] = []

    def walk(node: TreeNode) -> None:
        for child in node.children:
            if visible_ids is not None and child.id not in visible_ids:
                continue
            expanded = state.is_expanded(child) and not child.is_leaf
            if visible_ids is not None and any(grandchild.id in visible_ids for grandchild in child.children):
                expanded = True
            rows.append(TreeRow(child, expanded))
            if expanded:
                walk(child)

    walk(tree)
    return rows


def highlight_substring(text: str, query: str, theme: UITheme) -> str:
    """Highlight the first case-sensitive occurrence of ``query`` in ``text``."""
    if not query:
        return text
    idx = text.find(query)
    if idx < 0:
        return text
    end = idx + len(query)
    return text[:idx] + theme.tree_search_match + text[idx:end] + theme.tree_search_match_end + text[end:]


def format_tree_row(
    row: TreeRow,
    query: str = "",
    theme: UITheme | None = None,
    created: datetime | None = None,
) -> str:
    """Render one row as indented, optionally ANSI-styled text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * row.depth
    name = highlight_substring(row.node.name, query, active_theme)
    if not row.node.is_leaf:
        marker = "▾ " if row.expanded else "▸ "
        return f"{indent}{active_theme.tree_marker}{marker}{reset}{active_theme.tree_dir}{name}/{reset}"

    stamp = ""
    if created is not None:
        stamp = f"{active_theme.tree_timestamp}  {created.strftime(TIMESTAMP_FORMAT)}{reset}"
    # Leaves line up under their parent's name column.
    return f"{indent}  {active_theme.tree_file}{name}{reset}{stamp}"


def format_tree(
    rows: list[TreeRow],
    query: str = "",
    theme: UITheme | None = None,
    created_for_path: Callable[[str], datetime | None] | None = None,
) -> list[str]:
    """Format every row; leaves get their creation time when a lookup is given."""
    lines: list[str] = []
    for row in rows:
        created = None
        if created_for_path is not None and row.node.payload_path is not None:
            created = created_for_path(row.node.payload_path)
        lines.append(format_tree_row(row, query, theme, created))
    return lines
