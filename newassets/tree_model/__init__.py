"""Asset tree construction, expansion reconciliation, search, and rows.

Builds ``TreeNode`` hierarchies from sorted flat paths and carries the
expanded directories of one build over to the next by content key.
"""

from __future__ import annotations

from .build import build_path_tree, find_node, iter_leaves, iter_nodes, new_root, path_segments
from .expansion import (
    ExpansionState,
    apply_expanded_keys,
    capture_expanded_keys,
    expand_all,
)
from .rendering import TreeRow, format_tree, format_tree_row, visible_rows
from .search import matches, matching_node_ids
from .types import ROOT_DEPTH, ROOT_ID, TreeNode

__all__ = [
    "TreeNode",
    "ROOT_ID",
    "ROOT_DEPTH",
    "build_path_tree",
    "new_root",
    "path_segments",
    "iter_nodes",
    "iter_leaves",
    "find_node",
    "ExpansionState",
    "capture_expanded_keys",
    "apply_expanded_keys",
    "expand_all",
    "matches",
    "matching_node_ids",
    "TreeRow",
    "visible_rows",
    "format_tree_row",
    "format_tree",
]
