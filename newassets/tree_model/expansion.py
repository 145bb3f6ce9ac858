"""Expanded/collapsed state and its reconciliation across tree rebuilds.

Within one build a node is expanded when its rebuild-local id is in
``ExpansionState.expanded_ids``. Before a rebuild the expanded directories
are captured as content keys; after the rebuild those keys are mapped onto
the ids of the new tree.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .build import iter_nodes
from .types import TreeNode


@dataclass
class ExpansionState:
    """Per-build expanded flags keyed by node id."""

    expanded_ids: set[int] = field(default_factory=set)

    def is_expanded(self, node: TreeNode) -> bool:
        return node.is_root or node.id in self.expanded_ids

    def set_expanded(self, node: TreeNode, expanded: bool) -> None:
        if node.is_leaf or node.is_root:
            return
        if expanded:
            self.expanded_ids.add(node.id)
        else:
            self.expanded_ids.discard(node.id)

    def toggle(self, node: TreeNode) -> bool:
        """Flip ``node``'s flag and return the new value."""
        expanded = not self.is_expanded(node)
        self.set_expanded(node, expanded)
        return expanded


def is_branch(node: TreeNode) -> bool:
    return not node.is_leaf and not node.is_root


def capture_expanded_keys(tree: TreeNode, state: ExpansionState) -> frozenset[str]:
    """Return the keys of every expanded directory reachable from ``tree``."""
    return frozenset(
        node.key for node in iter_nodes(tree) if is_branch(node) and node.id in state.expanded_ids
    )


def apply_expanded_keys(tree: TreeNode, keys: Iterable[str]) -> ExpansionState:
    """Expand the directories of ``tree`` whose key is in ``keys``.

    Keys with no matching directory are dropped; every other directory starts
    collapsed.
    """
    wanted = set(keys)
    return ExpansionState(
        {node.id for node in iter_nodes(tree) if is_branch(node) and node.key in wanted}
    )


def expand_all(tree: TreeNode) -> ExpansionState:
    return ExpansionState({node.id for node in iter_nodes(tree) if is_branch(node)})
