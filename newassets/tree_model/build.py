"""Group flat asset paths into a directory hierarchy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..metadata import normalize_separators
from .types import ROOT_DEPTH, ROOT_ID, TreeNode


def path_segments(path: str) -> list[str]:
    """Split ``path`` on ``/`` or native separators, dropping empty segments."""
    return [segment for segment in normalize_separators(path).split("/") if segment]


def new_root() -> TreeNode:
    """Return an empty synthetic root (renders as invisible scaffolding)."""
    return TreeNode(id=ROOT_ID, name="", key="", depth=ROOT_DEPTH)


def build_path_tree(sorted_paths: Iterable[str]) -> TreeNode:
    """Build a rooted tree from already-sorted asset paths.

    Siblings appear in the order their first path appears in ``sorted_paths``;
    there is no per-level re-sort. One directory node is created per unique
    prefix. Empty paths, separator-only paths and repeats of an already seen
    path are skipped.
    """
    root = new_root()
    directories: dict[str, TreeNode] = {}
    seen_leaves: set[str] = set()
    next_id = ROOT_ID + 1

    for raw_path in sorted_paths:
        segments = path_segments(raw_path)
        if not segments:
            continue
        leaf_key = "/".join(segments)
        if leaf_key in seen_leaves:
            continue
        seen_leaves.add(leaf_key)

        parent = root
        for depth, segment in enumerate(segments[:-1]):
            prefix = "/".join(segments[: depth + 1])
            directory = directories.get(prefix)
            if directory is None:
                directory = TreeNode(id=next_id, name=segment, key=prefix, depth=depth)
                next_id += 1
                directories[prefix] = directory
                parent.children.append(directory)
            parent = directory

        parent.children.append(
            TreeNode(
                id=next_id,
                name=segments[-1],
                key=leaf_key,
                depth=len(segments) - 1,
                is_leaf=True,
                payload_path=raw_path,
            )
        )
        next_id += 1

    return root


def iter_nodes(tree: TreeNode, include_root: bool = False) -> Iterator[TreeNode]:
    """Yield nodes depth-first, left to right."""
    stack = [tree] if include_root else list(reversed(tree.children))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def iter_leaves(tree: TreeNode) -> Iterator[TreeNode]:
    """Yield leaf nodes in depth-first, left-to-right order."""
    return (node for node in iter_nodes(tree) if node.is_leaf)


def find_node(tree: TreeNode, node_id: int) -> TreeNode | None:
    """Return the node with ``node_id`` in ``tree``, if any."""
    for node in iter_nodes(tree, include_root=True):
        if node.id == node_id:
            return node
    return None
