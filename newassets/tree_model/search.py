"""Render-time name search over a built tree."""

from __future__ import annotations

from .types import TreeNode


def matches(node: TreeNode, query: str) -> bool:
    """Return whether ``node`` or any descendant has ``query`` in its name.

    Matching is a case-sensitive substring test; an empty query matches
    everything.
    """
    if not query:
        return True
    stack = [node]
    while stack:
        current = stack.pop()
        if query in current.name:
            return True
        stack.extend(current.children)
    return False


def matching_node_ids(tree: TreeNode, query: str) -> set[int]:
    """Return ids of every node that passes :func:`matches` for ``query``.

    Computed in one post-order pass instead of calling :func:`matches` per
    node, which would rescan each subtree once per ancestor.
    """
    visible: set[int] = set()

    def visit(node: TreeNode) -> bool:
        hit = not query or query in node.name
        for child in node.children:
            if visit(child):
                hit = True
        if hit:
            visible.add(node.id)
        return hit

    visit(tree)
    return visible
