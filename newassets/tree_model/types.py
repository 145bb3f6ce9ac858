"""Tree datatypes shared by the builder, reconciler and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT_ID = 0
ROOT_DEPTH = -1


@dataclass(eq=False)
class TreeNode:
    """One node of a built asset tree.

    ``id`` is only meaningful inside the build that produced it. ``key`` is
    the ``/``-joined segment path from the root and stays the same across
    rebuilds, so expansion state is remembered by key. Directory nodes carry
    no ``payload_path``; leaves carry the asset path exactly as it was given.
    """

    id: int
    name: str
    key: str
    depth: int
    is_leaf: bool = False
    payload_path: str | None = None
    children: list[TreeNode] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.depth == ROOT_DEPTH

    @property
    def has_children(self) -> bool:
        return bool(self.children)
