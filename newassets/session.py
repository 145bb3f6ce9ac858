"""Orchestrator owning the current selection, tree and expansion state.

Hosts drive the browser through one ``AssetBrowserSession``: change the
selection, call ``refresh()``, paint ``rows()``. Each rebuild swaps the tree
and its expansion state together.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime

from loguru import logger

from .metadata import MetadataProvider, collect_records
from .sorting import SortDirection, SortKey, sort_paths
from .state import ViewSettings
from .time_window import TimeRange, filter_new_paths
from .tree_model import (
    ExpansionState,
    TreeNode,
    TreeRow,
    apply_expanded_keys,
    build_path_tree,
    capture_expanded_keys,
    expand_all,
    find_node,
    iter_leaves,
    new_root,
    path_segments,
    visible_rows,
)


class AssetBrowserSession:
    """Recently-created asset browser state behind a host UI."""

    def __init__(
        self,
        provider: MetadataProvider,
        settings: ViewSettings | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.provider = provider
        self.settings = settings or ViewSettings()
        self.clock = clock
        self.tree: TreeNode = new_root()
        self.expansion = ExpansionState()
        self.sorted_paths: list[str] = []
        self.creation_times: dict[str, datetime | None] = {}

    def build(
        self, now: datetime | None = None
    ) -> tuple[dict[str, datetime | None], list[str], TreeNode]:
        """Run filter, sort and build for the current settings without storing.

        Creation times are read from the provider once per path and the same
        snapshot feeds the filter and the sort.
        """
        now = self.clock() if now is None else now
        creation_times = {record.path: record.creation_time for record in collect_records(self.provider)}
        recent = filter_new_paths(
            creation_times,
            self.settings.time_range,
            now,
            creation_times.get,
        )
        ordered = sort_paths(
            recent,
            self.settings.sort_key,
            self.settings.sort_direction,
            creation_times.get,
        )
        return creation_times, ordered, build_path_tree(ordered)

    def refresh(self) -> TreeNode:
        """Rebuild the tree and carry expanded directories over by key."""
        expanded_keys = capture_expanded_keys(self.tree, self.expansion)
        creation_times, ordered, tree = self.build()
        expansion = apply_expanded_keys(tree, expanded_keys)
        logger.debug(
            f"refreshed asset tree: {len(ordered)} assets, "
            f"{len(expansion.expanded_ids)}/{len(expanded_keys)} expanded directories kept "
            f"({self.settings.time_range.value}, {self.settings.sort_key.value}, "
            f"{self.settings.sort_direction.value})"
        )
        self.creation_times, self.sorted_paths = creation_times, ordered
        self.tree, self.expansion = tree, expansion
        return tree

    def creation_time(self, path: str) -> datetime | None:
        """Creation time of ``path`` as read by the last refresh."""
        return self.creation_times.get(path)

    def set_time_range(self, time_range: TimeRange) -> bool:
        """Select ``time_range``; rebuild and return ``True`` only on change."""
        if time_range is self.settings.time_range:
            return False
        self.settings = replace(self.settings, time_range=time_range)
        self.refresh()
        return True

    def set_sort(self, key: SortKey, direction: SortDirection | None = None) -> bool:
        """Select sort key/direction; rebuild and return ``True`` only on change."""
        direction = self.settings.sort_direction if direction is None else direction
        if key is self.settings.sort_key and direction is self.settings.sort_direction:
            return False
        self.settings = replace(self.settings, sort_key=key, sort_direction=direction)
        self.refresh()
        return True

    def set_search_query(self, query: str) -> None:
        """Change the live search text; the tree is not rebuilt."""
        self.settings = replace(self.settings, search_query=query)

    def rows(self) -> list[TreeRow]:
        return visible_rows(self.tree, self.expansion, self.settings.search_query)

    def node(self, node_id: int) -> TreeNode | None:
        return find_node(self.tree, node_id)

    def toggle(self, node_id: int) -> bool | None:
        """Toggle a directory; returns its new state, or ``None`` if not found."""
        node = self.node(node_id)
        if node is None or node.is_leaf or node.is_root:
            return None
        return self.expansion.toggle(node)

    def expand_all(self) -> None:
        self.expansion = expand_all(self.tree)

    def collapse_all(self) -> None:
        self.expansion = ExpansionState()

    def expand_keys(self, keys: Iterable[str]) -> None:
        """Expand the directories whose keys are given, on top of current state."""
        normalized = ["/".join(path_segments(key)) for key in keys]
        applied = apply_expanded_keys(self.tree, normalized)
        self.expansion.expanded_ids |= applied.expanded_ids

    def expanded_keys(self) -> frozenset[str]:
        return capture_expanded_keys(self.tree, self.expansion)

    def payload_path(self, node_id: int) -> str | None:
        """Resolve a leaf to the asset path a host reveals or drags."""
        node = self.node(node_id)
        if node is None or not node.is_leaf:
            return None
        return node.payload_path

    def leaf_paths(self) -> list[str]:
        return [leaf.payload_path for leaf in iter_leaves(self.tree) if leaf.payload_path is not None]
