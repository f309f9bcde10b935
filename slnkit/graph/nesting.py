"""Folder-to-child nesting index backed by networkx.DiGraph."""

from __future__ import annotations

import networkx as nx


class NestingIndex:
    """Maps solution folder ids to the ids of the entries they contain.

    Edges run parent -> child. Children keep the order they were nested in
    and an entry has at most one parent.
    """

    def __init__(self) -> None:
        self.graph = nx.DiGraph()

    def nest(self, child_id: str, parent_id: str) -> None:
        """Record ``child_id`` as a direct child of ``parent_id``.

        Raises ValueError if the child already has a parent or the edge
        would introduce a cycle.
        """
        if child_id == parent_id:
            raise ValueError(f"{child_id} cannot be nested in itself")
        current = self.parent_of(child_id)
        if current is not None:
            raise ValueError(f"{child_id} is already nested in {current}")
        if (
            self.graph.has_node(child_id)
            and self.graph.has_node(parent_id)
            and nx.has_path(self.graph, child_id, parent_id)
        ):
            raise ValueError(f"Nesting {child_id} in {parent_id} creates a cycle")
        self.graph.add_edge(parent_id, child_id)

    def remove(self, entry_id: str) -> None:
        """Drop an entry; its children take its place in its parent's list."""
        if not self.graph.has_node(entry_id):
            return
        parent = self.parent_of(entry_id)
        children = self.children_of(entry_id)
        siblings = self.children_of(parent) if parent is not None else []
        if parent is not None:
            at = siblings.index(entry_id)
            siblings[at:at + 1] = children
            # successors iterate in insertion order, so rebuild the parent's edges
            self.graph.remove_edges_from([(parent, s) for s in self.children_of(parent)])
        self.graph.remove_node(entry_id)
        if parent is not None:
            self.graph.add_edges_from((parent, s) for s in siblings)

    # --- Queries ---

    def parent_of(self, child_id: str) -> str | None:
        if not self.graph.has_node(child_id):
            return None
        parents = list(self.graph.predecessors(child_id))
        return parents[0] if parents else None

    def children_of(self, parent_id: str) -> list[str]:
        if not self.graph.has_node(parent_id):
            return []
        return list(self.graph.successors(parent_id))
