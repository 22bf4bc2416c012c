from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .model import HierarchyNode, iter_nodes


class ExpansionState:
    """Set of node ids currently shown expanded in a hierarchy view.

    Owned by a session rather than by the forest. Not thread-safe: one writer
    at a time, or replace the whole object (what the web controller does by
    rebuilding it from the session on every request).
    """

    def __init__(self, expanded: Iterable[str] = ()):
        self._expanded: set[str] = set(expanded)

    @classmethod
    def from_ids(cls, ids: Iterable[str] | None) -> "ExpansionState":
        return cls(ids or ())

    @classmethod
    def seeded(cls, forest: Sequence[HierarchyNode]) -> "ExpansionState":
        state = cls()
        state.seed_initial_expansion(forest)
        return state

    @property
    def expanded(self) -> frozenset[str]:
        return frozenset(self._expanded)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._expanded

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._expanded))

    def __len__(self) -> int:
        return len(self._expanded)

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self._expanded

    def toggle(self, node_id: str) -> bool:
        """Flip one node and return whether it is now expanded."""
        if node_id in self._expanded:
            self._expanded.remove(node_id)
            return False
        self._expanded.add(node_id)
        return True

    def expand(self, node_id: str) -> None:
        self._expanded.add(node_id)

    def collapse(self, node_id: str) -> None:
        self._expanded.discard(node_id)

    def expand_all(self, forest: Sequence[HierarchyNode]) -> None:
        self._expanded = {node.id for node in iter_nodes(forest)}

    def collapse_all(self) -> None:
        self._expanded = set()

    def seed_initial_expansion(self, forest: Sequence[HierarchyNode]) -> None:
        # roots and their direct reports; deeper levels start collapsed
        ids: set[str] = set()
        for root in forest:
            ids.add(root.id)
            for child in root.subordinates:
                ids.add(child.id)
        self._expanded = ids

    def to_list(self) -> list[str]:
        return sorted(self._expanded)
