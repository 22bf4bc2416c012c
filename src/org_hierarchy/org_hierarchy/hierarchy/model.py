from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from ..employees.model import EmployeeRecord


@dataclass(frozen=True)
class HierarchyNode:
    """One employee's appearance in the forest.

    Note: an employee with several supervisors is the subordinate of each of
    them. Forests built by HierarchyBuilder share a single node per id, so a
    supervisor cycle makes the structure cyclic; walk it with iter_nodes().
    Equality and hashing cover the display attributes only; compare whole
    subtrees with forest_structure().
    """

    id: str
    name: str
    email: str
    role: str
    custom_role: Optional[str] = None
    avatar_url: Optional[str] = None
    subordinates: List["HierarchyNode"] = field(default_factory=list, compare=False, hash=False)

    @classmethod
    def from_employee(cls, employee: EmployeeRecord) -> "HierarchyNode":
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            role=employee.role,
            custom_role=employee.custom_role,
            avatar_url=employee.avatar_url,
        )

    def has_subordinate(self, node_id: str) -> bool:
        return any(child.id == node_id for child in self.subordinates)


Forest = List[HierarchyNode]


@dataclass(frozen=True)
class HierarchySnapshot:
    """One complete fetch result from a hierarchy data source."""

    employees: Sequence[EmployeeRecord]
    hierarchy: Optional[Forest] = None
    organization: Optional[str] = None
    total_employees: Optional[int] = None

    @property
    def employee_count(self) -> int:
        if self.total_employees is not None:
            return self.total_employees
        return len(self.employees)


@dataclass(frozen=True)
class ForestStats:
    node_count: int
    root_count: int
    max_depth: int


def iter_nodes(forest: Sequence[HierarchyNode]) -> Iterator[HierarchyNode]:
    """Yield each distinct node id once, depth-first in display order."""
    visited: set[str] = set()
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        if node.id in visited:
            continue
        visited.add(node.id)
        yield node
        stack.extend(reversed(node.subordinates))


def forest_stats(forest: Sequence[HierarchyNode]) -> ForestStats:
    """Count distinct nodes and measure depth (roots are depth 0).

    Depth follows the shortest path from any root, so cycles terminate.
    """
    depth_of: dict[str, int] = {}
    level = [node for node in forest]
    depth = 0
    while level:
        next_level: list[HierarchyNode] = []
        for node in level:
            if node.id in depth_of:
                continue
            depth_of[node.id] = depth
            next_level.extend(node.subordinates)
        level = next_level
        depth += 1

    return ForestStats(
        node_count=len(depth_of),
        root_count=len(forest),
        max_depth=max(depth_of.values()) if depth_of else 0,
    )


def forest_structure(forest: Sequence[HierarchyNode]) -> Tuple[tuple, ...]:
    """Nested tuples of node attributes and children, for comparing forests.

    A node already on the path from its root is written without children, the
    same cut forest_to_doc() makes.
    """
    return tuple(_node_structure(root, frozenset()) for root in forest)


def _node_structure(node: HierarchyNode, path: frozenset[str]) -> tuple:
    attrs = (node.id, node.name, node.email, node.role, node.custom_role, node.avatar_url)
    if node.id in path:
        return attrs + ((),)
    path = path | {node.id}
    return attrs + (tuple(_node_structure(child, path) for child in node.subordinates),)
