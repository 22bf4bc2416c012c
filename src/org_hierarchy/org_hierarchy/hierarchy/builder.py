"""Reporting-line forest construction from a flat employee list."""

from __future__ import annotations

import logging
from typing import Sequence

from ..employees.model import EmployeeRecord
from .model import Forest, HierarchyNode

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """Builds a fresh forest of HierarchyNode from an employee snapshot.

    - An employee is a root when none of its supervisor references resolve to
      another employee of the snapshot (dangling and self references are dropped).
    - An employee with several resolvable supervisors is a subordinate of each.
    - A subordinates list never holds the same id twice.
    - Supervisor cycles unreachable from any root get their first member (in
      input order) promoted to a root.
    """

    def build(self, employees: Sequence[EmployeeRecord]) -> Forest:
        if not employees:
            return []

        nodes: dict[str, HierarchyNode] = {}
        for e in employees:
            if e.id not in nodes:
                nodes[e.id] = HierarchyNode.from_employee(e)

        has_parent: set[str] = set()
        for e in employees:
            child = nodes[e.id]
            for ref in e.supervisors:
                if ref.id == e.id:
                    continue
                parent = nodes.get(ref.id)
                if parent is None:
                    continue
                has_parent.add(e.id)
                if not parent.has_subordinate(e.id):
                    parent.subordinates.append(child)

        roots: Forest = [node for node_id, node in nodes.items() if node_id not in has_parent]
        self._promote_unreachable(nodes, roots)

        logger.debug("Built org hierarchy: %d nodes, %d root(s)", len(nodes), len(roots))
        return roots

    def _promote_unreachable(self, nodes: dict[str, HierarchyNode], roots: Forest) -> None:
        reached: set[str] = set()
        for root in roots:
            _mark_reachable(root, reached)

        if len(reached) == len(nodes):
            return

        for node_id, node in nodes.items():
            if node_id in reached:
                continue
            logger.warning("Supervisor cycle without a top-level employee; promoting %s to root", node_id)
            roots.append(node)
            _mark_reachable(node, reached)


def _mark_reachable(start: HierarchyNode, reached: set[str]) -> None:
    stack = [start]
    while stack:
        node = stack.pop()
        if node.id in reached:
            continue
        reached.add(node.id)
        stack.extend(node.subordinates)
