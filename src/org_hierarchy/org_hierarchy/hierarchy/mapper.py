"""Conversion between org-hierarchy response documents and the typed model.

Document shape::

    {
        "organization": "Acme",
        "totalEmployees": 3,
        "hierarchy": [{"_id", "name", "email", "role", "customRole", "avatarUrl", "subordinates": [...]}],
        "employees": [{"_id", "name", "email", "role", "supervisors": [{"_id", "name", "role"}]}],
    }
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import require_list, require_mapping
from ..core.exceptions import ValidationError
from ..employees.model import EmployeeRecord, SupervisorRef
from .model import Forest, HierarchyNode, HierarchySnapshot


def _read_id(doc: dict, field_name: str) -> str:
    raw = doc.get("_id", doc.get("id"))
    if raw is None or str(raw).strip() == "":
        raise ValidationError(f"{field_name} is missing an id")
    return str(raw)


def _opt_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _read_count(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"totalEmployees must be a number, got {value!r}") from e


def supervisor_from_doc(doc: Any) -> SupervisorRef:
    doc = require_mapping(doc, "supervisor")
    return SupervisorRef(
        id=_read_id(doc, "supervisor"),
        name=str(doc.get("name") or ""),
        role=str(doc.get("role") or ""),
    )


def employee_from_doc(doc: Any) -> EmployeeRecord:
    doc = require_mapping(doc, "employee")
    # older payloads name the list "reportsTo"
    raw_supervisors = doc.get("supervisors", doc.get("reportsTo"))
    return EmployeeRecord(
        id=_read_id(doc, "employee"),
        name=str(doc.get("name") or ""),
        email=str(doc.get("email") or ""),
        role=str(doc.get("role") or ""),
        supervisors=tuple(supervisor_from_doc(s) for s in require_list(raw_supervisors, "supervisors")),
        custom_role=_opt_str(doc.get("customRole")),
        avatar_url=_opt_str(doc.get("avatarUrl")),
    )


def node_from_doc(doc: Any) -> HierarchyNode:
    doc = require_mapping(doc, "hierarchy node")
    return HierarchyNode(
        id=_read_id(doc, "hierarchy node"),
        name=str(doc.get("name") or ""),
        email=str(doc.get("email") or ""),
        role=str(doc.get("role") or ""),
        custom_role=_opt_str(doc.get("customRole")),
        avatar_url=_opt_str(doc.get("avatarUrl")),
        subordinates=[node_from_doc(c) for c in require_list(doc.get("subordinates"), "subordinates")],
    )


def snapshot_from_doc(doc: Any) -> HierarchySnapshot:
    doc = require_mapping(doc, "org hierarchy")
    employees = [employee_from_doc(e) for e in require_list(doc.get("employees"), "employees")]

    hierarchy: Optional[Forest] = None
    if doc.get("hierarchy") is not None:
        hierarchy = [node_from_doc(n) for n in require_list(doc.get("hierarchy"), "hierarchy")]

    return HierarchySnapshot(
        employees=employees,
        hierarchy=hierarchy,
        organization=_opt_str(doc.get("organization")),
        total_employees=_read_count(doc.get("totalEmployees")),
    )


def supervisor_to_doc(ref: SupervisorRef) -> dict:
    return {"_id": ref.id, "name": ref.name, "role": ref.role}


def employee_to_doc(employee: EmployeeRecord) -> dict:
    return {
        "_id": employee.id,
        "name": employee.name,
        "email": employee.email,
        "role": employee.role,
        "supervisors": [supervisor_to_doc(s) for s in employee.supervisors],
    }


def node_to_doc(node: HierarchyNode, _path: frozenset[str] = frozenset()) -> dict:
    """Serialise a node and its subtree.

    A node already on the path from the root is written without subordinates,
    which keeps supervisor cycles finite.
    """
    path = _path | {node.id}
    return {
        "_id": node.id,
        "name": node.name,
        "email": node.email,
        "role": node.role,
        "customRole": node.custom_role,
        "avatarUrl": node.avatar_url,
        "subordinates": [
            node_to_doc(child, path) if child.id not in path else _leaf_doc(child)
            for child in node.subordinates
        ],
    }


def _leaf_doc(node: HierarchyNode) -> dict:
    return {
        "_id": node.id,
        "name": node.name,
        "email": node.email,
        "role": node.role,
        "customRole": node.custom_role,
        "avatarUrl": node.avatar_url,
        "subordinates": [],
    }


def forest_to_doc(forest: Sequence[HierarchyNode]) -> list[dict]:
    return [node_to_doc(root) for root in forest]
