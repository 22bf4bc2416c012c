from __future__ import annotations

import pytest

from org_hierarchy.employees.model import EmployeeRecord, SupervisorRef


def _employee(employee_id: str, *supervisor_ids: str, role: str = "user", name: str | None = None) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        name=name or employee_id.title(),
        email=f"{employee_id}@example.com",
        role=role,
        supervisors=tuple(SupervisorRef(id=s, name=s.title(), role="user") for s in supervisor_ids),
    )


@pytest.fixture
def make_employee():
    return _employee


@pytest.fixture
def field_sales_team(make_employee):
    """Alice heads the team, Carol reports to both Alice and Bob."""
    return [
        make_employee("alice", role="admin"),
        make_employee("bob", "alice"),
        make_employee("carol", "alice", "bob"),
        make_employee("dan", "carol"),
    ]
