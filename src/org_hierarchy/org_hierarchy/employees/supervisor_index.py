from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from ..core.constants import LABEL_SEPARATOR, NO_SUPERVISOR_LABEL, NOT_APPLICABLE_LABEL
from ..core.enums import Role
from .model import EmployeeRecord, SupervisorRef


def display_role(role: str, custom_role: str | None = None) -> str:
    """Role shown next to a name: the custom role if set, else the role capitalised."""
    if custom_role:
        return custom_role
    return role[:1].upper() + role[1:]


class SupervisorIndex(Mapping[str, tuple[SupervisorRef, ...]]):
    """Employee id -> every supervisor reference declared on that employee.

    The lists are kept verbatim, dangling references included, so "reports to"
    labels can differ from the edges drawn in the forest. Duplicate records for
    one id are merged the way HierarchyBuilder merges their edges: the first
    record's list, then any supervisor id a later record adds. Unknown ids map
    to an empty tuple.
    """

    def __init__(self, entries: dict[str, tuple[SupervisorRef, ...]]):
        self._entries = entries

    @classmethod
    def build(cls, employees: Sequence[EmployeeRecord]) -> "SupervisorIndex":
        merged: dict[str, list[SupervisorRef]] = {}
        for e in employees:
            if e.id not in merged:
                merged[e.id] = list(e.supervisors)
                continue
            refs = merged[e.id]
            seen = {r.id for r in refs}
            for s in e.supervisors:
                if s.id not in seen:
                    seen.add(s.id)
                    refs.append(s)
        return cls({employee_id: tuple(refs) for employee_id, refs in merged.items()})

    def __getitem__(self, employee_id: str) -> tuple[SupervisorRef, ...]:
        return self._entries.get(employee_id, ())

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def supervisors_of(self, employee_id: str) -> tuple[SupervisorRef, ...]:
        return self._entries.get(employee_id, ())

    def reports_to_label(self, employee: EmployeeRecord) -> str:
        if employee.role == Role.ADMIN.value:
            return NOT_APPLICABLE_LABEL
        supervisors = self.supervisors_of(employee.id)
        if not supervisors:
            return NO_SUPERVISOR_LABEL
        return LABEL_SEPARATOR.join(s.name for s in supervisors)

    def supervisor_roles_label(self, employee: EmployeeRecord) -> str:
        if employee.role == Role.ADMIN.value:
            return NOT_APPLICABLE_LABEL
        supervisors = self.supervisors_of(employee.id)
        if not supervisors:
            return NO_SUPERVISOR_LABEL
        return LABEL_SEPARATOR.join(display_role(s.role) for s in supervisors)
