from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import DEFAULT_ORGANIZATION_NAME
from ..employees.model import EmployeeRecord
from ..employees.supervisor_index import SupervisorIndex, display_role
from .mapper import supervisor_to_doc
from .model import Forest, ForestStats, forest_stats
from .repository import HierarchyDataSource
from .selector import ForestSelector


def snapshot_key(employees: Sequence[EmployeeRecord]) -> str:
    """Digest of the employee ids and their supervisor ids, in order.

    Equal keys mean the reporting lines did not change between two fetches.
    """
    lines = [[e.id, [s.id for s in e.supervisors]] for e in employees]
    payload = json.dumps(lines, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class HierarchyView:
    """Everything a renderer needs for one org hierarchy screen."""

    organization: str
    total_employees: int
    employees: Sequence[EmployeeRecord]
    forest: Forest
    supervisors: SupervisorIndex
    stats: ForestStats
    snapshot_key: str


class HierarchyService:
    """Use case: load the org hierarchy for display."""

    def __init__(
        self,
        source: HierarchyDataSource,
        *,
        selector: Optional[ForestSelector] = None,
        default_organization: str = DEFAULT_ORGANIZATION_NAME,
    ):
        self._source = source
        self._selector = selector or ForestSelector()
        self._default_organization = default_organization

    def load_view(self) -> HierarchyView:
        snapshot = self._source.fetch()
        forest = self._selector.select(snapshot.hierarchy, snapshot.employees)

        return HierarchyView(
            organization=snapshot.organization or self._default_organization,
            total_employees=snapshot.employee_count,
            employees=snapshot.employees,
            forest=forest,
            supervisors=SupervisorIndex.build(snapshot.employees),
            stats=forest_stats(forest),
            snapshot_key=snapshot_key(snapshot.employees),
        )

    def list_reporting_lines(self, view: Optional[HierarchyView] = None) -> list[dict]:
        view = view or self.load_view()
        out: list[dict] = []
        for e in view.employees:
            out.append(
                {
                    "_id": e.id,
                    "name": e.name,
                    "role": display_role(e.role, e.custom_role),
                    "reportsTo": view.supervisors.reports_to_label(e),
                    "supervisorRoles": view.supervisors.supervisor_roles_label(e),
                    "supervisors": [supervisor_to_doc(s) for s in view.supervisors.supervisors_of(e.id)],
                }
            )
        return out
