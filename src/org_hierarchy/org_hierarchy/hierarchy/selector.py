from __future__ import annotations

from typing import Optional, Sequence

from ..employees.model import EmployeeRecord
from .builder import HierarchyBuilder
from .model import Forest


class ForestSelector:
    """Use the data source's own forest when it sends one, else build it locally."""

    def __init__(self, builder: Optional[HierarchyBuilder] = None):
        self._builder = builder or HierarchyBuilder()

    def select(self, supplied_forest: Optional[Forest], employees: Sequence[EmployeeRecord]) -> Forest:
        if supplied_forest:
            return supplied_forest
        return self._builder.build(employees)
