"""Example: use the service layer without Flask.

Loads the bundled sample document, prints the forest with expand markers and
the "reports to" labels.
"""

import importlib
import os

from config import get_settings_module

from org_hierarchy.container import build_container
from org_hierarchy.hierarchy.expansion import ExpansionState
from org_hierarchy.hierarchy.model import HierarchyNode


def print_branch(node: HierarchyNode, state: ExpansionState, depth: int, path: frozenset) -> None:
    marker = "-" if node.id in state else "+"
    if not node.subordinates:
        marker = " "
    print(f"{'    ' * depth}{marker} {node.name} ({node.custom_role or node.role})")
    if node.id in state and node.id not in path:
        for child in node.subordinates:
            print_branch(child, state, depth + 1, path | {node.id})


def main():
    os.environ.setdefault("APP_ENV", "testing")
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        source=settings.HIERARCHY_SOURCE,
        json_path=settings.HIERARCHY_JSON_PATH,
        organization=settings.ORGANIZATION_NAME,
    )

    view = container.hierarchy_service.load_view()
    state = ExpansionState.seeded(view.forest)

    print(f"{view.organization} ({view.total_employees} employees)")
    for root in view.forest:
        print_branch(root, state, 0, frozenset())

    print()
    for row in container.hierarchy_service.list_reporting_lines(view):
        print(f"{row['name']:<16} reports to: {row['reportsTo']}")


if __name__ == "__main__":
    main()
