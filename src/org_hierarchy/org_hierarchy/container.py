from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_ORGANIZATION_NAME
from .core.enums import HierarchySource
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .hierarchy.json_hierarchy_repository import JsonFileHierarchyRepository
from .hierarchy.mysql_hierarchy_repository import MySQLHierarchyRepository
from .hierarchy.repository import HierarchyDataSource
from .hierarchy.service import HierarchyService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    hierarchy_repo: HierarchyDataSource

    hierarchy_service: HierarchyService


def build_container(
    *,
    db_config: Optional[dict] = None,
    source: str = HierarchySource.MYSQL.value,
    json_path: Optional[str] = None,
    organization: Optional[str] = None,
) -> Container:
    try:
        kind = HierarchySource(source)
    except ValueError:
        raise ValidationError(f"Unknown hierarchy source: {source}")

    conn: Optional[DatabaseConnection] = None
    if kind == HierarchySource.JSON:
        if not json_path:
            raise ValidationError("HIERARCHY_JSON_PATH is required for the json source")
        hierarchy_repo: HierarchyDataSource = JsonFileHierarchyRepository(json_path, organization=organization)
    else:
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        hierarchy_repo = MySQLHierarchyRepository(conn, organization=organization)

    hierarchy_service = HierarchyService(
        hierarchy_repo,
        default_organization=organization or DEFAULT_ORGANIZATION_NAME,
    )

    return Container(
        conn=conn,
        hierarchy_repo=hierarchy_repo,
        hierarchy_service=hierarchy_service,
    )
