from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..employees.model import EmployeeRecord, SupervisorRef
from .model import HierarchySnapshot
from .repository import HierarchyDataSource


class MySQLHierarchyRepository(HierarchyDataSource):
    """Loads active employees and their declared supervisors.

    Never supplies a pre-built forest, so the caller builds it from the rows.
    A supervisor who is inactive (or deleted) is still listed on the employee
    and shows up as a dangling reference.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, organization: Optional[str] = None):
        self._conn_factory = conn_factory
        self._organization = organization

    def fetch(self) -> HierarchySnapshot:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, role, custom_role, avatar_url
                FROM users
                WHERE is_active=1
                ORDER BY user_id
                """
            )
            user_rows = fetchall(cur)

            cur.execute(
                """
                SELECT us.user_id, us.supervisor_id,
                       s.full_name AS supervisor_name, s.role AS supervisor_role
                FROM user_supervisors us
                LEFT JOIN users s ON s.user_id = us.supervisor_id
                ORDER BY us.user_id, us.position, us.supervisor_id
                """
            )
            link_rows = fetchall(cur)

        supervisors: dict[str, list[SupervisorRef]] = {}
        for r in link_rows:
            supervisors.setdefault(str(r["user_id"]), []).append(
                SupervisorRef(
                    id=str(r["supervisor_id"]),
                    name=r.get("supervisor_name") or "",
                    role=r.get("supervisor_role") or "",
                )
            )

        employees = [
            EmployeeRecord(
                id=str(r["user_id"]),
                name=r["full_name"],
                email=r.get("email") or "",
                role=r["role"],
                supervisors=tuple(supervisors.get(str(r["user_id"]), ())),
                custom_role=r.get("custom_role"),
                avatar_url=r.get("avatar_url"),
            )
            for r in user_rows
        ]

        return HierarchySnapshot(employees=employees, hierarchy=None, organization=self._organization)
