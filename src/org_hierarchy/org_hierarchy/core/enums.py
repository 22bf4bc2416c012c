from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Built-in employee roles. Custom roles are carried as plain strings."""

    ADMIN = "admin"
    USER = "user"


class HierarchySource(str, Enum):
    """Where the org hierarchy snapshot is loaded from."""

    MYSQL = "mysql"
    JSON = "json"
