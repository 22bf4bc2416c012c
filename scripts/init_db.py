from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "org_hierarchy"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from org_hierarchy.database.bootstrap import apply_schema, list_tables
from org_hierarchy.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(target, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(target)
    print(f"OK: Applied schema.sql -> {target.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
