from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "org_hierarchy"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from org_hierarchy.database.bootstrap import apply_seed_sql
from org_hierarchy.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_seed_sql(target, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded database -> {target.describe()}")


if __name__ == "__main__":
    main()
