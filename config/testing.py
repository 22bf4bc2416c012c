import os
from pathlib import Path

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "org_hierarchy_test"),
}

# Tests run against the bundled sample document, no MySQL server needed.
HIERARCHY_SOURCE = os.getenv("HIERARCHY_SOURCE", "json")
HIERARCHY_JSON_PATH = os.getenv(
    "HIERARCHY_JSON_PATH",
    str(Path(__file__).resolve().parents[1] / "database" / "sample_hierarchy.json"),
)

ORGANIZATION_NAME = "Test Org"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
