import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "org_hierarchy_db"),
}

# "mysql" reads users/user_supervisors, "json" reads a saved org-hierarchy response
HIERARCHY_SOURCE = os.getenv("HIERARCHY_SOURCE", "mysql")
HIERARCHY_JSON_PATH = os.getenv("HIERARCHY_JSON_PATH", "database/sample_hierarchy.json")

ORGANIZATION_NAME = os.getenv("ORGANIZATION_NAME", "Organization")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
