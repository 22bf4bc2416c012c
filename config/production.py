import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "org_hierarchy_db"),
}

HIERARCHY_SOURCE = os.getenv("HIERARCHY_SOURCE", "mysql")
HIERARCHY_JSON_PATH = os.getenv("HIERARCHY_JSON_PATH")

ORGANIZATION_NAME = os.getenv("ORGANIZATION_NAME", "Organization")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
