from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.enums import HierarchySource
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .hierarchy.controller import register as register_hierarchy

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    source = getattr(settings, "HIERARCHY_SOURCE", HierarchySource.MYSQL.value)
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("settings=%s source=%s", settings_module, source)

    if source == HierarchySource.MYSQL.value:
        target = DBConfig.from_dict(db_config)
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(target, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready on %s (tables=%d)", target.describe(), len(list_tables(target)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(target, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready on %s", target.describe())

    container = build_container(
        db_config=db_config,
        source=source,
        json_path=getattr(settings, "HIERARCHY_JSON_PATH", None),
        organization=getattr(settings, "ORGANIZATION_NAME", None),
    )

    register_hierarchy(app, container)

    return app
