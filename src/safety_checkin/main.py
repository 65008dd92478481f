from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_HORIZON_DAYS, DEFAULT_LOOKBACK_DAYS
from .database.bootstrap import apply_schema
from .streaks.controller import register as register_streaks
from .worker_exceptions.controller import register as register_worker_exceptions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        lookback_days=int(getattr(settings, "STREAK_LOOKBACK_DAYS", DEFAULT_LOOKBACK_DAYS)),
        horizon_days=int(getattr(settings, "NEXT_CHECKIN_HORIZON_DAYS", DEFAULT_HORIZON_DAYS)),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
        apply_schema(container.conn, schema_path=schema_path)

    register_streaks(app, container)
    register_worker_exceptions(app, container)

    return app
