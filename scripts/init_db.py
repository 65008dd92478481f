from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module
from safety_checkin.database.bootstrap import apply_schema
from safety_checkin.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    schema_path = Path(__file__).resolve().parents[1] / "database" / "schema.sql"
    executed = apply_schema(conn, schema_path=schema_path)
    cfg = conn.config
    logger.info("Applied schema.sql -> %s@%s:%s/%s (statements=%d)", cfg.user, cfg.host, cfg.port, cfg.database, executed)


if __name__ == "__main__":
    main()
