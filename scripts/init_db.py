from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from session_attendance.config import get_settings_module
from session_attendance.core.logging_config import setup_logging
from session_attendance.database.bootstrap import apply_schema, list_tables
from session_attendance.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(target)
    tables = list_tables(target)
    logger.info(
        "OK: Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        target.user,
        target.host,
        target.port,
        target.database,
        len(tables),
    )


if __name__ == "__main__":
    main()
