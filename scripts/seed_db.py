from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from session_attendance.config import get_settings_module
from session_attendance.core.logging_config import setup_logging
from session_attendance.database.bootstrap import apply_schema, ensure_demo_data
from session_attendance.database.connection import DBConfig

logger = logging.getLogger("seed_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(target)
    if ensure_demo_data(target):
        logger.info("OK: Seeded demo data -> %s@%s:%s/%s", target.user, target.host, target.port, target.database)
    else:
        logger.info("Nothing to do: %s already has users", target.database)


if __name__ == "__main__":
    main()
