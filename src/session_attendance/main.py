"""Run the development server: ``python -m session_attendance.main``."""

from __future__ import annotations

import importlib
import logging

from . import create_app
from .config import get_settings_module

logger = logging.getLogger(__name__)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    app = create_app()
    host = getattr(settings, "HOST", "0.0.0.0")
    port = int(getattr(settings, "PORT", 4000))
    logger.info("Attendance service running on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=bool(getattr(settings, "DEBUG", False)), use_reloader=False)


if __name__ == "__main__":
    main()
