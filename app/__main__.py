from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from app.config import load_settings
from app.errors import ConfigError
from app.main import configure_logging, create_app


if __name__ == "__main__":
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        settings.validate()
    except ConfigError as exc:
        logging.getLogger("voe").error("ERROR: %s", exc)
        sys.exit(1)

    uvicorn.run(
        create_app(settings),
        host=settings.app_host,
        port=settings.app_port,
        reload=False,
    )
