"""
Server entry point for the Finance Chat Backend.

    python -m app.main

Checks configuration before binding the port: without a Gemini API key
the process logs the problem and exits with status 1.
"""

import logging
import sys

import structlog
import uvicorn
from pydantic import ValidationError

from src.config import get_settings
from src.api import create_app


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = structlog.get_logger("app.main")


def main() -> int:
    settings = get_settings()

    try:
        gemini = settings.gemini
    except ValidationError as e:
        logger.critical(
            "startup_failed",
            reason="GEMINI_API_KEY is not defined in the environment or .env file",
            error=str(e),
        )
        return 1

    app_settings = settings.app
    if app_settings.debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)

    app = create_app(app_settings=app_settings)
    logger.info(
        "server_starting",
        host=app_settings.host,
        port=app_settings.port,
        model=gemini.model_name,
        environment=app_settings.app_environment,
    )
    uvicorn.run(app, host=app_settings.host, port=app_settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
