import logging
import sys

import uvicorn
from pydantic import ValidationError

from taskapi.core.config import get_settings
from taskapi.core.logging_setup import setup_logging
from taskapi.main import create_app

logger = logging.getLogger("taskapi")


def main() -> int:
    setup_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.critical("Invalid configuration:\n%s", exc)
        return 1
    setup_logging(settings.log_level)

    logger.info("Starting server on %s", settings.server_address)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
