"""Console entry point for the HTTP server."""

import sys

import uvicorn

from nuremento.config import get_settings
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Serve nuremento.api.app:app on the configured host and port.

    Registered as a console script in pyproject.toml:
        [project.scripts]
        nuremento-api = "nuremento.api.server:main"
    """
    settings = get_settings()
    logger.info("server_starting", host=settings.api.host, port=settings.api.port)
    try:
        uvicorn.run(
            "nuremento.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level=settings.observability.logging.level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("server_interrupted")
        sys.exit(0)


if __name__ == "__main__":
    main()
