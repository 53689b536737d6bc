"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from exercise_tracker.api.app import create_app
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import load_settings
from exercise_tracker.containers import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the exercise tracker HTTP server."""
    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(build_container(settings))
    logger.info("Server is running on port %s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
