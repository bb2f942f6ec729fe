"""
Main application entry point.
"""

from marketplace.api.app import create_app
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)

app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    logger.info("Starting marketplace server", host=settings.API_HOST, port=settings.API_PORT)

    uvicorn.run(
        "marketplace.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
