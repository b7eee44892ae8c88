"""Trusty main entry point."""

import uvicorn
from loguru import logger

from .app import create_app
from .config import get_settings, setup_logging


def main() -> None:
    """Run the application."""
    settings = get_settings()
    setup_logging(settings)

    app = create_app(settings)

    logger.info(f"Server starting at {settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=True,
    )
    logger.info("Server shutting down...")


if __name__ == "__main__":
    main()
