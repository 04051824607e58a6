"""Main entry point for the Noor API server."""

import logging

import uvicorn

from noor.api.app import create_app
from noor.config import get_config, setup_logging


def main() -> None:
    """Run the Noor API server."""
    config = get_config()
    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Starting Noor...")
    logger.info(f"Prayer engine: {config.prayer_engine}")
    logger.info(f"Gold price: {config.gold_price} {config.currency}/g")

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
