"""Launcher for the flight itinerary HTTP service.

Builds the configuration, logging and dependency container once, then
serves the FastAPI application with uvicorn. Uvicorn handles SIGINT
and SIGTERM and drains in-flight requests before exiting.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from src.api import create_app
from src.config import get_config
from src.container import Container
from src.monitoring import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(description="Run the flight itinerary API server.")
    parser.add_argument("--host", type=str, default=config.server.host, help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=config.server.port, help="Port to listen on.")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured log level (e.g. DEBUG).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = get_config()
    if args.log_level:
        config.observability.level = args.log_level

    configure_logging(config.observability)
    logger = logging.getLogger(__name__)
    logger.info("Initializing", extra={"service": config.service_name})

    app = create_app(Container.create_default(config))
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_config=None,
        timeout_graceful_shutdown=config.server.shutdown_timeout_seconds,
    )
    logger.info("Server exited")


if __name__ == "__main__":
    main()
