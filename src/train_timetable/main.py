"""Main entry point for the train timetable API server."""

import logging
import sys

import uvicorn
from starlette.applications import Starlette

from train_timetable.adapters.config import AppConfig
from train_timetable.adapters.json_store import JsonScheduleRepository
from train_timetable.adapters.logging_observer import LoggingScheduleObserver
from train_timetable.adapters.web import create_app
from train_timetable.application.services import TimetableService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_app(config: AppConfig) -> Starlette:
    """Wire repository, service and web adapter for the given configuration."""
    repository = JsonScheduleRepository(config.data_file)
    service = TimetableService(
        repository,
        clock=config.today,
        observer=LoggingScheduleObserver(),
    )
    return create_app(service, config)


def create_application() -> Starlette:
    """Application factory for uvicorn (used when auto-reload is enabled)."""
    config = AppConfig()
    configure_logging(config.log_level)
    return build_app(config)


def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    logger.info(f"Serving schedules from {config.data_file} (timezone {config.timezone})")
    logger.info(f"Server running on port {config.port}")

    if config.reload:
        # Auto-reload needs an import string so uvicorn can re-import the app
        uvicorn.run(
            "train_timetable.main:create_application",
            factory=True,
            host=config.host,
            port=config.port,
            reload=True,
            log_level=config.log_level.lower(),
        )
        return

    uvicorn.run(
        build_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
