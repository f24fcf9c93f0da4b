# api/core/logging.py
import logging
from typing import Dict

from config import AppSettings
from utils.logging import setup_logging as configure_root_logging


def setup_logging(settings: AppSettings) -> None:
    """
    Configures the application's logging system based on settings.

    This function sets the log level, format (standard or JSON), and handlers
    (console and optional file).

    Args:
        settings: The application settings object.
    """
    log_level_map: Dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(settings.LOG_LEVEL.upper(), logging.INFO)

    # Set log levels for key packages
    module_levels = {
        module: log_level
        for module in ["api", "audio", "transcript", "evaluation", "utils"]
    }

    configure_root_logging(
        level=log_level,
        json_output=settings.JSON_LOGS,
        log_file=settings.LOG_FILE,
        module_levels=module_levels,
    )

    logging.getLogger(__name__).info(
        f"Logging configured with level: {settings.LOG_LEVEL}, JSON: {settings.JSON_LOGS}"
    )
