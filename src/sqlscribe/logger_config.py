"""Logging configuration for SQLScribe"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

import logfire
from rich.console import Console
from rich.logging import RichHandler

from .config import RUN_CONFIG, get_log_level, get_logs_dir

LOGGER_NAME = "sqlscribe"

_logfire_configured = False


def setup_logger(
    run_timestamp: Optional[str] = None, log_to_file: bool = True
) -> logging.Logger:
    """
    Setup dual logging: console (rich) + rotating file.

    Args:
        run_timestamp: Timestamp string for the log filename
            (e.g., "2026-02-02_14-30-45"); defaults to now
        log_to_file: Whether to add the rotating file handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = RichHandler(
        rich_tracebacks=True,
        markup=True,
        show_time=True,
        show_path=False,
        console=Console(stderr=True),
    )
    console_handler.setLevel(get_log_level())
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_to_file:
        run_timestamp = run_timestamp or datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logs_dir = get_logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)

        log_file = logs_dir / f"sqlscribe_{run_timestamp}.log"
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=RUN_CONFIG["log_max_bytes"],
            backupCount=RUN_CONFIG["log_backup_count"],
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.debug(f"Logging initialized - Log file: {log_file}")

    return logger


def configure_logfire() -> None:
    """Instrument pydantic-ai runs; spans are only shipped when LOGFIRE_TOKEN is set."""
    global _logfire_configured
    if _logfire_configured:
        return
    logfire.configure(send_to_logfire="if-token-present", console=False)
    logfire.instrument_pydantic_ai()
    _logfire_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the configured logger, or one of its children."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
