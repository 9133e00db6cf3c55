"""
Centralized logging configuration for tastools.

Debug logging goes to a rotating file in a directory chosen by the host
(the executor or the command line); warnings and above also go to stderr.

Usage:
    from tastools.logging_config import setup_logging
    setup_logging(log_dir)  # Call once at startup

All tastools.* loggers write DEBUG to file, WARNING+ to console.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime


LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB per file
BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "tastools"

_logging_initialized = False


def setup_logging(
    log_dir: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Configure the logging system for tastools.

    Args:
        log_dir: Directory the log file goes in (created if missing)
        log_level: Level for file logging (default: DEBUG)
        console_level: Level for console output (default: WARNING)

    Returns:
        Path to the log file
    """
    global _logging_initialized

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Re-initialization replaces handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-35s | %(funcName)-25s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    console_formatter = logging.Formatter(
        fmt="%(levelname)-8s | %(name)-25s | %(message)s"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if not _logging_initialized:
        root_logger.info("=" * 80)
        root_logger.info(f"tastools logging initialized at {datetime.now().isoformat()}")
        root_logger.info(f"Log file: {log_path.absolute()}")
        root_logger.info("=" * 80)
        _logging_initialized = True

    return log_path


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger configured as child of the tastools logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured Logging Helpers
# =============================================================================


def log_tick(
    logger: logging.Logger,
    tick: int,
    phase: str,
    details: str | None = None,
) -> None:
    """Log tick-related activity."""
    details_str = f" | {details}" if details else ""
    logger.debug(f"TICK {tick:05d} | {phase}{details_str}")


def log_match(
    logger: logging.Logger,
    tick: int,
    tool: str,
    success: bool,
    details: str | None = None,
) -> None:
    """Log a tool invocation being validated."""
    status = "OK" if success else "FAILED"
    details_str = f" | {details}" if details else ""
    level = logging.DEBUG if success else logging.INFO
    logger.log(level, f"TICK {tick:05d} | MATCH | {tool} | {status}{details_str}")


def log_tool(
    logger: logging.Logger,
    tick: int,
    tool: str,
    action: str,
    details: str | None = None,
) -> None:
    """Log an active tool being started, replaced or stopped."""
    details_str = f" | {details}" if details else ""
    logger.debug(f"TICK {tick:05d} | TOOL | {tool} | {action}{details_str}")


def log_check(
    logger: logging.Logger,
    tick: int,
    outcome: str,
    replays_used: int,
    details: str | None = None,
) -> None:
    """Log a check being evaluated."""
    details_str = f" | {details}" if details else ""
    logger.info(f"TICK {tick:05d} | CHECK | {outcome} | replays={replays_used}{details_str}")
