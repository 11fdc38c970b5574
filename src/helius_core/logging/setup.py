"""Logging setup and configuration."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from helius_core.logging.formatters import ConsoleFormatter, JSONFormatter

# Default settings
DEFAULT_LOG_DIR = Path("logs")
DEFAULT_ROTATION_WHEN = "midnight"
DEFAULT_ROTATION_INTERVAL = 1
DEFAULT_BACKUP_COUNT = 7
DEFAULT_CONSOLE_LEVEL = logging.INFO
DEFAULT_FILE_LEVEL = logging.DEBUG

# HTTP client loggers that drown out classification records
NOISY_LOGGERS = [
    "urllib3",
    "requests",
    "aiohttp",
]


def get_log_file_path(log_dir: Path, name: str = "helius") -> Path:
    """
    Build the log file path for a logger name.

    Example:
        logs/helius.log
    """
    return log_dir / f"{name}.log"


def setup_logging(
    name: str = "helius",
    log_dir: Path | None = None,
    json_format: bool = False,
    console_level: int = DEFAULT_CONSOLE_LEVEL,
    file_level: int = DEFAULT_FILE_LEVEL,
    rotation_when: str = DEFAULT_ROTATION_WHEN,
    rotation_interval: int = DEFAULT_ROTATION_INTERVAL,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    suppress_noisy: bool = True,
    log_to_stdout: bool = True,
) -> logging.Logger:
    """
    Configure the root logger with a console handler and optional rotating file.

    Args:
        name: Logger name and log file prefix
        log_dir: Directory for log files (default: ./logs)
        json_format: Use JSONFormatter instead of ConsoleFormatter
        console_level: Console handler level (default: INFO)
        file_level: File handler level (default: DEBUG)
        rotation_when: When to rotate the file - 'midnight', 'H', 'M'
        rotation_interval: Interval for rotation (default: 1)
        backup_count: Number of rotated files to keep (default: 7)
        suppress_noisy: Quiet down HTTP client loggers
        log_to_stdout: Log to stdout only, skipping the file handler (default: True)

    Returns:
        Configured logger instance
    """
    formatter = JSONFormatter() if json_format else ConsoleFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(console_level, file_level))
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    log_file = None
    if not log_to_stdout:
        log_file = get_log_file_path(log_dir or DEFAULT_LOG_DIR, name)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            log_file,
            when=rotation_when,
            interval=rotation_interval,
            backupCount=backup_count,
            encoding="utf-8",
        )
        if json_format:
            file_formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
            )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    if suppress_noisy:
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    if log_file is None:
        logger.debug("Logging initialized: stdout-only mode")
    else:
        logger.debug(f"Logging initialized: file={log_file}, json={json_format}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Use this instead of logging.getLogger() to ensure consistent naming.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
