"""
Logging setup

- Log to logs/ispadmin.log with rotation when possible
- Without write permission (e.g. a read-only bind mount in Docker) fall back
  to console output only instead of failing with PermissionError
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ispadmin.core.config import Config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty below WARNING
NOISY_LOGGERS = ("apscheduler",)


def setup_logging(level: str | None = None, logs_dir: str | None = None) -> int:
    """
    Configure the root logger

    Args:
        level: Log level name, Config.LOG_LEVEL by default
        logs_dir: Directory for the log file, Config.LOGS_DIR by default

    Returns:
        Numeric log level that was applied
    """
    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    handlers: list[logging.Handler] = [console_handler]

    log_file_path = Path(logs_dir or Config.LOGS_DIR) / Config.LOG_FILE_NAME
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            str(log_file_path),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(log_formatter)
        handlers.insert(0, file_handler)
    except (PermissionError, OSError) as e:
        sys.stderr.write(f"[logging] WARNING: cannot use file logging at {log_file_path}: {e}\n")

    log_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    logging.getLogger("ispadmin").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if log_level == logging.DEBUG else logging.WARNING)

    return log_level
