"""
Centralized logging configuration for condsql.

Loggers live under the ``condsql`` namespace. Nothing is configured on
import; applications that want condsql's console/file handlers call
``setup_logging()`` themselves.
"""

import functools
import logging
import logging.config
import os
import sys
import time
from typing import Any, Dict


def get_log_level() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.getenv("CONDSQL_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Get log format based on environment."""
    env = os.getenv("CONDSQL_ENV", "development").lower()

    if env == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    return "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Get the logging configuration dictionary."""
    log_level = get_log_level()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": get_log_format(),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "condsql": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    log_file = os.getenv("CONDSQL_LOG_FILE")
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["condsql"]["handlers"].append("file")

    return config


def setup_logging() -> None:
    """Setup logging configuration for the application."""
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger("condsql.logging")
    logger.info("Logging configured with level: %s", get_log_level())

    if os.getenv("CONDSQL_LOG_FILE"):
        logger.info("File logging enabled: %s", os.getenv("CONDSQL_LOG_FILE"))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``condsql`` hierarchy.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance under the ``condsql`` hierarchy
    """
    if not name.startswith("condsql"):
        if name == "__main__":
            name = "condsql.main"
        else:
            name = f"condsql.{name}"

    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator to log timing of an operation.

    Successful calls are logged at DEBUG; failures at ERROR, after which the
    exception is re-raised unchanged.

    Args:
        logger: Logger instance to use
        operation: Description of the operation being timed
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error("Operation '%s' failed after %.3fs: %s", operation, duration, str(e))
                raise
            duration = time.perf_counter() - start_time
            logger.debug("Operation '%s' completed in %.3fs", operation, duration)
            return result

        return wrapper

    return decorator
