"""
Logging configuration module for the CandleLens API.

This module provides the logging setup used across the service:

- Colored console output in development (ENV=dev)
- Structured JSON lines everywhere else
- Deduplication of root stream handlers to prevent duplicate log lines
- Performance timing decorators for development/QA environments
"""

import logging
import sys
import os
import json
import time
from typing import Optional, Dict, Any, Callable
from functools import wraps
from datetime import datetime, timezone


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for log levels and logger names in development environments."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[1;31m", # Bold Red
    }
    GREY = "\033[90m"  # Grey for logger names
    RESET = "\033[0m"

    def formatTime(self, record, datefmt=None):
        """Override to include milliseconds in the timestamp."""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        s = f"{s},{int(record.msecs):03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colored log level and logger name."""
        original_levelname = record.levelname
        original_name = record.name

        log_color = self.COLORS.get(record.levelname, "")
        if log_color:
            record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        record.name = f"{self.GREY}{record.name}{self.RESET}"

        formatted = super().format(record)

        # Restore original values for next handler
        record.levelname = original_levelname
        record.name = original_name

        return formatted


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging in production environments."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "session"):
            log_data["session"] = record.session

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, ensure_ascii=False)


def _get_log_level() -> str:
    """
    Get log level from environment variable.

    Returns:
        str: Logging level name (defaults to INFO if not set)
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def _get_environment() -> str:
    """
    Get current environment from ENV variable.

    Returns:
        str: Environment name (dev, qa, prod, etc.)
    """
    return os.getenv("ENV", "prod").lower()


def build_formatter(env: Optional[str] = None) -> logging.Formatter:
    """Colored text in dev, JSON lines otherwise."""
    if (env or _get_environment()) == "dev":
        return ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return JSONFormatter()


def setup_logging() -> None:
    """
    Configure the root logger once at application startup.

    1. Keeps only the FIRST console StreamHandler on the root logger (adds one if missing)
    2. Applies the environment formatter to it
    3. Re-adds non-stream handlers (e.g., FileHandlers) untouched

    Safe to call more than once; repeated calls never stack handlers.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, _get_log_level(), logging.INFO))

    stream_handlers = []
    other_handlers = []

    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            stream_handlers.append(handler)
        else:
            other_handlers.append(handler)

    root_logger.handlers.clear()

    console = stream_handlers[0] if stream_handlers else logging.StreamHandler(sys.stdout)
    console.setFormatter(build_formatter())
    root_logger.addHandler(console)

    for handler in other_handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the specified name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Application started")
    """
    return logging.getLogger(name)


def log_execution_time(func: Optional[Callable] = None, *, level: str = "DEBUG") -> Callable:
    """
    Decorator to log function execution time.

    Only active in dev and qa environments for performance monitoring.
    In production, this decorator does nothing to avoid overhead.

    Args:
        func: Function to decorate
        level: Log level for timing message (default: DEBUG)

    Returns:
        Callable: Decorated function

    Example:
        >>> @log_execution_time
        ... def normalize():
        ...     pass

        >>> @log_execution_time(level="INFO")
        ... def analyze():
        ...     pass
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            env = _get_environment()

            if env not in ("dev", "qa"):
                return f(*args, **kwargs)

            logger = get_logger(f.__module__)
            start_time = time.perf_counter()

            try:
                return f(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                log_method = getattr(logger, level.lower(), logger.debug)
                log_method(
                    f"Function '{f.__name__}' executed in {elapsed:.4f}s"
                )

        return wrapper

    # Allow usage with or without parentheses
    if func is None:
        return decorator
    return decorator(func)
