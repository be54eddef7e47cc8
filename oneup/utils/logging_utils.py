"""
Structured logging configuration for the OneUp medical equipment backend.
Provides console and rotating-file logging for monitoring and debugging.
"""
import json
import logging
import logging.config
import os
import sys
from datetime import datetime
from typing import Any, Dict, Optional


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record):
        # Create structured log entry
        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add exception information if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        for key in ("request_id", "endpoint", "method", "status_code", "duration_ms", "resource"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry)


def build_logging_config(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    log_to_file: bool = True,
) -> Dict[str, Any]:
    """Build the dictConfig mapping for the given settings."""
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": sys.stdout
        }
    }
    app_handlers = ["console"]

    if log_to_file and log_dir:
        handlers["file"] = {
            "level": "DEBUG",
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "detailed",
            "filename": os.path.join(log_dir, "application.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5
        }
        handlers["error_file"] = {
            "level": "ERROR",
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": os.path.join(log_dir, "error.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5
        }
        app_handlers += ["file", "error_file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
            },
            "json": {
                "()": JSONFormatter
            }
        },
        "handlers": handlers,
        "loggers": {
            "oneup": {
                "level": level,
                "handlers": app_handlers,
                "propagate": False
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
                "handlers": app_handlers,
                "propagate": False
            },
            "werkzeug": {
                "level": "INFO",
                "handlers": app_handlers,
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["console"]
        }
    }


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None, log_to_file: bool = True):
    """Initialize logging configuration."""
    # Create logs directory if it doesn't exist
    if log_to_file and log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(build_logging_config(level, log_dir, log_to_file))

    logger = logging.getLogger("oneup")
    logger.debug("Logging system initialized")

    return logger


class PerformanceLogger:
    """Logger for performance monitoring."""

    def __init__(self):
        self.logger = logging.getLogger("oneup.performance")

    def log_request_timing(
        self,
        endpoint: str,
        method: str,
        duration_ms: float,
        status_code: int,
        request_id: str = None
    ):
        """Log API request performance."""
        extra = {
            "endpoint": endpoint,
            "method": method,
            "duration_ms": duration_ms,
            "status_code": status_code
        }

        if request_id:
            extra["request_id"] = request_id

        # Determine log level based on performance
        if duration_ms > 5000:  # > 5 seconds
            log_level = "warning"
        elif duration_ms > 2000:  # > 2 seconds
            log_level = "info"
        else:
            log_level = "debug"

        log_method = getattr(self.logger, log_level)
        log_method(
            f"{method} {endpoint} completed in {duration_ms:.2f}ms (status: {status_code})",
            extra=extra
        )


# Global instances
performance_logger = PerformanceLogger()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(f"oneup.{name}")
