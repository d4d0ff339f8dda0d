"""
Logging configuration for the marketplace services.
Provides structured JSON logging for production and formatted logs for development.
"""
import json
import logging
import sys
from typing import Any, Dict, Optional, Union

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
}


class JsonFormatter(logging.Formatter):
    """Formatter that outputs JSON strings after parsing the log record."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "service": self.service_name,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def configure_logging(
    service_name: str,
    log_level: Union[int, str] = logging.INFO,
    use_json: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        service_name: Name of the service for identification in logs
        log_level: The logging level, as a number or a level name
        use_json: Whether to use JSON formatting (default: True)
        log_file: Optional file path to write logs to
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    if use_json:
        formatter = JsonFormatter(service_name)
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # SQLAlchemy is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter for adding extra fields to logs."""

    def __init__(self, logger, extra=None):
        """Initialize with a logger and optional extra dict."""
        super().__init__(logger, extra or {})

    def process(self, msg, kwargs):
        """Merge the adapter context into the per-call ``extra`` dict."""
        kwargs.setdefault("extra", {}).update(self.extra)
        return msg, kwargs


def get_logger(name: str, extra: Optional[Dict[str, Any]] = None) -> LoggerAdapter:
    """
    Get a configured logger with optional extra context.

    Args:
        name: Name of the logger
        extra: Extra fields to include in log records

    Returns:
        A configured logger adapter
    """
    return LoggerAdapter(logging.getLogger(name), extra or {})
