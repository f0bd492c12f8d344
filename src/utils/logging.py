"""Structured JSON logging for the commit lint configuration tools."""

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

ROOT_LOGGER_NAME = "commitlint_config"

_RECORD_ATTRIBUTES = (
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "taskName",
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def __init__(
        self,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
        include_location: bool = False,
        extra_fields: Optional[dict] = None,
    ):
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level
        self.include_logger = include_logger
        self.include_location = include_location
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: dict[str, Any] = {}

        if self.include_timestamp:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            log_data["timestamp"] = created.strftime("%Y-%m-%dT%H:%M:%S.%fZ")

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_logger:
            log_data["logger"] = record.name

        if self.include_location:
            log_data["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        log_data["message"] = record.getMessage()

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via ``extra=``
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                try:
                    json.dumps(value)
                    log_data[key] = value
                except (TypeError, ValueError):
                    log_data[key] = str(value)

        for key, value in self.extra_fields.items():
            if key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LintContextFilter(logging.Filter):
    """Add context (e.g. the config file being checked) to log records."""

    _context = threading.local()

    @classmethod
    def set_context(cls, **kwargs) -> None:
        """Set context values for current thread."""
        if not hasattr(cls._context, "data"):
            cls._context.data = {}
        cls._context.data.update(kwargs)

    @classmethod
    def clear_context(cls) -> None:
        """Clear context for current thread."""
        cls._context.data = {}

    @classmethod
    def get_context(cls) -> dict:
        """Get current context."""
        if not hasattr(cls._context, "data"):
            cls._context.data = {}
        return cls._context.data.copy()

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.get_context().items():
            setattr(record, key, value)
        return True


class LintLogger:
    """
    Configured logger for the configuration tools.

    Provides structured JSON logging with context support. Output goes to
    stderr so that emitted configuration on stdout stays machine-readable.
    """

    def __init__(
        self,
        name: str = ROOT_LOGGER_NAME,
        level: str = "INFO",
        log_file: Optional[str] = None,
        json_format: bool = True,
        max_bytes: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5,
        console_output: bool = True,
    ):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers = []

        # Handler-level so records from child loggers get the context too
        self.context_filter = LintContextFilter()

        if json_format:
            formatter = JSONFormatter(include_location=True)
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            console_handler.addFilter(self.context_filter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setFormatter(formatter)
            file_handler.addFilter(self.context_filter)
            self.logger.addHandler(file_handler)

    def set_context(self, **kwargs) -> None:
        LintContextFilter.set_context(**kwargs)

    def clear_context(self) -> None:
        LintContextFilter.clear_context()

    def get_logger(self) -> logging.Logger:
        return self.logger


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = True,
    console_output: bool = True,
) -> logging.Logger:
    """
    Set up logging for the configuration tools.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (optional)
        json_format: Use JSON formatting
        console_output: Output to stderr

    Returns:
        Configured logger
    """
    lint_logger = LintLogger(
        name=ROOT_LOGGER_NAME,
        level=level,
        log_file=log_file,
        json_format=json_format,
        console_output=console_output,
    )
    return lint_logger.get_logger()


def get_logger(name: str) -> logging.Logger:
    """Get a child logger under the commitlint_config parent."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogContext:
    """Context manager for scoped logging context."""

    def __init__(self, **kwargs):
        self.context = kwargs
        self.previous_context: dict = {}

    def __enter__(self):
        self.previous_context = LintContextFilter.get_context()
        LintContextFilter.set_context(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        LintContextFilter.clear_context()
        if self.previous_context:
            LintContextFilter.set_context(**self.previous_context)
        return False


def log_validation_issue(
    logger: logging.Logger,
    severity: str,
    field: str,
    message: str,
    value: Any = None,
    **kwargs,
) -> None:
    """Log a configuration error or warning with structured data."""
    level = logging.ERROR if severity == "error" else logging.WARNING
    logger.log(
        level,
        f"{field}: {message}",
        extra={
            "event_type": "config_validation",
            "issue_severity": severity,
            "field": field,
            "value": value,
            **kwargs,
        },
    )
