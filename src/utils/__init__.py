"""Utility modules for the commit lint configuration tools."""

from .logging import (
    setup_logging,
    get_logger,
    LogContext,
    LintLogger,
    JSONFormatter,
    log_validation_issue,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LogContext",
    "LintLogger",
    "JSONFormatter",
    "log_validation_issue",
]
