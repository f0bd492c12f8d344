"""Tests for structured JSON logging."""

import json
import logging
import logging.handlers
import sys
from pathlib import Path

import pytest

from src.utils.logging import (
    JSONFormatter,
    LintContextFilter,
    LintLogger,
    LogContext,
    get_logger,
    log_validation_issue,
    setup_logging,
)


def make_record(msg="Test", args=(), level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_format(self):
        """Test basic JSON formatting."""
        data = json.loads(JSONFormatter().format(make_record("Test message")))

        assert data["message"] == "Test message"
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["timestamp"].endswith("Z")

    def test_format_with_args(self):
        """Test formatting with message arguments."""
        data = json.loads(JSONFormatter().format(make_record("Rules: %d", (8,))))

        assert data["message"] == "Rules: 8"

    def test_format_with_extra_fields(self):
        """Test formatting with static extra fields."""
        formatter = JSONFormatter(extra_fields={"app": "commitlint_config", "version": "1.0"})
        data = json.loads(formatter.format(make_record()))

        assert data["app"] == "commitlint_config"
        assert data["version"] == "1.0"

    def test_format_with_location(self):
        """Test formatting with source location."""
        record = make_record()
        record.funcName = "check"
        data = json.loads(JSONFormatter(include_location=True).format(record))

        assert data["location"]["file"] == "test.py"
        assert data["location"]["line"] == 10
        assert data["location"]["function"] == "check"

    def test_format_without_optional_fields(self):
        """Test formatting without optional fields."""
        formatter = JSONFormatter(
            include_timestamp=False,
            include_level=False,
            include_logger=False,
        )
        data = json.loads(formatter.format(make_record()))

        assert "timestamp" not in data
        assert "level" not in data
        assert "logger" not in data
        assert data["message"] == "Test"

    def test_format_with_exception(self):
        """Test formatting with exception info."""
        try:
            raise ValueError("bad pattern")
        except ValueError:
            exc_info = sys.exc_info()

        record = make_record("Error occurred", level=logging.ERROR, exc_info=exc_info)
        data = json.loads(JSONFormatter().format(record))

        assert "ValueError" in data["exception"]
        assert "bad pattern" in data["exception"]

    def test_unserializable_extra_is_stringified(self):
        """Test that extra values JSON can't encode fall back to str()."""
        record = make_record()
        record.config_path = Path("/tmp/.commitlintrc.yaml")
        data = json.loads(JSONFormatter().format(record))

        assert data["config_path"] == "/tmp/.commitlintrc.yaml"


class TestLintContextFilter:
    """Tests for logging context filter."""

    def setup_method(self):
        LintContextFilter.clear_context()

    def test_set_and_get_context(self):
        """Test setting and getting context."""
        LintContextFilter.set_context(config_file=".commitlintrc.yaml", rule="type-enum")
        context = LintContextFilter.get_context()

        assert context["config_file"] == ".commitlintrc.yaml"
        assert context["rule"] == "type-enum"

    def test_clear_context(self):
        """Test clearing context."""
        LintContextFilter.set_context(rule="type-enum")
        LintContextFilter.clear_context()

        assert LintContextFilter.get_context() == {}

    def test_filter_adds_context_to_record(self):
        """Test that filter adds context to log records."""
        LintContextFilter.set_context(config_file="a.yaml")
        record = make_record()

        assert LintContextFilter().filter(record) is True
        assert record.config_file == "a.yaml"


class TestLogContext:
    """Tests for LogContext context manager."""

    def setup_method(self):
        LintContextFilter.clear_context()

    def test_context_manager_sets_context(self):
        with LogContext(config_file="a.yaml"):
            assert LintContextFilter.get_context()["config_file"] == "a.yaml"

    def test_context_manager_clears_on_exit(self):
        with LogContext(config_file="a.yaml"):
            pass

        assert "config_file" not in LintContextFilter.get_context()

    def test_context_manager_restores_previous(self):
        LintContextFilter.set_context(config_file="outer.yaml")

        with LogContext(config_file="inner.yaml"):
            assert LintContextFilter.get_context()["config_file"] == "inner.yaml"

        assert LintContextFilter.get_context()["config_file"] == "outer.yaml"


class TestLintLogger:
    """Tests for LintLogger class."""

    def test_logger_creation(self):
        lint_logger = LintLogger(name="test_logger", level="DEBUG", console_output=False)
        logger = lint_logger.get_logger()

        assert logger.name == "test_logger"
        assert logger.level == logging.DEBUG
        assert logger.handlers == []

    def test_logger_json_file_output(self, tmp_path):
        """Test logger writes JSON lines to a file."""
        log_file = tmp_path / "logs" / "check.log"
        logger = LintLogger(
            name="json_test",
            log_file=str(log_file),
            json_format=True,
            console_output=False,
        ).get_logger()

        logger.info("JSON test")
        for handler in logger.handlers:
            handler.flush()

        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "JSON test"

    def test_setup_logging_returns_root_logger(self):
        logger = setup_logging(level="WARNING", console_output=False)

        assert logger.name == "commitlint_config"
        assert logger.level == logging.WARNING

    def test_get_logger_is_child(self):
        assert get_logger("cli").name == "commitlint_config.cli"


class TestLogValidationIssue:
    """Tests for the validation issue helper."""

    def setup_method(self):
        self.logger = logging.getLogger("test_validation_issue")
        self.logger.setLevel(logging.DEBUG)
        self.handler = logging.handlers.MemoryHandler(capacity=100)
        self.logger.addHandler(self.handler)

    def teardown_method(self):
        self.handler.close()
        self.logger.removeHandler(self.handler)

    def test_error_issue(self):
        log_validation_issue(
            self.logger, "error", "rules.header-max-length", "threshold must be a positive integer", value=-5
        )

        record = self.handler.buffer[0]
        assert record.levelno == logging.ERROR
        assert record.event_type == "config_validation"
        assert record.field == "rules.header-max-length"
        assert record.value == -5
        assert record.getMessage() == "rules.header-max-length: threshold must be a positive integer"

    @pytest.mark.parametrize("severity", ["warning", "info"])
    def test_non_error_issue_logs_warning(self, severity):
        log_validation_issue(self.logger, severity, "extends", "preset is not known locally")

        assert self.handler.buffer[0].levelno == logging.WARNING
