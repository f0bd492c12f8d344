"""Errors raised while validating a commit lint configuration."""

from typing import Any


class ConfigError(Exception):
    """Base class for configuration errors, carrying the offending field."""

    def __init__(self, field: str, message: str, value: Any = None):
        self.field = field
        self.message = message
        self.value = value
        full_message = f"{field}: {message}"
        if value is not None:
            full_message += f" (got: {value!r})"
        super().__init__(full_message)


class MalformedConfig(ConfigError):
    """The configuration does not have the expected shape."""


class MalformedPattern(ConfigError):
    """The header pattern does not compile or disagrees with its correspondence."""


class UnknownRuleName(ConfigError):
    """A rule is not recognized by the target rule set."""


class InvalidSeverity(ConfigError):
    """A rule severity is not 0, 1 or 2."""


class InvalidThreshold(ConfigError):
    """A numeric rule option is not a positive integer."""


class DuplicateEnumValue(ConfigError):
    """An enum option list repeats an entry."""


class ConfigValidationError(ConfigError):
    """Raised when loading aborts because of one or more configuration errors."""

    def __init__(self, errors: list[ConfigError]):
        self.errors = errors
        Exception.__init__(
            self,
            f"Configuration validation failed: {'; '.join(str(e) for e in errors)}",
        )
        self.field = errors[0].field if errors else ""
        self.message = str(self)
        self.value = None
