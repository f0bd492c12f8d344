"""Commit lint configuration model and validation."""

from .errors import (
    ConfigError,
    ConfigValidationError,
    DuplicateEnumValue,
    InvalidSeverity,
    InvalidThreshold,
    MalformedConfig,
    MalformedPattern,
    UnknownRuleName,
)
from .loader import CONFIG_FILENAMES, find_config_file, load_config, read_config_file
from .models import (
    Applicability,
    CaseOption,
    EnumOption,
    LintConfiguration,
    ParserOptions,
    RawOption,
    RuleSpec,
    Severity,
    TextOption,
    ThresholdOption,
)
from .presets import CONFIG_CONVENTIONAL, PRESETS, resolve_rules
from .validator import ConfigValidator, ValidationResult, validate_config

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DuplicateEnumValue",
    "InvalidSeverity",
    "InvalidThreshold",
    "MalformedConfig",
    "MalformedPattern",
    "UnknownRuleName",
    "CONFIG_FILENAMES",
    "find_config_file",
    "load_config",
    "read_config_file",
    "Applicability",
    "CaseOption",
    "EnumOption",
    "LintConfiguration",
    "ParserOptions",
    "RawOption",
    "RuleSpec",
    "Severity",
    "TextOption",
    "ThresholdOption",
    "CONFIG_CONVENTIONAL",
    "PRESETS",
    "resolve_rules",
    "ConfigValidator",
    "ValidationResult",
    "validate_config",
]
