"""Configuration validation for the commit lint engine."""

import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .errors import (
    ConfigError,
    DuplicateEnumValue,
    InvalidSeverity,
    InvalidThreshold,
    MalformedConfig,
    MalformedPattern,
    UnknownRuleName,
)
from .models import Applicability, LintConfiguration, RuleSpec, Severity
from .presets import is_known_preset
from .rules import CASE_NAMES, LOWER_CASE_ENUM_RULES, OptionKind, option_kind
from ..utils.logging import get_logger

logger = get_logger("config.validator")

_SEVERITIES = tuple(s.value for s in Severity)
_APPLICABILITIES = tuple(a.value for a in Applicability)


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    valid: bool
    errors: list[ConfigError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    config: Optional[LintConfiguration] = None

    def __bool__(self) -> bool:
        return self.valid


class ConfigValidator:
    """
    Validates a commit lint configuration before it reaches the engine.

    Unknown rule names are rejected unless ``allow_unknown_rules`` is set,
    in which case they are passed through and reported as warnings.
    """

    def __init__(self, allow_unknown_rules: bool = False):
        self.allow_unknown_rules = allow_unknown_rules

    def validate(self, config: Union[LintConfiguration, dict]) -> ValidationResult:
        """
        Validate a configuration, collecting every problem.

        Args:
            config: Configuration object, or a mapping in the engine's file shape

        Returns:
            ValidationResult with errors and warnings; ``config`` holds the
            unchanged configuration when valid
        """
        errors: list[ConfigError] = []
        warnings: list[str] = []

        if not isinstance(config, LintConfiguration):
            try:
                config = LintConfiguration.from_dict(config)
            except MalformedConfig as e:
                return ValidationResult(valid=False, errors=[e])

        self._validate_extends(config, warnings)
        self._validate_pattern(config, errors)
        for name, spec in config.rules.items():
            self._validate_rule(name, spec, errors, warnings)

        valid = len(errors) == 0
        return ValidationResult(
            valid=valid,
            errors=errors,
            warnings=warnings,
            config=config if valid else None,
        )

    def _validate_extends(self, config: LintConfiguration, warnings: list) -> None:
        for preset in config.extends:
            if not is_known_preset(preset):
                warnings.append(
                    f"extends: preset {preset!r} is not known locally, "
                    f"its rules are left to the lint engine"
                )

    def _validate_pattern(self, config: LintConfiguration, errors: list) -> None:
        """Check that the header pattern compiles and matches its correspondence."""
        options = config.parser_options
        if options is None:
            return

        path = "parserPreset.parserOpts.headerPattern"
        try:
            group_count = options.capture_group_count()
        except re.error as e:
            errors.append(MalformedPattern(path, f"invalid regular expression: {e}", options.header_pattern))
            return

        correspondence = options.header_correspondence
        if correspondence is None:
            return

        corr_path = "parserPreset.parserOpts.headerCorrespondence"
        if len(correspondence) != group_count:
            errors.append(
                MalformedPattern(
                    corr_path,
                    f"names {len(correspondence)} fields but headerPattern "
                    f"has {group_count} capture groups",
                    list(correspondence),
                )
            )

        seen = set()
        for index, name in enumerate(correspondence):
            if not isinstance(name, str) or not name.strip():
                errors.append(MalformedPattern(f"{corr_path}[{index}]", "must be a non-empty string", name))
            elif name in seen:
                errors.append(MalformedPattern(f"{corr_path}[{index}]", "field name is repeated", name))
            else:
                seen.add(name)

    def _validate_rule(
        self,
        name: str,
        spec: RuleSpec,
        errors: list,
        warnings: list,
    ) -> None:
        """Validate a single rule entry."""
        path = f"rules.{name}"
        kind = option_kind(name)

        if kind is None:
            if not self.allow_unknown_rules:
                errors.append(UnknownRuleName(path, "rule is not recognized by the lint engine"))
                return
            warnings.append(f"{path}: unknown rule passed through to the lint engine")

        # bool is an int subclass, but true/false are not severities
        if (
            isinstance(spec.severity, bool)
            or not isinstance(spec.severity, int)
            or spec.severity not in _SEVERITIES
        ):
            errors.append(InvalidSeverity(path, "severity must be 0, 1 or 2", spec.severity))
            return

        # A disabled rule may omit everything after the severity
        if spec.severity == Severity.OFF and spec.applicability is None:
            return

        if spec.applicability not in _APPLICABILITIES:
            errors.append(
                MalformedConfig(path, "applicability must be 'always' or 'never'", spec.applicability)
            )
            return

        if kind is None:
            return

        value = spec.option.value if spec.option is not None else None
        if kind is OptionKind.NONE:
            if spec.option is not None:
                errors.append(MalformedConfig(path, "rule takes no option", value))
            return

        if spec.option is None:
            errors.append(MalformedConfig(path, f"rule requires a {kind.value} option"))
            return

        if kind is OptionKind.THRESHOLD:
            self._validate_threshold(path, value, errors)
        elif kind is OptionKind.ENUM:
            self._validate_enum(name, path, value, errors)
        elif kind is OptionKind.CASE:
            self._validate_case(path, value, errors)
        elif kind is OptionKind.TEXT:
            if not isinstance(value, str):
                errors.append(MalformedConfig(path, "option must be a string", value))

    def _validate_threshold(self, path: str, value: Any, errors: list) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(InvalidThreshold(path, "threshold must be a positive integer", value))

    def _validate_enum(self, name: str, path: str, values: Any, errors: list) -> None:
        if not isinstance(values, tuple):
            errors.append(MalformedConfig(path, "option must be a list of values", values))
            return

        seen = set()
        for index, value in enumerate(values):
            entry_path = f"{path}[{index}]"
            if not isinstance(value, str) or not value:
                errors.append(MalformedConfig(entry_path, "enum value must be a non-empty string", value))
                continue
            if name in LOWER_CASE_ENUM_RULES and value != value.lower():
                errors.append(MalformedConfig(entry_path, "enum value must be lower-case", value))
            if value in seen:
                errors.append(DuplicateEnumValue(entry_path, "enum value is repeated", value))
            seen.add(value)

    def _validate_case(self, path: str, value: Any, errors: list) -> None:
        cases = value if isinstance(value, tuple) else (value,)
        if not cases:
            errors.append(MalformedConfig(path, "option must name at least one case", []))
        for case in cases:
            if case not in CASE_NAMES:
                errors.append(
                    MalformedConfig(path, f"case must be one of {list(CASE_NAMES)}", case)
                )


def validate_config(
    config: Union[LintConfiguration, dict],
    allow_unknown_rules: bool = False,
) -> LintConfiguration:
    """
    Validate a configuration, failing on the first problem.

    Args:
        config: Configuration object, or a mapping in the engine's file shape
        allow_unknown_rules: Pass unknown rules through instead of rejecting them

    Returns:
        The configuration, unchanged

    Raises:
        ConfigError: The first problem found (a MalformedPattern,
            UnknownRuleName, InvalidSeverity, InvalidThreshold,
            DuplicateEnumValue or MalformedConfig)
    """
    result = ConfigValidator(allow_unknown_rules=allow_unknown_rules).validate(config)
    if not result.valid:
        raise result.errors[0]

    for warning in result.warnings:
        logger.warning(f"Config warning: {warning}")

    return result.config
