"""Immutable data model for commit lint configurations."""

import copy
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .errors import MalformedConfig
from .pattern import capture_group_count as count_capture_groups
from .rules import OptionKind, option_kind


class Severity(IntEnum):
    """Rule severity levels."""
    OFF = 0
    WARNING = 1
    ERROR = 2


class Applicability(str, Enum):
    """Whether a rule condition must always or never hold."""
    ALWAYS = "always"
    NEVER = "never"


def _freeze(value: Any) -> Any:
    """Turn lists into tuples so option values stay read-only."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class _OptionValue:
    value: Any

    def __post_init__(self):
        object.__setattr__(self, "value", _freeze(self.value))

    def to_value(self) -> Any:
        return _thaw(self.value)


@dataclass(frozen=True)
class EnumOption(_OptionValue):
    """List of allowed (or forbidden) values, e.g. for type-enum."""


@dataclass(frozen=True)
class CaseOption(_OptionValue):
    """A case name or a list of case names."""


@dataclass(frozen=True)
class ThresholdOption(_OptionValue):
    """A length limit."""


@dataclass(frozen=True)
class TextOption(_OptionValue):
    """A literal string such as a full stop character or a trailer."""


@dataclass(frozen=True)
class RawOption(_OptionValue):
    """Option of a rule the catalog does not know; forwarded untouched."""


RuleOption = Union[EnumOption, CaseOption, ThresholdOption, TextOption, RawOption]

_OPTION_TYPES = {
    OptionKind.ENUM: EnumOption,
    OptionKind.CASE: CaseOption,
    OptionKind.THRESHOLD: ThresholdOption,
    OptionKind.TEXT: TextOption,
    OptionKind.NONE: RawOption,
}


def build_option(rule_name: str, value: Any) -> RuleOption:
    """Wrap a raw option value in the variant selected by the rule name."""
    kind = option_kind(rule_name)
    option_type = _OPTION_TYPES[kind] if kind is not None else RawOption
    return option_type(value)


@dataclass(frozen=True)
class RuleSpec:
    """
    A single rule entry: ``[severity, applicability, option]``.

    Values are kept as given so that the validator can report bad ones.
    """
    severity: Any
    applicability: Any = None
    option: Optional[RuleOption] = None

    @classmethod
    def from_entry(cls, name: str, entry: Any) -> "RuleSpec":
        """Build a rule spec from its list form."""
        if not isinstance(entry, (list, tuple)) or not 1 <= len(entry) <= 3:
            raise MalformedConfig(
                f"rules.{name}",
                "rule must be a list of [severity, applicability, option]",
                entry,
            )

        severity = entry[0]
        applicability = entry[1] if len(entry) > 1 else None
        option = build_option(name, entry[2]) if len(entry) > 2 else None
        return cls(severity=severity, applicability=applicability, option=option)

    def to_entry(self) -> list:
        """Convert back to the list form the lint engine reads."""
        severity = int(self.severity) if isinstance(self.severity, Severity) else self.severity
        entry: list = [severity]
        if self.applicability is not None:
            applicability = self.applicability
            if isinstance(applicability, Applicability):
                applicability = applicability.value
            entry.append(applicability)
        if self.option is not None:
            entry.append(self.option.to_value())
        return entry


@dataclass(frozen=True)
class ParserOptions:
    """Header parsing options handed to the engine's parser preset."""
    header_pattern: str
    header_correspondence: Optional[tuple[str, ...]] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "extra", MappingProxyType(copy.deepcopy(dict(self.extra))))

    def capture_group_count(self) -> int:
        """
        Count the capture groups of the header pattern.

        Raises:
            re.error: If the pattern is not a valid JavaScript regular expression
        """
        return count_capture_groups(self.header_pattern)

    @classmethod
    def from_dict(cls, data: Any) -> "ParserOptions":
        """Build parser options from a ``parserOpts`` mapping."""
        if not isinstance(data, Mapping):
            raise MalformedConfig("parserPreset.parserOpts", "must be a mapping", data)

        pattern = data.get("headerPattern")
        if not isinstance(pattern, str):
            raise MalformedConfig(
                "parserPreset.parserOpts.headerPattern",
                "must be a regular expression string",
                pattern,
            )

        correspondence = data.get("headerCorrespondence")
        if correspondence is not None:
            if not isinstance(correspondence, (list, tuple)):
                raise MalformedConfig(
                    "parserPreset.parserOpts.headerCorrespondence",
                    "must be a list of field names",
                    correspondence,
                )
            correspondence = tuple(correspondence)

        extra = {
            key: value
            for key, value in data.items()
            if key not in ("headerPattern", "headerCorrespondence")
        }
        return cls(header_pattern=pattern, header_correspondence=correspondence, extra=extra)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"headerPattern": self.header_pattern}
        if self.header_correspondence is not None:
            data["headerCorrespondence"] = list(self.header_correspondence)
        data.update(copy.deepcopy(dict(self.extra)))
        return data


@dataclass(frozen=True)
class LintConfiguration:
    """
    Commit lint configuration.

    Built once (from a literal or a config file) and read-only afterwards.
    Keys the model does not interpret, such as ``ignores`` or ``helpUrl``,
    are kept in ``extra`` and forwarded to the engine unchanged.
    """
    extends: tuple[str, ...] = ()
    parser_options: Optional[ParserOptions] = None
    rules: Mapping[str, RuleSpec] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        extends = (self.extends,) if isinstance(self.extends, str) else self.extends
        object.__setattr__(self, "extends", tuple(extends))
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        object.__setattr__(self, "extra", MappingProxyType(copy.deepcopy(dict(self.extra))))

    @property
    def header_pattern(self) -> Optional[str]:
        return self.parser_options.header_pattern if self.parser_options else None

    @property
    def header_correspondence(self) -> Optional[tuple[str, ...]]:
        return self.parser_options.header_correspondence if self.parser_options else None

    @classmethod
    def from_dict(cls, data: Any) -> "LintConfiguration":
        """
        Build a configuration from the engine's file shape.

        Args:
            data: Mapping with ``extends``, ``parserPreset`` and ``rules`` keys

        Returns:
            LintConfiguration

        Raises:
            MalformedConfig: If the data does not have the expected structure
        """
        if not isinstance(data, Mapping):
            raise MalformedConfig("<root>", "configuration must be a mapping", data)

        extends = data.get("extends", ())
        if isinstance(extends, str):
            extends = (extends,)
        if not isinstance(extends, (list, tuple)):
            raise MalformedConfig("extends", "must be a list of preset names", extends)
        for index, preset in enumerate(extends):
            if not isinstance(preset, str) or not preset.strip():
                raise MalformedConfig(f"extends[{index}]", "must be a non-empty string", preset)

        parser_options = None
        parser_preset = data.get("parserPreset")
        if parser_preset is not None:
            if not isinstance(parser_preset, Mapping):
                raise MalformedConfig("parserPreset", "must be a mapping", parser_preset)
            if "parserOpts" in parser_preset:
                parser_options = ParserOptions.from_dict(parser_preset["parserOpts"])

        raw_rules = data.get("rules") or {}
        if not isinstance(raw_rules, Mapping):
            raise MalformedConfig("rules", "must be a mapping of rule name to rule", raw_rules)
        rules = {
            str(name): RuleSpec.from_entry(str(name), entry)
            for name, entry in raw_rules.items()
        }

        extra = {
            key: value
            for key, value in data.items()
            if key not in ("extends", "parserPreset", "rules")
        }
        if isinstance(parser_preset, Mapping):
            preset_extra = {k: v for k, v in parser_preset.items() if k != "parserOpts"}
            if preset_extra:
                extra["parserPreset"] = preset_extra

        return cls(
            extends=tuple(extends),
            parser_options=parser_options,
            rules=rules,
            extra=extra,
        )

    def to_dict(self) -> dict:
        """Convert to the shape the lint engine reads."""
        extra = copy.deepcopy(dict(self.extra))
        data: dict[str, Any] = {}
        if self.extends:
            data["extends"] = list(self.extends)

        parser_preset = extra.pop("parserPreset", {})
        if self.parser_options is not None:
            parser_preset["parserOpts"] = self.parser_options.to_dict()
        if parser_preset:
            data["parserPreset"] = parser_preset

        data["rules"] = {name: spec.to_entry() for name, spec in self.rules.items()}
        data.update(extra)
        return data
