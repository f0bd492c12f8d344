"""Catalog of rules understood by the commit lint engine."""

from enum import Enum
from typing import Optional


class OptionKind(Enum):
    """Kind of option value a rule takes."""
    NONE = "none"
    ENUM = "enum"
    CASE = "case"
    THRESHOLD = "threshold"
    TEXT = "text"


CASE_NAMES = (
    "lower-case",
    "upper-case",
    "camel-case",
    "kebab-case",
    "pascal-case",
    "sentence-case",
    "snake-case",
    "start-case",
)

# Rule name -> option kind
RULE_CATALOG: dict[str, OptionKind] = {
    "body-case": OptionKind.CASE,
    "body-empty": OptionKind.NONE,
    "body-full-stop": OptionKind.TEXT,
    "body-leading-blank": OptionKind.NONE,
    "body-max-length": OptionKind.THRESHOLD,
    "body-max-line-length": OptionKind.THRESHOLD,
    "body-min-length": OptionKind.THRESHOLD,
    "footer-empty": OptionKind.NONE,
    "footer-leading-blank": OptionKind.NONE,
    "footer-max-length": OptionKind.THRESHOLD,
    "footer-max-line-length": OptionKind.THRESHOLD,
    "footer-min-length": OptionKind.THRESHOLD,
    "header-case": OptionKind.CASE,
    "header-full-stop": OptionKind.TEXT,
    "header-max-length": OptionKind.THRESHOLD,
    "header-min-length": OptionKind.THRESHOLD,
    "header-trim": OptionKind.NONE,
    "references-empty": OptionKind.NONE,
    "scope-case": OptionKind.CASE,
    "scope-empty": OptionKind.NONE,
    "scope-enum": OptionKind.ENUM,
    "scope-max-length": OptionKind.THRESHOLD,
    "scope-min-length": OptionKind.THRESHOLD,
    "signed-off-by": OptionKind.TEXT,
    "subject-case": OptionKind.CASE,
    "subject-empty": OptionKind.NONE,
    "subject-exclamation-mark": OptionKind.NONE,
    "subject-full-stop": OptionKind.TEXT,
    "subject-max-length": OptionKind.THRESHOLD,
    "subject-min-length": OptionKind.THRESHOLD,
    "trailer-exists": OptionKind.TEXT,
    "type-case": OptionKind.CASE,
    "type-empty": OptionKind.NONE,
    "type-enum": OptionKind.ENUM,
    "type-max-length": OptionKind.THRESHOLD,
    "type-min-length": OptionKind.THRESHOLD,
}

# Enum rules whose entries must also be lower-case
LOWER_CASE_ENUM_RULES = frozenset({"type-enum"})


def is_known_rule(name: str) -> bool:
    """Check whether a rule name is part of the catalog."""
    return name in RULE_CATALOG


def option_kind(name: str) -> Optional[OptionKind]:
    """Get the option kind for a rule, or None if the rule is unknown."""
    return RULE_CATALOG.get(name)
