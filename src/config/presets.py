"""Known rule presets and resolution of the effective rule set."""

from types import MappingProxyType
from typing import Mapping

from .models import LintConfiguration, RuleSpec
from ..utils.logging import get_logger

logger = get_logger("config.presets")

CONFIG_CONVENTIONAL = "@commitlint/config-conventional"

_CONVENTIONAL_RULES = {
    "body-leading-blank": [1, "always"],
    "body-max-line-length": [2, "always", 100],
    "footer-leading-blank": [1, "always"],
    "footer-max-line-length": [2, "always", 100],
    "header-max-length": [2, "always", 100],
    "header-trim": [2, "always"],
    "subject-case": [2, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]],
    "subject-empty": [2, "never"],
    "subject-full-stop": [2, "never", "."],
    "type-case": [2, "always", "lower-case"],
    "type-empty": [2, "never"],
    "type-enum": [
        2,
        "always",
        ["build", "chore", "ci", "docs", "feat", "fix", "perf", "refactor", "revert", "style", "test"],
    ],
}

PRESETS: Mapping[str, Mapping[str, RuleSpec]] = MappingProxyType({
    CONFIG_CONVENTIONAL: MappingProxyType({
        name: RuleSpec.from_entry(name, entry) for name, entry in _CONVENTIONAL_RULES.items()
    }),
})


def is_known_preset(name: str) -> bool:
    """Check whether a preset's rules are known locally."""
    return name in PRESETS


def resolve_rules(config: LintConfiguration) -> dict[str, RuleSpec]:
    """
    Compute the effective rule set of a configuration.

    Presets are applied in ``extends`` order, then the configuration's own
    rules; a later entry replaces an earlier one with the same rule name.
    Presets that are not known locally contribute no rules.

    Args:
        config: Configuration to resolve

    Returns:
        Mapping of rule name to effective rule spec
    """
    effective: dict[str, RuleSpec] = {}
    for preset in config.extends:
        rules = PRESETS.get(preset)
        if rules is None:
            logger.debug(f"Preset {preset} is not known locally, skipping its rules")
            continue
        effective.update(rules)

    effective.update(config.rules)
    return effective
