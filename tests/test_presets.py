"""Tests for presets and effective rule resolution."""

from src.config.models import LintConfiguration, ThresholdOption
from src.config.presets import CONFIG_CONVENTIONAL, PRESETS, is_known_preset, resolve_rules
from src.config.validator import ConfigValidator


class TestPresets:
    """Tests for the shipped presets."""

    def test_conventional_preset_is_known(self):
        assert is_known_preset(CONFIG_CONVENTIONAL)
        assert not is_known_preset("@acme/preset")

    def test_conventional_preset_rules_validate(self):
        """The preset's own rules satisfy the validator."""
        config = LintConfiguration(rules=PRESETS[CONFIG_CONVENTIONAL])

        result = ConfigValidator().validate(config)

        assert result.valid, result.errors


class TestResolveRules:
    """Tests for effective rule resolution."""

    def test_local_rules_override_preset(self):
        config = LintConfiguration.from_dict({
            "extends": [CONFIG_CONVENTIONAL],
            "rules": {"header-max-length": [2, "always", 150]},
        })

        effective = resolve_rules(config)

        assert effective["header-max-length"].option == ThresholdOption(150)
        # Inherited from the preset
        assert effective["footer-max-line-length"].option == ThresholdOption(100)
        assert effective["type-empty"].to_entry() == [2, "never"]

    def test_unknown_preset_contributes_nothing(self):
        config = LintConfiguration.from_dict({
            "extends": ["@acme/preset"],
            "rules": {"type-empty": [2, "never"]},
        })

        assert list(resolve_rules(config)) == ["type-empty"]

    def test_no_extends(self):
        config = LintConfiguration.from_dict({"rules": {}})

        assert resolve_rules(config) == {}

    def test_does_not_modify_config(self):
        config = LintConfiguration.from_dict({
            "extends": [CONFIG_CONVENTIONAL],
            "rules": {"type-empty": [2, "never"]},
        })

        resolve_rules(config)

        assert list(config.rules) == ["type-empty"]
