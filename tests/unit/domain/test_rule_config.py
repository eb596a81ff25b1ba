"""Unit tests for RuleConfig."""

import logging

import pytest

from log_message_linter.domain.config import RuleConfig


class TestRuleConfig:
    def test_defaults_enable_every_rule(self) -> None:
        config = RuleConfig.default()
        assert config.to_dict() == {
            "enable_lowercase_start": True,
            "enable_no_special_chars": True,
            "enable_sensitive_patterns": True,
            "enable_english_only": True,
        }

    def test_from_mapping_overrides_present_keys_only(self) -> None:
        config = RuleConfig.from_mapping({"enable_english_only": False})
        assert config.enable_english_only is False
        assert config.enable_lowercase_start is True

    def test_from_mapping_accepts_dashed_keys(self) -> None:
        config = RuleConfig.from_mapping({"enable-no-special-chars": False})
        assert config.enable_no_special_chars is False

    def test_unknown_keys_are_ignored(self) -> None:
        assert RuleConfig.from_mapping({"enable_colors": False, 3: True}) == RuleConfig.default()

    def test_non_boolean_value_keeps_default_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="log_message_linter.domain.config"):
            config = RuleConfig.from_mapping({"enable_sensitive_patterns": "no"})
        assert config.enable_sensitive_patterns is True
        assert "enable_sensitive_patterns" in caplog.text

    def test_is_enabled_reads_flag(self) -> None:
        config = RuleConfig(enable_lowercase_start=False)
        assert config.is_enabled("enable_lowercase_start") is False
        assert config.is_enabled("enable_english_only") is True

    def test_config_is_immutable(self) -> None:
        config = RuleConfig.default()
        with pytest.raises(AttributeError):
            config.enable_english_only = False  # type: ignore[misc]
