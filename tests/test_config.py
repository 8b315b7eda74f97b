"""Tests for TOML configuration loading."""

from __future__ import annotations

import pytest

from shared.config import GuardianConfig


class TestGuardianConfig:
    def test_defaults(self):
        config = GuardianConfig()
        assert config.generator.default_length == 16
        assert (config.generator.min_length, config.generator.max_length) == (8, 128)
        assert config.generator.default_word_count == 5
        assert config.generator.default_separator == "-"
        assert config.generator.exclude_ambiguous is True
        assert config.estimator.advice_min_length == 16
        assert config.audit.significance == 0.01

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "guardian.toml"
        path.write_text(
            '[generator]\ndefault_length = 24\nunknown_key = 1\n\n'
            '[global]\nlog_level = "DEBUG"\n',
            encoding="utf-8",
        )
        config = GuardianConfig.load(path)
        assert config.generator.default_length == 24
        assert config.generator.max_length == 128
        assert config.global_settings.log_level == "DEBUG"
        assert config.audit.samples == 10_000

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GuardianConfig.load(tmp_path / "missing.toml")

