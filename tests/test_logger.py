"""Tests for the structured logger."""

from __future__ import annotations

import json

from shared.config import GuardianConfig
from shared.logger import GuardianLogger, from_config


def test_component_from_name():
    assert GuardianLogger("guardian.engine", console_output=False).component == "engine"


def test_json_file_records(tmp_path):
    path = tmp_path / "logs" / "guardian.log"
    log = GuardianLogger(
        "guardian.test_json", log_file=path, json_logs=True, console_output=False
    )
    with log.operation("generate_password"):
        log.info("Password generated", length=16)

    record = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "Password generated"
    assert record["level"] == "INFO"
    assert record["component"] == "test_json"
    assert record["operation"] == "generate_password"
    assert record["context"] == {"length": 16}


def test_level_filtering(tmp_path):
    path = tmp_path / "guardian.log"
    log = GuardianLogger(
        "guardian.test_level", log_level="WARNING", log_file=path, console_output=False
    )
    log.info("hidden")
    log.warning("shown")
    text = path.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text


def test_debug_switch_overrides_level():
    config = GuardianConfig()
    config.global_settings.debug = True
    log = from_config("guardian.test_debug", config)
    assert log.underlying.level == 10


def test_engine_logs_never_contain_secrets(tmp_path):
    from guardian.core.engine import GuardianEngine

    path = tmp_path / "engine.log"
    config = GuardianConfig()
    config.global_settings.log_level = "DEBUG"
    config.global_settings.log_file = str(path)
    engine = GuardianEngine(config)

    response = engine.handle("generatePassword", {"length": "32"})
    engine.analyze_secret("MySecretValue!42")

    text = path.read_text(encoding="utf-8")
    assert response.password not in text
    assert "MySecretValue!42" not in text
    assert "Password generated" in text
