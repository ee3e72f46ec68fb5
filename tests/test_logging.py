from __future__ import annotations

import json

import structlog

from appcommon_core.config import get_settings, reset_settings_cache
from appcommon_core.logging import get_logger
from appcommon_locale.strings import localized_string, reset_translations_cache


def setup_function() -> None:
    reset_settings_cache()
    reset_translations_cache()
    structlog.reset_defaults()


def teardown_function() -> None:
    reset_settings_cache()
    reset_translations_cache()
    structlog.reset_defaults()


def test_host_structlog_configuration_survives_settings_load(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "appcommon.json"
    config_path.write_text(
        json.dumps({"locale_dir": str(tmp_path / "locale")}), encoding="utf-8"
    )
    monkeypatch.setenv("APPCOMMON_CONFIG_PATH", str(config_path))
    host_processors = [structlog.processors.KeyValueRenderer()]
    structlog.configure(processors=host_processors)

    get_settings()
    assert localized_string("Hello") == "Hello"
    assert structlog.get_config()["processors"] == host_processors


def test_get_logger_does_not_configure_structlog() -> None:
    assert not structlog.is_configured()
    get_logger("appcommon.test")
    assert not structlog.is_configured()
