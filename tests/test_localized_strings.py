from __future__ import annotations

import gettext
import json
import struct

from appcommon_core.config import reset_settings_cache
from appcommon_locale.strings import load_translations, localized_string, reset_translations_cache


class _CatalogTranslations(gettext.NullTranslations):
    def __init__(self, catalog: dict[str, str]) -> None:
        super().__init__()
        self._catalog = catalog

    def gettext(self, message: str) -> str:
        return self._catalog.get(message, message)


def setup_function() -> None:
    reset_settings_cache()
    reset_translations_cache()


def teardown_function() -> None:
    reset_settings_cache()
    reset_translations_cache()


def _write_catalog(locale_dir, language: str, domain: str, catalog: dict[str, str]) -> None:
    keys = sorted(catalog)
    ids = b""
    strs = b""
    entries: list[tuple[int, int, int, int]] = []
    for key in keys:
        encoded_key = key.encode("ascii")
        encoded_value = catalog[key].encode("ascii")
        entries.append((len(ids), len(encoded_key), len(strs), len(encoded_value)))
        ids += encoded_key + b"\0"
        strs += encoded_value + b"\0"
    key_start = 7 * 4 + 16 * len(keys)
    value_start = key_start + len(ids)
    key_table: list[int] = []
    value_table: list[int] = []
    for id_offset, id_length, str_offset, str_length in entries:
        key_table += [id_length, id_offset + key_start]
        value_table += [str_length, str_offset + value_start]
    header = struct.pack(
        "<7I", 0x950412DE, 0, len(keys), 7 * 4, 7 * 4 + 8 * len(keys), 0, 0
    )
    table = struct.pack(f"<{len(key_table) + len(value_table)}I", *key_table, *value_table)
    target = locale_dir / language / "LC_MESSAGES"
    target.mkdir(parents=True, exist_ok=True)
    (target / f"{domain}.mo").write_bytes(header + table + ids + strs)


def _write_settings(tmp_path, monkeypatch, *, text_domain: str) -> None:
    config_path = tmp_path / "appcommon.json"
    config_path.write_text(
        json.dumps({"locale_dir": str(tmp_path / "locale"), "text_domain": text_domain}),
        encoding="utf-8",
    )
    monkeypatch.setenv("APPCOMMON_CONFIG_PATH", str(config_path))


def _use_empty_locale_dir(tmp_path, monkeypatch) -> None:
    _write_settings(tmp_path, monkeypatch, text_domain="app")


def test_localized_string_uses_given_catalog() -> None:
    catalog = _CatalogTranslations({"greeting": "Hallo ${name}!"})
    assert localized_string("greeting", translations=catalog) == "Hallo ${name}!"
    assert localized_string("greeting", {"name": "Ana"}, translations=catalog) == "Hallo Ana!"
    assert localized_string("missing", translations=catalog) == "missing"


def test_localized_string_falls_back_to_key_without_catalog(tmp_path, monkeypatch) -> None:
    _use_empty_locale_dir(tmp_path, monkeypatch)
    assert localized_string("Hello ${name}", {"name": "Ana"}) == "Hello Ana"
    assert localized_string("Plain") == "Plain"


def test_load_translations_returns_identity_catalog_when_missing(tmp_path, monkeypatch) -> None:
    _use_empty_locale_dir(tmp_path, monkeypatch)
    translations = load_translations(["de_CH"])
    assert isinstance(translations, gettext.NullTranslations)
    assert translations.gettext("key") == "key"


def test_catalog_follows_settings_after_settings_reset(tmp_path, monkeypatch) -> None:
    _write_catalog(tmp_path / "locale", "de", "app", {"Hello": "Hallo"})
    _write_settings(tmp_path, monkeypatch, text_domain="app")
    assert load_translations(["de"]).gettext("Hello") == "Hallo"
    assert load_translations(["de"]) is load_translations(["de"])

    _write_settings(tmp_path, monkeypatch, text_domain="other")
    reset_settings_cache()
    assert load_translations(["de"]).gettext("Hello") == "Hello"

    _write_settings(tmp_path, monkeypatch, text_domain="app")
    reset_settings_cache()
    assert load_translations(["de"]).gettext("Hello") == "Hallo"
