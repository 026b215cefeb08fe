"""Тесты групп настроек."""

from __future__ import annotations

import pytest

from langset.exceptions import SettingsNotFoundError, SettingsValidationError
from langset.settings.groups import LanguageSettings, LoggingSettings


def test_language_settings_defaults() -> None:
    settings = LanguageSettings()
    assert settings.get("current") == "en"
    assert settings.get("fallback") is None
    assert settings.get("file_suffix") == ".lang.json"


def test_language_settings_set_and_reset() -> None:
    settings = LanguageSettings()
    settings.set("current", "fr")
    settings.set("fallback", "en")
    assert settings.to_dict()["fallback"] == "en"
    settings.reset_to_defaults()
    assert settings.get("current") == "en"


def test_language_settings_invalid_identifier() -> None:
    settings = LanguageSettings()
    with pytest.raises(SettingsValidationError) as info:
        settings.set("current", "fr/../../etc")
    assert info.value.key == "languages.current"


def test_language_settings_invalid_suffix() -> None:
    with pytest.raises(SettingsValidationError):
        LanguageSettings().set("file_suffix", "json")


def test_unknown_key_raises() -> None:
    settings = LanguageSettings()
    with pytest.raises(SettingsNotFoundError):
        settings.get("missing")
    with pytest.raises(SettingsNotFoundError):
        settings.set("missing", 1)


def test_update_ignores_unknown_keys() -> None:
    settings = LanguageSettings()
    settings.update({"current": "ru", "extra": True})
    assert settings.get("current") == "ru"
    assert "extra" not in settings.keys()


def test_logging_settings_ranges() -> None:
    settings = LoggingSettings()
    settings.set("max_file_size_mb", 100)
    with pytest.raises(SettingsValidationError):
        settings.set("max_archived_files", 0)
    with pytest.raises(SettingsValidationError):
        settings.set("level", "TRACE")
