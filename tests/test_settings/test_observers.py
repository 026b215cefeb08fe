"""Проверки наблюдателей за настройками."""

from __future__ import annotations

from pathlib import Path

import pytest

from langset.i18n.language_set import LanguageSet
from langset.i18n.models import LanguageResource
from langset.settings.observers import (
    LanguageSetObserver,
    LoggingSettingsObserver,
    SettingsObserver,
)
from langset.settings.registry import SettingsRegistry


@pytest.fixture
def registry(tmp_path: Path) -> SettingsRegistry:
    return SettingsRegistry(tmp_path / "config.json")


@pytest.fixture
def language_set() -> LanguageSet:
    return LanguageSet(
        "en",
        [
            LanguageResource("en", {"tree": "tree", "house": "house"}),
            LanguageResource("fr", {"tree": "arbre"}),
        ],
    )


def test_observers_match_protocol(language_set: LanguageSet) -> None:
    assert isinstance(LoggingSettingsObserver(), SettingsObserver)
    assert isinstance(LanguageSetObserver(language_set), SettingsObserver)


def test_logging_observer_writes_change(
    registry: SettingsRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")
    registry.register_observer(LoggingSettingsObserver())
    registry.set_value("languages", "current", "fr")
    assert "languages.current" in caplog.text


def test_language_set_follows_settings(
    registry: SettingsRegistry, language_set: LanguageSet
) -> None:
    registry.register_observer(LanguageSetObserver(language_set))

    registry.set_value("languages", "current", "fr")
    registry.set_value("languages", "fallback", "en")
    assert language_set.get_string("tree") == "arbre"
    assert language_set.get_string("house") == "house"

    registry.set_value("languages", "fallback", None)
    assert language_set.fallback_language is None
    assert language_set.get_string("house") is None


def test_language_set_ignores_other_groups(
    registry: SettingsRegistry, language_set: LanguageSet
) -> None:
    registry.register_observer(LanguageSetObserver(language_set))
    registry.set_value("logging", "level", "DEBUG")
    assert language_set.current_language == "en"
