"""Тесты иерархии исключений."""

from __future__ import annotations

from pathlib import Path

import pytest

from langset.exceptions import (
    LangsetError,
    LanguageError,
    ParseError,
    ResourceIOError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)


class TestParseError:
    def test_message_and_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = ParseError("fr.lang.json", "Expected string value, got number", key="tree")
        assert isinstance(error, LanguageError)
        assert error.context == {
            "source": "fr.lang.json",
            "key": "tree",
            "reason": "Expected string value, got number",
        }
        assert "fr.lang.json" in str(error)
        assert "'tree'" in caplog.text

    def test_without_key(self) -> None:
        error = ParseError("<en>", "invalid JSON")
        assert str(error) == "Cannot parse language resource '<en>': invalid JSON"


class TestResourceIOError:
    def test_contains_path(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("ERROR")
        error = ResourceIOError(tmp_path / "en.lang.json", "permission denied")
        assert error.path == tmp_path / "en.lang.json"
        assert "permission denied" in caplog.text


class TestSettingsErrors:
    def test_not_found_message(self) -> None:
        error = SettingsNotFoundError("languages", "current")
        assert str(error) == "Setting 'languages.current' not found"
        assert isinstance(error, LangsetError)
        assert not isinstance(error, LanguageError)

    def test_validation_fields(self) -> None:
        error = SettingsValidationError("logging.level", "LOUD", "unknown level")
        assert (error.key, error.value, error.reason) == ("logging.level", "LOUD", "unknown level")
        assert "unknown level" in str(error)

    def test_io_contains_path(self, tmp_path: Path) -> None:
        error = SettingsIOError(tmp_path / "config.json", "permission denied")
        assert str(tmp_path / "config.json") in str(error)
