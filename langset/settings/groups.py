"""Группы настроек: выбор языков и параметры журналирования.

Группа описывается таблицей ``fields``: имя ключа -> (значение по
умолчанию, валидатор). Значения проверяются при каждой записи.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Tuple

from langset.exceptions import SettingsNotFoundError, SettingsValidationError
from langset.settings.validators import (
    ChoiceValidator,
    IntRangeValidator,
    LanguageIdValidator,
    Nullable,
    PatternValidator,
    TypeValidator,
    Validator,
)

SUFFIX_PATTERN = r"^\.[A-Za-z0-9_.\-]+$"
CONFIG_VERSION = "1.0.0"

FieldSpec = Tuple[Any, Validator]


class SettingsGroup:
    """Значения одной секции config.json."""

    group_name: ClassVar[str] = ""
    fields: ClassVar[Dict[str, FieldSpec]] = {}

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self.reset_to_defaults()

    def keys(self) -> Tuple[str, ...]:
        return tuple(self.fields)

    def get(self, key: str) -> Any:
        self._require(key)
        return self._values[key]

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        _, validator = self._require(key)
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        ok, error = self.validate(key, value)
        if not ok:
            raise SettingsValidationError(f"{self.group_name}.{key}", value, error)
        self._values[key] = value

    def update(self, data: Mapping[str, Any]) -> None:
        """Записывает известные ключи; лишние ключи из файла не мешают загрузке."""

        for key, value in data.items():
            if key in self.fields:
                self.set(key, value)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def reset_to_defaults(self) -> None:
        self._values = {key: default for key, (default, _) in self.fields.items()}

    def _require(self, key: str) -> FieldSpec:
        try:
            return self.fields[key]
        except KeyError:
            raise SettingsNotFoundError(self.group_name, key) from None


class LanguageSettings(SettingsGroup):
    """Текущий и резервный язык, расположение файлов ресурсов.

    ``resource_dir`` задаётся относительно базового каталога приложения,
    если путь не абсолютный.
    """

    group_name = "languages"
    fields = {
        "current": ("en", LanguageIdValidator()),
        "fallback": (None, Nullable(LanguageIdValidator())),
        "resource_dir": ("lang", PatternValidator(r"^.+$")),
        "file_suffix": (".lang.json", PatternValidator(SUFFIX_PATTERN)),
    }


class LoggingSettings(SettingsGroup):
    group_name = "logging"
    fields = {
        "enabled": (True, TypeValidator(bool)),
        "level": ("INFO", ChoiceValidator(["DEBUG", "INFO", "WARNING", "ERROR"])),
        "max_file_size_mb": (10, IntRangeValidator(1, 1000)),
        "max_archived_files": (5, IntRangeValidator(1, 50)),
    }

