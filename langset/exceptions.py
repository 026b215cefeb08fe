"""Исключения загрузки языковых ресурсов и подсистемы настроек.

Отсутствие строки при поиске исключением не является: ``get_string``
возвращает ``None``. Исключения возникают только на этапе загрузки
ресурсов и конфигурации, то есть до первого поиска.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGER = logging.getLogger(__name__)


class LangsetError(Exception):
    """Базовое исключение пакета; хранит сообщение и контекст и пишет их в журнал."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class LanguageError(LangsetError):
    """Ошибки, связанные с языковыми ресурсами."""


class ParseError(LanguageError):
    """Некорректный JSON, не-объект на верхнем уровне или не-строковое значение."""

    def __init__(self, source: str, reason: str, *, key: Optional[str] = None) -> None:
        self.source = source
        self.reason = reason
        self.key = key
        location = f" (key '{key}')" if key is not None else ""
        super().__init__(
            f"Cannot parse language resource '{source}'{location}: {reason}",
            context={"source": source, "key": key, "reason": reason},
        )


class ResourceIOError(LanguageError):
    """Файл или каталог с ресурсами не удалось прочитать."""

    def __init__(self, path: Union[Path, str], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"Cannot read language resource '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )


class SettingsError(LangsetError):
    """Ошибки конфигурации."""


class SettingsNotFoundError(SettingsError):
    """Возникает, когда нужный ключ/группа отсутствуют."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Значение настройки не прошло валидацию."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )


class SettingsIOError(SettingsError):
    """Поднимается при ошибках чтения/записи config.json."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"I/O error with settings file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )
