"""Наблюдатели за изменениями настроек."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from langset.i18n.language_set import LanguageSet


@runtime_checkable
class SettingsObserver(Protocol):
    """Базовый контракт наблюдателя."""

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        """Обрабатывает событие изменения конкретного ключа."""


class LoggingSettingsObserver:
    """Пишет каждое изменение в журнал."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        self._logger.info(
            "Setting changed: %s.%s (%r -> %r)",
            group,
            key,
            old_value,
            new_value,
        )


class LanguageSetObserver:
    """Переключает язык у LanguageSet при изменении группы ``languages``."""

    def __init__(self, language_set: "LanguageSet") -> None:
        self._language_set = language_set

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        if group != "languages":
            return
        if key == "current" and isinstance(new_value, str):
            self._language_set.set_current_language(new_value)
        elif key == "fallback":
            if new_value is None:
                self._language_set.clear_fallback_language()
            elif isinstance(new_value, str):
                self._language_set.set_fallback_language(new_value)
