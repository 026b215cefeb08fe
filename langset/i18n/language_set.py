"""Набор языков с поиском строки и переходом на резервный язык."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from langset.i18n.loader import DEFAULT_SUFFIX, load_language_file
from langset.i18n.models import LanguageResource

LOGGER = logging.getLogger(__name__)


class LanguageSet:
    """Реестр таблиц строк по идентификатору языка.

    Строка ищется сначала в текущем языке, затем в резервном (если он
    задан). Ни текущий, ни резервный язык не обязаны присутствовать в
    реестре: незарегистрированный язык просто ничего не находит.

    Пример::

        translator = LanguageSet("fr", load_language_dir("lang"))
        translator.set_fallback_language("en")
        translator.get_string("tree")   # "arbre"
        translator.get_string("roof")   # None
    """

    def __init__(self, current: str, resources: Iterable[LanguageResource] = ()) -> None:
        self._languages: Dict[str, LanguageResource] = {}
        self._current = current
        self._fallback: Optional[str] = None
        for resource in resources:
            self.add_language(resource)

    @property
    def current_language(self) -> str:
        return self._current

    @property
    def fallback_language(self) -> Optional[str]:
        return self._fallback

    @property
    def languages(self) -> Tuple[str, ...]:
        """Идентификаторы зарегистрированных языков."""

        return tuple(self._languages)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return (
            f"LanguageSet(current={self._current!r}, fallback={self._fallback!r}, "
            f"languages={list(self._languages)!r})"
        )

    def add_language(self, resource: LanguageResource) -> None:
        """Регистрирует язык; повторный идентификатор полностью заменяет прежнюю таблицу."""

        if resource.identifier in self._languages:
            LOGGER.debug("Replacing language '%s'", resource.identifier)
        self._languages[resource.identifier] = resource

    def load_language(
        self,
        path: Union[str, Path],
        identifier: Optional[str] = None,
        *,
        suffix: str = DEFAULT_SUFFIX,
    ) -> LanguageResource:
        resource = load_language_file(path, identifier, suffix=suffix)
        self.add_language(resource)
        return resource

    def set_current_language(self, identifier: str) -> None:
        if identifier not in self._languages:
            LOGGER.debug("Current language '%s' is not registered", identifier)
        self._current = identifier

    def set_fallback_language(self, identifier: str) -> None:
        if identifier not in self._languages:
            LOGGER.debug("Fallback language '%s' is not registered", identifier)
        self._fallback = identifier

    def clear_fallback_language(self) -> None:
        self._fallback = None

    def get_from_language(self, identifier: str, key: str) -> Optional[str]:
        """Ищет строку только в указанном языке."""

        resource = self._languages.get(identifier)
        if resource is None:
            return None
        return resource.get(key)

    def get_string(self, key: str) -> Optional[str]:
        """Возвращает строку текущего языка, иначе резервного, иначе None."""

        value = self.get_from_language(self._current, key)
        if value is not None:
            return value
        if self._fallback is not None:
            return self.get_from_language(self._fallback, key)
        return None

    def get_string_or_default(self, key: str, default: str = "") -> str:
        value = self.get_string(key)
        return default if value is None else value
