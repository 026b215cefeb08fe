"""Сообщения командной строки, поставляемые внутри пакета."""

from __future__ import annotations

from functools import lru_cache

from langset.i18n.language_set import LanguageSet
from langset.i18n.loader import load_packaged_language

MESSAGES_PACKAGE = "langset.i18n.strings"
BUILTIN_LANGUAGES = ("en", "ru")
DEFAULT_LANGUAGE = "en"


@lru_cache(maxsize=1)
def _builtin_resources():
    return tuple(
        load_packaged_language(MESSAGES_PACKAGE, f"{language}.lang.json")
        for language in BUILTIN_LANGUAGES
    )


def cli_messages(language: str = DEFAULT_LANGUAGE) -> LanguageSet:
    """Набор сообщений CLI; недостающие переводы берутся из английского."""

    messages = LanguageSet(language, _builtin_resources())
    messages.set_fallback_language(DEFAULT_LANGUAGE)
    return messages


def translate(messages: LanguageSet, key: str, /, **values: str) -> str:
    # Неизвестный ключ показываем как есть, чтобы опечатка была заметна
    text = messages.get_string_or_default(key, key)
    return text.format(**values) if values else text
