"""Встраиваемые строки перевода с переходом на резервный язык.

Пример::

    from langset import LanguageSet, load_language_dir

    translator = LanguageSet("fr", load_language_dir("lang"))
    translator.set_fallback_language("en")
    translator.get_string("tree")
"""

from __future__ import annotations

from langset.exceptions import LanguageError, LangsetError, ParseError, ResourceIOError
from langset.i18n.language_set import LanguageSet
from langset.i18n.loader import (
    identifier_from_filename,
    load_language_dir,
    load_language_file,
    load_packaged_language,
    parse_language,
)
from langset.i18n.models import LanguageResource

__version__ = "0.5.0"

__all__ = [
    "LangsetError",
    "LanguageError",
    "LanguageResource",
    "LanguageSet",
    "ParseError",
    "ResourceIOError",
    "__version__",
    "identifier_from_filename",
    "load_language_dir",
    "load_language_file",
    "load_packaged_language",
    "parse_language",
]
