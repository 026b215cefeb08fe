"""Загрузка языковых ресурсов из JSON.

Файл ресурса: плоский JSON-объект, все значения которого строки::

    {"tree": "arbre", "house": "maison"}

Идентификатор языка берётся из имени файла: ``fr.lang.json`` -> ``"fr"``.
Загрузка выполняется один раз при старте, до создания LanguageSet.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

from langset.exceptions import ParseError, ResourceIOError
from langset.i18n.models import LanguageResource
from langset.settings.validators import LanguageIdValidator, StringMappingValidator

LOGGER = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".lang.json"

_MAPPING_VALIDATOR = StringMappingValidator()
_ID_VALIDATOR = LanguageIdValidator()

PathLike = Union[str, Path]


def parse_language(text: str, identifier: str, *, source: Optional[str] = None) -> LanguageResource:
    """Разбирает JSON-текст в LanguageResource.

    Raises:
        ParseError: текст не является JSON, верхний уровень не объект,
            либо одно из значений не строка.
    """

    source_name = source or f"<{identifier}>"
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(source_name, f"invalid JSON: {exc}") from exc

    bad_key, error = _MAPPING_VALIDATOR.first_error(data)
    if error:
        raise ParseError(source_name, error, key=bad_key)

    resource = LanguageResource(identifier, data)
    LOGGER.debug("Loaded language '%s' from %s (%d strings)", identifier, source_name, len(resource))
    return resource


def identifier_from_filename(path: PathLike, suffix: str = DEFAULT_SUFFIX) -> str:
    """``"lang/fr.lang.json"`` -> ``"fr"``."""

    name = Path(path).name
    if not name.endswith(suffix):
        raise ParseError(str(path), f"bad file name: expected suffix '{suffix}'")
    identifier = name[: -len(suffix)]
    is_valid, error = _ID_VALIDATOR.validate(identifier)
    if not is_valid:
        raise ParseError(str(path), f"bad file name: invalid language identifier: {error}")
    return identifier


def load_language_file(
    path: PathLike,
    identifier: Optional[str] = None,
    *,
    suffix: str = DEFAULT_SUFFIX,
) -> LanguageResource:
    """Читает файл ресурса в UTF-8."""

    file_path = Path(path)
    language_id = identifier or identifier_from_filename(file_path, suffix)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceIOError(file_path, str(exc)) from exc
    return parse_language(text, language_id, source=str(file_path))


def load_language_dir(directory: PathLike, *, suffix: str = DEFAULT_SUFFIX) -> List[LanguageResource]:
    """Загружает все ``*<suffix>`` файлы каталога в порядке имён."""

    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise ResourceIOError(dir_path, "not a directory")
    files = sorted(p for p in dir_path.iterdir() if p.is_file() and p.name.endswith(suffix))
    if not files:
        LOGGER.warning("No '*%s' files found in %s", suffix, dir_path)
    return [load_language_file(p, suffix=suffix) for p in files]


def load_packaged_language(
    package: str,
    filename: str,
    identifier: Optional[str] = None,
    *,
    suffix: str = DEFAULT_SUFFIX,
) -> LanguageResource:
    """Читает ресурс, поставляемый внутри установленного пакета.

    Аналог встраивания файла в сборку: языковые файлы кладутся рядом с
    кодом пакета и попадают в дистрибутив как package data.
    """

    language_id = identifier or identifier_from_filename(filename, suffix)
    source = f"{package}/{filename}"
    try:
        text = resources.files(package).joinpath(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ModuleNotFoundError) as exc:
        raise ResourceIOError(source, str(exc)) from exc
    return parse_language(text, language_id, source=source)
