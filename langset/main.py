"""Командная строка: поиск строк перевода в каталоге языковых файлов.

    langset --dir lang --lang fr --fallback en tree house

Печатает по строке на каждый ключ (пустую строку при промахе). Код
возврата 0, если найдены все ключи, 1 при промахах, 2 при ошибках
загрузки ресурсов или конфигурации.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from langset import __version__
from langset.exceptions import LanguageError, SettingsError
from langset.i18n.language_set import LanguageSet
from langset.i18n.loader import load_language_dir
from langset.i18n.messages import cli_messages, translate
from langset.settings.registry import SettingsRegistry
from langset.utils.logger import configure_logging
from langset.utils.paths import resolve_base_dir, resolve_resource_dir

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_ERROR = 2


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр и загружает config.json (или записывает дефолтный)."""

    registry = SettingsRegistry(config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с LoggingSettings."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт base_dir и подкаталог logs."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Cannot initialize working directory %s: %s", base_dir, exc)
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langset",
        description=translate(cli_messages(), "cli.description"),
    )
    parser.add_argument("keys", nargs="+", metavar="KEY", help="string keys to look up")
    parser.add_argument("--config", type=Path, help="path to config.json")
    parser.add_argument("--dir", dest="resource_dir", help="directory with *.lang.json files")
    parser.add_argument("--lang", dest="current", help="current language identifier")
    parser.add_argument("--fallback", help="fallback language identifier")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_language_set(
    settings: SettingsRegistry,
    base_dir: Path,
    *,
    resource_dir: Optional[str] = None,
    current: Optional[str] = None,
    fallback: Optional[str] = None,
) -> LanguageSet:
    """Загружает каталог ресурсов; аргументы переопределяют значения из настроек."""

    languages = settings.get_group("languages")
    directory = resolve_resource_dir(base_dir, resource_dir or languages.get("resource_dir"))
    resources = load_language_dir(directory, suffix=languages.get("file_suffix"))

    language_set = LanguageSet(current or languages.get("current"), resources)
    fallback_language = fallback or languages.get("fallback")
    if fallback_language:
        language_set.set_fallback_language(fallback_language)
    LOGGER.info("Loaded languages %s from %s", ", ".join(language_set.languages), directory)
    return language_set


def lookup_keys(language_set: LanguageSet, keys: Sequence[str]) -> List[Optional[str]]:
    return [language_set.get_string(key) for key in keys]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Основная точка входа."""

    args = build_parser().parse_args(argv)

    base_dir = resolve_base_dir()
    if not initialize_workdir(base_dir):
        return EXIT_ERROR
    configure_logging(base_dir / "logs", level_name="WARNING")

    messages = cli_messages()
    try:
        settings = initialize_settings(args.config or base_dir / "config.json")
    except SettingsError as exc:
        print(translate(messages, "cli.config_failed", error=exc.message), file=sys.stderr)
        return EXIT_ERROR
    setup_logging_from_settings(base_dir, settings)
    messages = cli_messages(args.current or settings.get_value("languages", "current"))

    try:
        language_set = build_language_set(
            settings,
            base_dir,
            resource_dir=args.resource_dir,
            current=args.current,
            fallback=args.fallback,
        )
    except LanguageError as exc:
        print(translate(messages, "cli.load_failed", error=exc.message), file=sys.stderr)
        return EXIT_ERROR

    values = lookup_keys(language_set, args.keys)
    for key, value in zip(args.keys, values):
        if value is None:
            print(translate(messages, "cli.missing_key", key=key), file=sys.stderr)
        print(value or "")

    found = sum(value is not None for value in values)
    LOGGER.info(translate(messages, "cli.summary", found=str(found), total=str(len(values))))
    return EXIT_OK if found == len(values) else EXIT_MISSING


if __name__ == "__main__":
    sys.exit(main())
