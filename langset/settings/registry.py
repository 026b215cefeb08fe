"""Файл config.json: загрузка, сохранение и уведомление наблюдателей."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from langset.exceptions import SettingsIOError, SettingsNotFoundError
from langset.settings.groups import CONFIG_VERSION, LanguageSettings, LoggingSettings, SettingsGroup
from langset.settings.observers import SettingsObserver

LOGGER = logging.getLogger(__name__)

_MISSING = object()


class SettingsRegistry:
    """Все группы настроек одного config.json.

    Неизвестные секции верхнего уровня последнего загруженного файла
    записываются обратно при сохранении; ``version`` всегда CONFIG_VERSION.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._groups: Dict[str, SettingsGroup] = {
            group.group_name: group for group in (LanguageSettings(), LoggingSettings())
        }
        self._extra: Dict[str, Any] = {"version": CONFIG_VERSION}
        self._observers: List[SettingsObserver] = []
        self.is_dirty = False

    def get_group(self, name: str) -> SettingsGroup:
        group = self._groups.get(name)
        if group is None:
            raise SettingsNotFoundError(name)
        return group

    def get_value(self, group: str, key: str, default: Any = _MISSING) -> Any:
        """Значение ключа; ``default`` возвращается вместо SettingsNotFoundError."""

        if default is _MISSING:
            return self.get_group(group).get(key)
        settings_group = self._groups.get(group)
        if settings_group is None or key not in settings_group.fields:
            return default
        return settings_group.get(key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        settings_group = self.get_group(group)
        previous = settings_group.get(key)
        settings_group.set(key, value)
        self.is_dirty = True
        if previous != value:
            self.notify_observers(group, key, previous, value)

    def register_observer(self, observer: SettingsObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: SettingsObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self, group: str, key: str, old_value: Any, new_value: Any) -> None:
        """Ошибка одного наблюдателя не мешает остальным."""

        for observer in list(self._observers):
            try:
                observer.on_setting_changed(group, key, old_value, new_value)
            except Exception as exc:  # pragma: no cover
                LOGGER.error("Observer %r failed: %s", observer, exc, exc_info=True)

    def to_dict(self) -> Dict[str, Any]:
        payload = dict(self._extra)
        payload.update({name: group.to_dict() for name, group in self._groups.items()})
        return payload

    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self.config_path
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc
        self.is_dirty = False

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Читает config.json; отсутствующий файл создаётся со значениями по умолчанию.

        Ключи, которых нет в файле, получают значения по умолчанию.
        Значения сначала проверяются во временных группах: при
        SettingsValidationError текущие настройки остаются прежними.
        """

        target = path or self.config_path
        if not target.exists():
            LOGGER.info("Config file %s not found, writing defaults", target)
            self.save_to_disk(target)
            return
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")

        staged: Dict[str, SettingsGroup] = {name: type(group)() for name, group in self._groups.items()}
        extra: Dict[str, Any] = {}
        for name, section in content.items():
            group = staged.get(name)
            if group is None:
                extra[name] = section
            elif isinstance(section, dict):
                group.update(section)
            else:
                LOGGER.warning("Ignoring section '%s' in %s: expected an object", name, target)

        file_version = extra.get("version", CONFIG_VERSION)
        if file_version != CONFIG_VERSION:
            LOGGER.info("Config %s has version %r, saving as %s", target, file_version, CONFIG_VERSION)
        extra["version"] = CONFIG_VERSION

        self._groups = staged
        self._extra = extra
        self.is_dirty = file_version != CONFIG_VERSION

    def validate(self) -> bool:
        for group in self._groups.values():
            for key in group.keys():
                group.set(key, group.get(key))
        return True

    def reset_to_defaults(self) -> None:
        for group in self._groups.values():
            group.reset_to_defaults()
        self.is_dirty = True
