"""Конфигурация langset: группы настроек, валидаторы и реестр config.json."""
