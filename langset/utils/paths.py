"""Базовые пути: config.json, журналы и каталог языковых файлов."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

# LANGSET_HOME переопределяет базовый каталог (удобно для тестов и контейнеров)
HOME_ENV_VAR = "LANGSET_HOME"
DEFAULT_DIR_NAME = ".langset"


def resolve_base_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Возвращает каталог с config.json и logs/."""

    env = os.environ if environ is None else environ
    override = env.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_DIR_NAME


def resolve_resource_dir(base_dir: Path, resource_dir: str) -> Path:
    """Относительный ``resource_dir`` считается от базового каталога."""

    path = Path(resource_dir).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path
