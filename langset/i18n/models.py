"""Модель языкового ресурса."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class LanguageResource:
    """Идентификатор языка и его таблица строк.

    Таблица копируется при создании и отдаётся только на чтение, поэтому
    изменения исходного словаря не влияют на ресурс.
    """

    identifier: str
    strings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", MappingProxyType(dict(self.strings)))

    def get(self, key: str) -> Optional[str]:
        return self.strings.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.strings

    def __len__(self) -> int:
        return len(self.strings)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.strings)
