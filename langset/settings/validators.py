"""Валидаторы значений конфигурации и содержимого языковых файлов.

Каждый валидатор возвращает пару ``(ok, error)``; пустая строка ошибки
означает успех.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Pattern, Tuple

# Идентификатор языка: "en", "pt-BR", "zh_Hant"
LANGUAGE_ID_PATTERN = r"^[A-Za-z0-9_\-]+$"

Result = Tuple[bool, str]
OK: Result = (True, "")


def json_type_name(value: Any) -> str:
    """Имя типа в терминах JSON, для сообщений об ошибках."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class Validator(ABC):
    @abstractmethod
    def validate(self, value: Any) -> Result:
        """Проверяет значение."""


class TypeValidator(Validator):
    """Точное соответствие типу; ``True`` не считается числом."""

    def __init__(self, expected_type: type) -> None:
        self.expected_type = expected_type

    def validate(self, value: Any) -> Result:
        if isinstance(value, bool) and self.expected_type is not bool:
            return False, f"Expected {self.expected_type.__name__}, got boolean"
        if isinstance(value, self.expected_type):
            return OK
        return False, f"Expected {self.expected_type.__name__}, got {json_type_name(value)}"


class IntRangeValidator(Validator):
    """Целое число в границах [minimum, maximum]."""

    def __init__(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self._type = TypeValidator(int)

    def validate(self, value: Any) -> Result:
        ok, error = self._type.validate(value)
        if not ok:
            return ok, error
        if not self.minimum <= value <= self.maximum:
            return False, f"Value {value} is out of range [{self.minimum}, {self.maximum}]"
        return OK


class ChoiceValidator(Validator):
    def __init__(self, choices: Iterable[Any]) -> None:
        self.choices = tuple(choices)

    def validate(self, value: Any) -> Result:
        if value in self.choices:
            return OK
        return False, f"Value {value!r} is not one of {list(self.choices)}"


class PatternValidator(Validator):
    """Строка, целиком совпадающая с регулярным выражением."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> Result:
        if not isinstance(value, str):
            return False, f"Expected string, got {json_type_name(value)}"
        if self.pattern.fullmatch(value) is None:
            return False, f"Value {value!r} does not match {self.pattern.pattern!r}"
        return OK


class LanguageIdValidator(PatternValidator):
    def __init__(self) -> None:
        super().__init__(LANGUAGE_ID_PATTERN)


class Nullable(Validator):
    """Разрешает None, остальное проверяет вложенным валидатором."""

    def __init__(self, inner: Validator) -> None:
        self.inner = inner

    def validate(self, value: Any) -> Result:
        return OK if value is None else self.inner.validate(value)


class StringMappingValidator(Validator):
    """Плоский JSON-объект, все значения которого строки.

    ``first_error`` дополнительно сообщает ключ, на котором проверка
    остановилась, чтобы его можно было найти в исходном файле.
    """

    def first_error(self, value: Any) -> Tuple[Optional[str], str]:
        if not isinstance(value, dict):
            return None, f"Expected JSON object, got {json_type_name(value)}"
        for key, item in value.items():
            if not isinstance(key, str):
                return None, f"Expected string keys, got {json_type_name(key)}"
            if not isinstance(item, str):
                return key, f"Expected string value, got {json_type_name(item)}"
        return None, ""

    def validate(self, value: Any) -> Result:
        _, error = self.first_error(value)
        return (not error), error
