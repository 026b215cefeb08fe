"""Проверки валидаторов."""

from __future__ import annotations

import re

import pytest

from langset.settings.validators import (
    ChoiceValidator,
    IntRangeValidator,
    LanguageIdValidator,
    Nullable,
    PatternValidator,
    StringMappingValidator,
    TypeValidator,
    json_type_name,
)


def test_type_validator_success() -> None:
    assert TypeValidator(str).validate("en") == (True, "")


def test_type_validator_failure() -> None:
    is_valid, error = TypeValidator(str).validate(123)
    assert not is_valid
    assert error == "Expected str, got number"


def test_type_validator_rejects_bool_for_int() -> None:
    assert not TypeValidator(int).validate(True)[0]
    assert TypeValidator(bool).validate(False) == (True, "")


def test_int_range_validator() -> None:
    validator = IntRangeValidator(1, 10)
    assert validator.validate(5) == (True, "")
    is_valid, error = validator.validate(11)
    assert not is_valid
    assert "out of range" in error
    assert not validator.validate("5")[0]
    assert not validator.validate(2.5)[0]


def test_choice_validator() -> None:
    validator = ChoiceValidator(["DEBUG", "INFO"])
    assert validator.validate("INFO") == (True, "")
    is_valid, error = validator.validate("TRACE")
    assert not is_valid
    assert "not one of" in error


def test_pattern_validator_supports_compiled_pattern() -> None:
    validator = PatternValidator(re.compile(r"^[0-9]+$"))
    assert validator.validate("1234") == (True, "")
    assert not validator.validate("12a")[0]
    is_valid, error = validator.validate(1234)
    assert not is_valid
    assert "string" in error


def test_nullable() -> None:
    validator = Nullable(LanguageIdValidator())
    assert validator.validate(None) == (True, "")
    assert validator.validate("en") == (True, "")
    assert not validator.validate("e n")[0]


@pytest.mark.parametrize("identifier", ["en", "pt-BR", "zh_Hant"])
def test_language_id_accepts(identifier: str) -> None:
    assert LanguageIdValidator().validate(identifier) == (True, "")


@pytest.mark.parametrize("identifier", ["", "en/../x", "fr.lang"])
def test_language_id_rejects(identifier: str) -> None:
    assert not LanguageIdValidator().validate(identifier)[0]


def test_string_mapping_validator_success() -> None:
    assert StringMappingValidator().validate({"tree": "arbre"}) == (True, "")


def test_string_mapping_validator_reports_key() -> None:
    key, error = StringMappingValidator().first_error({"tree": "arbre", "count": 3})
    assert key == "count"
    assert error == "Expected string value, got number"


def test_string_mapping_validator_rejects_non_dict() -> None:
    is_valid, error = StringMappingValidator().validate(["tree"])
    assert not is_valid
    assert "array" in error


def test_json_type_names() -> None:
    assert [json_type_name(v) for v in (None, True, 1, 1.5, "s", [], {})] == [
        "null",
        "boolean",
        "number",
        "number",
        "string",
        "array",
        "object",
    ]
