"""
JSON Schema Contract Validators

Модуль для валидации JSON-снапшотов слайдера согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (поставляются вместе с пакетом, contracts/schema/):
- slider_config.json - снапшот конфигурации (SliderConfig.to_contract())
- slider_dots.json - read-модель ручек (dots_to_contract(Control.get_dots()))
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADING
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Контракты слайдера, поставляемые с пакетом
SCHEMA_NAMES: Final[tuple[str, ...]] = ("slider_config", "slider_dots")


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка (с кэшированием) одного из контрактов слайдера.

    Raises:
        ValueError: Неизвестное имя схемы или схема не проходит meta-валидацию
    """
    if schema_name not in SCHEMA_NAMES:
        raise ValueError(
            f"Unknown slider schema {schema_name!r}, expected one of {SCHEMA_NAMES}"
        )

    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class SliderConfigValidator(ContractValidator):
    """Валидатор для slider_config контракта."""

    def __init__(self):
        super().__init__("slider_config")


class SliderDotsValidator(ContractValidator):
    """Валидатор для slider_dots контракта."""

    def __init__(self):
        super().__init__("slider_dots")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_slider_config(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота конфигурации.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SliderConfigValidator().validate(data)


def validate_slider_dots(data: list[Dict[str, Any]]) -> None:
    """
    Валидация read-модели ручек.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SliderDotsValidator().validate(data)
