"""
JSON Schema Contract Validators

Модуль для валидации host-facing JSON данных согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных схемам.

Все amount в контрактах — десятичные строки, чтобы значения выше 2**53
переживали JSON-хосты без потери точности.

Схемы:
- curve_config.json
- curve_snapshot.json
- mint_result.json
- curve_error.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (ставятся вместе с пакетом).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'curve_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


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
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class CurveConfigValidator(ContractValidator):
    """Валидатор для curve_config контракта."""

    def __init__(self):
        super().__init__("curve_config")


class CurveSnapshotValidator(ContractValidator):
    """Валидатор для curve_snapshot контракта."""

    def __init__(self):
        super().__init__("curve_snapshot")


class MintResultValidator(ContractValidator):
    """Валидатор для mint_result контракта."""

    def __init__(self):
        super().__init__("mint_result")


class CurveErrorValidator(ContractValidator):
    """Валидатор для curve_error контракта."""

    def __init__(self):
        super().__init__("curve_error")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_curve_config(data: Dict[str, Any]) -> None:
    """
    Валидация curve_config данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveConfigValidator().validate(data)


def validate_curve_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация curve_snapshot данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveSnapshotValidator().validate(data)


def validate_mint_result(data: Dict[str, Any]) -> None:
    """
    Валидация mint_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MintResultValidator().validate(data)


def validate_curve_error(data: Dict[str, Any]) -> None:
    """
    Валидация curve_error данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveErrorValidator().validate(data)
