"""
JSON Schema Contract Validators

Валидация сериализованного Measurement против schema/measurement.json
(Draft 2020-12). Схемы поставляются как package data рядом с модулем.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


class SchemaLoader:
    """Загрузчик JSON Schema файлов с кэшем и meta-валидацией."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


_SCHEMA_LOADER = SchemaLoader()


class MeasurementValidator:
    """Валидатор measurement контракта."""

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema("measurement")
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


def validate_measurement(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Measurement
    (например, Measurement.model_dump(mode="json")).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MeasurementValidator().validate(data)
