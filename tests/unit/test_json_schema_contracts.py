"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора measurement:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и enum
- Интеграция с Pydantic моделью Measurement
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    MeasurementValidator,
    SchemaLoader,
    validate_measurement,
)
from src.core.domain import LengthUnit, Measurement, TemperatureUnit, all_units


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_measurement():
    """Валидный measurement для тестирования."""
    return {"value": 100.0, "unit": "m"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_measurement_schema(self) -> None:
        schema = SchemaLoader().load_schema("measurement")
        assert schema["title"] == "Measurement"
        assert schema["required"] == ["value", "unit"]

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("measurement") is loader.load_schema("measurement")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_units_match_domain(self) -> None:
        """Enum единиц в схеме совпадает с таблицей единиц"""
        schema = SchemaLoader().load_schema("measurement")
        assert set(schema["properties"]["unit"]["enum"]) == {u.value for u in all_units()}


# =============================================================================
# MEASUREMENT VALIDATOR
# =============================================================================


class TestMeasurementValidator:
    """Тесты валидатора measurement"""

    def test_valid_data(self, valid_measurement) -> None:
        validate_measurement(valid_measurement)
        assert MeasurementValidator().is_valid(valid_measurement)

    def test_integer_value_valid(self) -> None:
        validate_measurement({"value": 25, "unit": "degC"})

    def test_missing_value(self, valid_measurement) -> None:
        del valid_measurement["value"]
        with pytest.raises(ValidationError, match="'value' is a required property"):
            validate_measurement(valid_measurement)

    def test_missing_unit(self, valid_measurement) -> None:
        del valid_measurement["unit"]
        with pytest.raises(ValidationError):
            validate_measurement(valid_measurement)

    def test_value_wrong_type(self, valid_measurement) -> None:
        valid_measurement["value"] = "100"
        with pytest.raises(ValidationError):
            validate_measurement(valid_measurement)

    def test_unknown_unit(self, valid_measurement) -> None:
        valid_measurement["unit"] = "parsec"
        with pytest.raises(ValidationError):
            validate_measurement(valid_measurement)

    def test_additional_properties_rejected(self, valid_measurement) -> None:
        valid_measurement["quantity"] = "length"
        with pytest.raises(ValidationError):
            validate_measurement(valid_measurement)

    def test_iter_errors_collects_all(self) -> None:
        errors = list(MeasurementValidator().iter_errors({"value": "x", "unit": "parsec"}))
        assert len(errors) == 2


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Сериализованный Measurement соответствует контракту"""

    def test_every_unit_serializes_to_valid_contract(self) -> None:
        for unit in all_units():
            data = Measurement(value=1.0, unit=unit).model_dump(mode="json")
            validate_measurement(data)

    def test_converted_measurement_valid(self) -> None:
        converted = Measurement(value=25.0, unit=TemperatureUnit.CELSIUS).to(TemperatureUnit.KELVIN)
        validate_measurement(json.loads(converted.model_dump_json()))

    def test_contract_data_loads_into_model(self, valid_measurement) -> None:
        validate_measurement(valid_measurement)
        measurement = Measurement.model_validate(valid_measurement)
        assert measurement.unit is LengthUnit.METER
