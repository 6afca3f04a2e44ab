"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных измерений.
"""

from .validators import (
    MeasurementValidator,
    SchemaLoader,
    validate_measurement,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "MeasurementValidator",
    # Functions
    "validate_measurement",
]
