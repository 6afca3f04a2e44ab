"""
Domain models and value objects.

Contains the closed table of quantities and units, the immutable
Measurement model and the conversion error taxonomy.
"""

from src.core.domain.errors import (
    ConversionError,
    IncompatibleUnits,
    InvalidInput,
    OutOfDomain,
)
from src.core.domain.measurement import Measurement
from src.core.domain.units import (
    REFERENCE_UNITS,
    UNIT_CLASSES,
    UNIT_SPECS,
    LengthUnit,
    MassUnit,
    PressureUnit,
    Quantity,
    TemperatureUnit,
    Unit,
    UnitSpec,
    all_units,
    quantity_of,
    supported_units,
    unit_spec,
)

__all__ = [
    # Errors
    "ConversionError",
    "InvalidInput",
    "OutOfDomain",
    "IncompatibleUnits",
    # Units module
    "Quantity",
    "LengthUnit",
    "TemperatureUnit",
    "PressureUnit",
    "MassUnit",
    "Unit",
    "UnitSpec",
    "UNIT_SPECS",
    "UNIT_CLASSES",
    "REFERENCE_UNITS",
    "unit_spec",
    "quantity_of",
    "supported_units",
    "all_units",
    # Measurement model
    "Measurement",
]
