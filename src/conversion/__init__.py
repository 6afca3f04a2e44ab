"""
Conversion Engine

Stateless bidirectional conversions grouped by quantity:
length, temperature, pressure, mass.
"""

from src.conversion.engine import (
    DEFAULT_ENGINE,
    ConversionConfig,
    ConversionEngine,
    convert,
)
from src.conversion.length import (
    feet_to_meters,
    km_to_miles,
    meters_to_feet,
    miles_to_km,
)
from src.conversion.mass import (
    kg_to_pounds,
    pounds_to_kg,
    tonnes_to_tons,
    tons_to_tonnes,
)
from src.conversion.pressure import (
    bar_to_pascal,
    bar_to_psi,
    pascal_to_bar,
    psi_to_bar,
)
from src.conversion.temperature import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    kelvin_to_celsius,
)

__all__ = [
    # Engine
    "ConversionEngine",
    "ConversionConfig",
    "DEFAULT_ENGINE",
    "convert",
    # Length
    "meters_to_feet",
    "feet_to_meters",
    "km_to_miles",
    "miles_to_km",
    # Temperature
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "celsius_to_kelvin",
    "kelvin_to_celsius",
    # Pressure
    "bar_to_psi",
    "psi_to_bar",
    "pascal_to_bar",
    "bar_to_pascal",
    # Mass
    "kg_to_pounds",
    "pounds_to_kg",
    "tonnes_to_tons",
    "tons_to_tonnes",
]
