"""Temperature conversions (reference: Celsius).

Аффинные преобразования: шкалы различаются не только масштабом,
но и положением нуля.

Только Kelvin имеет физический ноль: конверсия с результатом
или входом ниже 0 K отклоняется (OutOfDomain). Celsius ↔ Fahrenheit
принимает любое конечное значение.
"""

from src.conversion.engine import DEFAULT_ENGINE
from src.core.domain.units import TemperatureUnit


def celsius_to_fahrenheit(celsius: float) -> float:
    """
    Celsius → Fahrenheit.

    F = C * 9/5 + 32

    Examples:
        >>> celsius_to_fahrenheit(100.0)
        212.0
    """
    return DEFAULT_ENGINE.convert(
        celsius, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT
    )


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Fahrenheit → Celsius: C = (F - 32) * 5/9"""
    return DEFAULT_ENGINE.convert(
        fahrenheit, TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS
    )


def celsius_to_kelvin(celsius: float) -> float:
    """
    Celsius → Kelvin.

    K = C + 273.15

    Raises:
        OutOfDomain: Если результат ниже абсолютного нуля (C < -273.15)
    """
    return DEFAULT_ENGINE.convert(celsius, TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN)


def kelvin_to_celsius(kelvin: float) -> float:
    """
    Kelvin → Celsius.

    C = K - 273.15

    Raises:
        OutOfDomain: Если kelvin < 0
    """
    return DEFAULT_ENGINE.convert(kelvin, TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS)
