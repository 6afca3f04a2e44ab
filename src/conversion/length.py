"""Length conversions (reference: meter).

Знаковые значения допустимы: смещение может быть отрицательным.
"""

from src.conversion.engine import DEFAULT_ENGINE
from src.core.domain.units import LengthUnit


def meters_to_feet(meters: float) -> float:
    """
    Метры → футы.

    feet = meters / 0.3048

    Examples:
        >>> meters_to_feet(100.0)  # doctest: +ELLIPSIS
        328.08398950...
    """
    return DEFAULT_ENGINE.convert(meters, LengthUnit.METER, LengthUnit.FOOT)


def feet_to_meters(feet: float) -> float:
    """Футы → метры (meters = feet * 0.3048)."""
    return DEFAULT_ENGINE.convert(feet, LengthUnit.FOOT, LengthUnit.METER)


def km_to_miles(km: float) -> float:
    """Километры → мили (1 mile = 1.609344 km)."""
    return DEFAULT_ENGINE.convert(km, LengthUnit.KILOMETER, LengthUnit.MILE)


def miles_to_km(miles: float) -> float:
    """Мили → километры (km = miles * 1.609344)."""
    return DEFAULT_ENGINE.convert(miles, LengthUnit.MILE, LengthUnit.KILOMETER)
