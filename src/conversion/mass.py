"""Mass conversions (reference: kilogram).

Отрицательная масса физически бессмысленна: OutOfDomain.
"""

from src.conversion.engine import DEFAULT_ENGINE
from src.core.domain.units import MassUnit


def kg_to_pounds(kg: float) -> float:
    """Килограммы → фунты (1 kg = 2.20462 lb)."""
    return DEFAULT_ENGINE.convert(kg, MassUnit.KILOGRAM, MassUnit.POUND)


def pounds_to_kg(pounds: float) -> float:
    """Фунты → килограммы (kg = lb / 2.20462)."""
    return DEFAULT_ENGINE.convert(pounds, MassUnit.POUND, MassUnit.KILOGRAM)


def tonnes_to_tons(tonnes: float) -> float:
    """Метрические тонны → короткие (US) тонны (1 tonne = 1.10231 short tons)."""
    return DEFAULT_ENGINE.convert(tonnes, MassUnit.TONNE, MassUnit.SHORT_TON)


def tons_to_tonnes(tons: float) -> float:
    """Короткие (US) тонны → метрические тонны."""
    return DEFAULT_ENGINE.convert(tons, MassUnit.SHORT_TON, MassUnit.TONNE)
