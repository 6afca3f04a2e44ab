"""Pressure conversions (reference: Pascal).

Давление абсолютное: отрицательные значения отклоняются (OutOfDomain).
"""

from src.conversion.engine import DEFAULT_ENGINE
from src.core.domain.units import PressureUnit


def bar_to_psi(bar: float) -> float:
    """Bar → PSI (1 bar = 14.5038 psi)."""
    return DEFAULT_ENGINE.convert(bar, PressureUnit.BAR, PressureUnit.PSI)


def psi_to_bar(psi: float) -> float:
    """PSI → bar (bar = psi / 14.5038)."""
    return DEFAULT_ENGINE.convert(psi, PressureUnit.PSI, PressureUnit.BAR)


def pascal_to_bar(pascal: float) -> float:
    """Pascal → bar (1 bar = 100000 Pa)."""
    return DEFAULT_ENGINE.convert(pascal, PressureUnit.PASCAL, PressureUnit.BAR)


def bar_to_pascal(bar: float) -> float:
    """Bar → Pascal (Pa = bar * 100000)."""
    return DEFAULT_ENGINE.convert(bar, PressureUnit.BAR, PressureUnit.PASCAL)
