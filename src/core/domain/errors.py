"""
Ошибки конверсии единиц

Таксономия:
- InvalidInput: значение не конечно (NaN, +Inf, -Inf)
- OutOfDomain: значение нарушает физическую нижнюю границу единицы
  (температура ниже абсолютного нуля, отрицательная масса,
  отрицательное абсолютное давление)
- IncompatibleUnits: попытка конверсии между разными физическими величинами

InvalidInput и OutOfDomain наследуют ValueError: ошибка локальна для
одного вызова, не ретраится и не фатальна для процесса.
IncompatibleUnits наследует TypeError: это ошибка программиста, а не данных.
"""

from typing import Any


class ConversionError(ValueError):
    """Базовая ошибка конверсии (ошибка данных)."""

    def __init__(self, message: str, value: float, unit: Any):
        super().__init__(message)
        self.value = value
        self.unit = unit


class InvalidInput(ConversionError):
    """Значение не является конечным float."""

    def __init__(self, value: float, unit: Any):
        super().__init__(
            f"Value must be a finite float (not NaN/Inf), got {value} {_symbol(unit)}",
            value,
            unit,
        )


class OutOfDomain(ConversionError):
    """
    Значение ниже физической нижней границы единицы.

    Поднимается как для входа (например, отрицательные kg), так и для
    результата (например, celsius_to_kelvin(-300.0) = -26.85 K).
    Значение никогда не clamp'ится к границе.
    """

    def __init__(self, value: float, unit: Any, bound: float):
        super().__init__(
            f"Value {value} {_symbol(unit)} is below physical lower bound "
            f"{bound} {_symbol(unit)} (out_of_domain)",
            value,
            unit,
        )
        self.bound = bound


class IncompatibleUnits(TypeError):
    """Единицы принадлежат разным физическим величинам."""

    def __init__(self, from_unit: Any, to_unit: Any):
        super().__init__(
            f"Cannot convert {_symbol(from_unit)} to {_symbol(to_unit)}: "
            f"units belong to different quantities"
        )
        self.from_unit = from_unit
        self.to_unit = to_unit


def _symbol(unit: Any) -> str:
    return getattr(unit, "value", str(unit))
