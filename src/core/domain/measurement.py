"""
Measurement: неизменяемая пара (value, unit)

Immutable Pydantic модель. Создаётся вызывающим кодом или конверсией,
никогда не мутирует; конверсия всегда возвращает новый экземпляр.
"""

from pydantic import BaseModel, Field

from src.core.domain.units import Quantity, Unit, quantity_of


class Measurement(BaseModel):
    """
    Измерение: значение в конкретной единице.

    value обязан быть конечным float (NaN/Inf отклоняются при создании).
    Физические границы (например, отрицательная масса) проверяются
    движком конверсии, а не моделью.
    """

    value: float = Field(..., allow_inf_nan=False, description="Значение (64-bit float)")
    unit: Unit = Field(..., description="Единица измерения")

    model_config = {"frozen": True}  # Immutable

    @property
    def quantity(self) -> Quantity:
        """Физическая величина измерения"""
        return quantity_of(self.unit)

    def to(self, unit: Unit) -> "Measurement":
        """
        Конверсия в другую единицу той же величины.

        Args:
            unit: Целевая единица

        Returns:
            Новый Measurement в целевой единице

        Raises:
            InvalidInput: Если результат не конечен
            OutOfDomain: Если нарушена физическая граница
            IncompatibleUnits: Если unit другой величины
        """
        from src.conversion.engine import DEFAULT_ENGINE

        return DEFAULT_ENGINE.convert_measurement(self, unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"
