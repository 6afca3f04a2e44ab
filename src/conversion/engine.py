"""ConversionEngine: чистые конверсии между единицами одной величины.

Алгоритм:
1. Обе единицы должны принадлежать одной Quantity (иначе IncompatibleUnits)
2. Вход конечен (иначе InvalidInput) и не ниже границы исходной единицы
3. value → reference-единица → целевая единица (аффинно)
4. Результат конечен и не ниже границы целевой единицы (иначе OutOfDomain);
   результат ниже границы лишь на погрешность округления приравнивается к границе

Движок не хранит изменяемого состояния: любой экземпляр можно
использовать из любого числа потоков без блокировок.
"""

from dataclasses import dataclass

from src.core.domain.errors import IncompatibleUnits
from src.core.domain.measurement import Measurement
from src.core.domain.units import Unit, UnitSpec, unit_spec
from src.core.math.numerical_safeguards import (
    EPS_BOUND_ABS,
    EPS_ROUNDTRIP_ABS,
    EPS_ROUNDTRIP_REL,
    is_roundtrip_close,
    require_at_least,
    require_finite,
    snap_to_bound,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация движка конверсий.

    enforce_physical_bounds=False отключает только OutOfDomain
    (например, вычисление отрицательного Kelvin без ошибки);
    NaN/Inf отклоняются всегда.
    """

    # Толерантность обратимости A → B → A
    roundtrip_rel_tol: float = EPS_ROUNDTRIP_REL
    roundtrip_abs_tol: float = EPS_ROUNDTRIP_ABS

    # Допуск округления результата на физической границе
    bound_abs_tol: float = EPS_BOUND_ABS

    # Проверка физических нижних границ (Kelvin, давление, масса)
    enforce_physical_bounds: bool = True


# =============================================================================
# ENGINE
# =============================================================================


class ConversionEngine:
    """Движок конверсий единиц.

    Операции:
    - convert: float → float
    - convert_measurement: Measurement → новый Measurement
    - roundtrip / is_roundtrip_safe: проверка обратимости пары единиц
    """

    def __init__(self, config: ConversionConfig | None = None):
        """Инициализация движка.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConversionConfig()

    def convert(self, value: float, from_unit: Unit, to_unit: Unit) -> float:
        """Конверсия значения между единицами одной величины.

        Args:
            value: Значение в from_unit
            from_unit: Исходная единица
            to_unit: Целевая единица

        Returns:
            Значение в to_unit

        Raises:
            IncompatibleUnits: Если единицы разных величин
            InvalidInput: Если value (или результат) NaN/Inf
            OutOfDomain: Если value или результат ниже физической границы
        """
        source = unit_spec(from_unit)
        target = unit_spec(to_unit)

        if source.quantity is not target.quantity:
            raise IncompatibleUnits(from_unit, to_unit)

        require_finite(value, from_unit)
        self._check_bound(value, source)

        if from_unit == to_unit:
            return value

        result = target.from_reference(source.to_reference(value))

        # Переполнение при экстремальных входах
        require_finite(result, to_unit)
        if self.config.enforce_physical_bounds:
            result = snap_to_bound(result, target.lower_bound, self.config.bound_abs_tol)
        self._check_bound(result, target)

        return result

    def convert_measurement(self, measurement: Measurement, to_unit: Unit) -> Measurement:
        """Конверсия Measurement в другую единицу.

        Args:
            measurement: Исходное измерение (не мутирует)
            to_unit: Целевая единица

        Returns:
            Новый Measurement в to_unit
        """
        value = self.convert(measurement.value, measurement.unit, to_unit)
        return Measurement(value=value, unit=to_unit)

    def roundtrip(self, value: float, unit_a: Unit, unit_b: Unit) -> float:
        """Конверсия A → B → A.

        Args:
            value: Значение в unit_a
            unit_a: Исходная единица
            unit_b: Промежуточная единица

        Returns:
            Восстановленное значение в unit_a
        """
        return self.convert(self.convert(value, unit_a, unit_b), unit_b, unit_a)

    def is_roundtrip_safe(self, value: float, unit_a: Unit, unit_b: Unit) -> bool:
        """Проверка, что A → B → A восстанавливает value в пределах толерантности."""
        restored = self.roundtrip(value, unit_a, unit_b)
        return is_roundtrip_close(
            value,
            restored,
            rel_tol=self.config.roundtrip_rel_tol,
            abs_tol=self.config.roundtrip_abs_tol,
        )

    def _check_bound(self, value: float, spec: UnitSpec) -> None:
        if self.config.enforce_physical_bounds:
            require_at_least(value, spec.unit, spec.lower_bound)


# Движок по умолчанию для именованных функций и Measurement.to
DEFAULT_ENGINE = ConversionEngine()


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Конверсия через движок по умолчанию (см. ConversionEngine.convert)."""
    return DEFAULT_ENGINE.convert(value, from_unit, to_unit)
