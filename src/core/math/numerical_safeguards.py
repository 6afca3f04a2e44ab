"""
Numerical Safeguards: float-примитивы для конверсий

Модуль обеспечивает численную корректность конверсий:
- Проверка конечности (NaN/Inf никогда не пропагируют в результат)
- Epsilon-сравнения float с учётом машинной точности
- Проверка обратимости A → B → A в пределах относительной толерантности
- Валидация физических нижних границ без clamp

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf на входе или на выходе отклоняются (InvalidInput)
2. Значение ниже физической границы отклоняется (OutOfDomain), не clamp'ится
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import numbers
from typing import Any, Final, Sequence

from src.core.domain.errors import InvalidInput, OutOfDomain

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность обратимости конверсий A → B → A
EPS_ROUNDTRIP_REL: Final[float] = 1e-6

# Абсолютная толерантность обратимости (для значений около нуля,
# где относительная толерантность вырождается)
EPS_ROUNDTRIP_ABS: Final[float] = 1e-9

# Допуск округления на физической границе результата (например,
# -459.67 °F → K даёт -5.7e-14 вместо 0.0)
EPS_BOUND_ABS: Final[float] = 1e-9

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def require_finite(value: float, unit: Any) -> float:
    """
    Валидация конечности значения.

    Args:
        value: Проверяемое значение
        unit: Единица значения (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidInput: Если value NaN/Inf или не является числом

    Examples:
        >>> require_finite(10.0, LengthUnit.METER)
        10.0
        >>> require_finite(float('nan'), LengthUnit.METER)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidInput: ...
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(value, unit)

    if not is_valid_float(value):
        raise InvalidInput(value, unit)

    return value


def require_at_least(value: float, unit: Any, lower_bound: float | None) -> float:
    """
    Валидация физической нижней границы.

    Args:
        value: Проверяемое значение (конечное)
        unit: Единица значения (для сообщения об ошибке)
        lower_bound: Нижняя граница в той же единице (None = без границы)

    Returns:
        value без изменений

    Raises:
        OutOfDomain: Если value < lower_bound
    """
    if lower_bound is not None and value < lower_bound:
        raise OutOfDomain(value, unit, lower_bound)

    return value


def snap_to_bound(
    value: float,
    lower_bound: float | None,
    abs_tol: float = EPS_BOUND_ABS,
) -> float:
    """
    Привязка результата к границе, если он ниже неё только из-за округления.

    Значения ниже границы больше чем на abs_tol не меняются и отклоняются
    последующим require_at_least.

    Args:
        value: Результат конверсии
        lower_bound: Нижняя граница целевой единицы (None = без границы)
        abs_tol: Допуск округления (default: EPS_BOUND_ABS)

    Returns:
        lower_bound если value в пределах abs_tol ниже границы, иначе value

    Examples:
        >>> snap_to_bound(-5.684341886080802e-14, 0.0)
        0.0
        >>> snap_to_bound(-26.85, 0.0)
        -26.85
    """
    if (
        lower_bound is not None
        and value < lower_bound
        and is_close(value, lower_bound, rel_tol=0.0, abs_tol=abs_tol)
    ):
        return lower_bound

    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_roundtrip_close(
    original: float,
    restored: float,
    rel_tol: float = EPS_ROUNDTRIP_REL,
    abs_tol: float = EPS_ROUNDTRIP_ABS,
) -> bool:
    """
    Проверка обратимости конверсии: restored ≈ original.

    Args:
        original: Исходное значение
        restored: Значение после A → B → A
        rel_tol: Относительная толерантность (default: 1e-6)
        abs_tol: Абсолютная толерантность (default: 1e-9)

    Returns:
        True если значение восстановлено в пределах толерантности

    Examples:
        >>> is_roundtrip_close(100.0, 100.00000001)
        True
        >>> is_roundtrip_close(100.0, 100.001)
        False
    """
    return is_close(original, restored, rel_tol=rel_tol, abs_tol=abs_tol)


def is_non_decreasing(values: Sequence[float], tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка монотонности последовательности.

    Args:
        values: Последовательность значений
        tol: Абсолютная толерантность для соседних элементов

    Returns:
        True если каждый следующий элемент >= предыдущего - tol

    Examples:
        >>> is_non_decreasing([1.0, 2.0, 2.0, 3.0])
        True
        >>> is_non_decreasing([1.0, 0.5])
        False
    """
    return all(b >= a - tol for a, b in zip(values, values[1:]))
