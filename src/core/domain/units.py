"""
Units: централизованная таблица единиц измерения

Закрытое множество физических величин (Quantity), каждая владеет своим
набором единиц:
- LENGTH (reference: meter)
- TEMPERATURE (reference: Celsius, аффинные преобразования)
- PRESSURE (reference: Pascal)
- MASS (reference: kilogram)

Каждая единица описывается UnitSpec: аффинной связью с reference-единицей
своей величины и (опционально) физической нижней границей.

Единицы разных величин описаны разными Enum-классами, поэтому смешать их
в одной конверсии нельзя без явной ошибки.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Union


# =============================================================================
# КОЭФФИЦИЕНТЫ
# =============================================================================

# Длина
METERS_PER_FOOT: Final[float] = 0.3048
KILOMETERS_PER_MILE: Final[float] = 1.609344
METERS_PER_KILOMETER: Final[float] = 1000.0

# Температура
ABSOLUTE_ZERO_CELSIUS: Final[float] = -273.15
FAHRENHEIT_FREEZING_POINT: Final[float] = 32.0
CELSIUS_PER_FAHRENHEIT_DEGREE: Final[float] = 5.0 / 9.0

# Давление
PASCALS_PER_BAR: Final[float] = 100_000.0
PSI_PER_BAR: Final[float] = 14.5038

# Масса
POUNDS_PER_KILOGRAM: Final[float] = 2.20462
KILOGRAMS_PER_TONNE: Final[float] = 1000.0
SHORT_TONS_PER_TONNE: Final[float] = 1.10231


# =============================================================================
# ENUMS
# =============================================================================


class Quantity(str, Enum):
    """Физическая величина"""

    LENGTH = "length"
    TEMPERATURE = "temperature"
    PRESSURE = "pressure"
    MASS = "mass"


class LengthUnit(str, Enum):
    """Единицы длины (reference: meter)"""

    METER = "m"
    FOOT = "ft"
    KILOMETER = "km"
    MILE = "mi"

    @property
    def quantity(self) -> Quantity:
        return Quantity.LENGTH


class TemperatureUnit(str, Enum):
    """Единицы температуры (reference: Celsius)"""

    CELSIUS = "degC"
    FAHRENHEIT = "degF"
    KELVIN = "K"

    @property
    def quantity(self) -> Quantity:
        return Quantity.TEMPERATURE


class PressureUnit(str, Enum):
    """Единицы давления (reference: Pascal)"""

    PASCAL = "Pa"
    BAR = "bar"
    PSI = "psi"

    @property
    def quantity(self) -> Quantity:
        return Quantity.PRESSURE


class MassUnit(str, Enum):
    """Единицы массы (reference: kilogram)"""

    KILOGRAM = "kg"
    POUND = "lb"
    TONNE = "tonne"
    SHORT_TON = "short_ton"

    @property
    def quantity(self) -> Quantity:
        return Quantity.MASS


Unit = Union[LengthUnit, TemperatureUnit, PressureUnit, MassUnit]

UNIT_CLASSES: Final[dict[Quantity, type[Enum]]] = {
    Quantity.LENGTH: LengthUnit,
    Quantity.TEMPERATURE: TemperatureUnit,
    Quantity.PRESSURE: PressureUnit,
    Quantity.MASS: MassUnit,
}

REFERENCE_UNITS: Final[dict[Quantity, Unit]] = {
    Quantity.LENGTH: LengthUnit.METER,
    Quantity.TEMPERATURE: TemperatureUnit.CELSIUS,
    Quantity.PRESSURE: PressureUnit.PASCAL,
    Quantity.MASS: MassUnit.KILOGRAM,
}


# =============================================================================
# UNIT SPEC
# =============================================================================


@dataclass(frozen=True)
class UnitSpec:
    """
    Аффинная связь единицы с reference-единицей её величины.

    reference = (value - zero) * scale
    value = reference / scale + zero

    Для линейных единиц zero = 0.0. scale всегда положителен, поэтому
    преобразование строго возрастающее.
    """

    unit: Unit
    scale: float
    zero: float = 0.0
    lower_bound: float | None = None

    @property
    def quantity(self) -> Quantity:
        return self.unit.quantity

    def to_reference(self, value: float) -> float:
        """Значение в этой единице → значение в reference-единице"""
        return (value - self.zero) * self.scale

    def from_reference(self, reference: float) -> float:
        """Значение в reference-единице → значение в этой единице"""
        return reference / self.scale + self.zero


UNIT_SPECS: Final[dict[Unit, UnitSpec]] = {
    # Длина
    LengthUnit.METER: UnitSpec(LengthUnit.METER, scale=1.0),
    LengthUnit.FOOT: UnitSpec(LengthUnit.FOOT, scale=METERS_PER_FOOT),
    LengthUnit.KILOMETER: UnitSpec(LengthUnit.KILOMETER, scale=METERS_PER_KILOMETER),
    LengthUnit.MILE: UnitSpec(
        LengthUnit.MILE, scale=KILOMETERS_PER_MILE * METERS_PER_KILOMETER
    ),
    # Температура: только Kelvin имеет физический ноль
    TemperatureUnit.CELSIUS: UnitSpec(TemperatureUnit.CELSIUS, scale=1.0),
    TemperatureUnit.FAHRENHEIT: UnitSpec(
        TemperatureUnit.FAHRENHEIT,
        scale=CELSIUS_PER_FAHRENHEIT_DEGREE,
        zero=FAHRENHEIT_FREEZING_POINT,
    ),
    TemperatureUnit.KELVIN: UnitSpec(
        TemperatureUnit.KELVIN,
        scale=1.0,
        zero=-ABSOLUTE_ZERO_CELSIUS,
        lower_bound=0.0,
    ),
    # Давление (абсолютное)
    PressureUnit.PASCAL: UnitSpec(PressureUnit.PASCAL, scale=1.0, lower_bound=0.0),
    PressureUnit.BAR: UnitSpec(PressureUnit.BAR, scale=PASCALS_PER_BAR, lower_bound=0.0),
    PressureUnit.PSI: UnitSpec(
        PressureUnit.PSI, scale=PASCALS_PER_BAR / PSI_PER_BAR, lower_bound=0.0
    ),
    # Масса
    MassUnit.KILOGRAM: UnitSpec(MassUnit.KILOGRAM, scale=1.0, lower_bound=0.0),
    MassUnit.POUND: UnitSpec(
        MassUnit.POUND, scale=1.0 / POUNDS_PER_KILOGRAM, lower_bound=0.0
    ),
    MassUnit.TONNE: UnitSpec(MassUnit.TONNE, scale=KILOGRAMS_PER_TONNE, lower_bound=0.0),
    MassUnit.SHORT_TON: UnitSpec(
        MassUnit.SHORT_TON,
        scale=KILOGRAMS_PER_TONNE / SHORT_TONS_PER_TONNE,
        lower_bound=0.0,
    ),
}


# =============================================================================
# ЛУКАПЫ
# =============================================================================


def unit_spec(unit: Unit) -> UnitSpec:
    """
    Получение UnitSpec для единицы.

    Args:
        unit: Единица (член LengthUnit, TemperatureUnit, PressureUnit или MassUnit)

    Returns:
        UnitSpec единицы

    Raises:
        ValueError: Если единица не поддерживается
    """
    try:
        return UNIT_SPECS[unit]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported unit: {unit!r}") from None


def quantity_of(unit: Unit) -> Quantity:
    """Физическая величина, которой принадлежит единица"""
    return unit_spec(unit).quantity


def supported_units(quantity: Quantity) -> list[Unit]:
    """Все единицы величины в порядке объявления"""
    return list(UNIT_CLASSES[quantity])


def all_units() -> list[Unit]:
    """Все поддерживаемые единицы всех величин"""
    return [unit for quantity in Quantity for unit in supported_units(quantity)]
