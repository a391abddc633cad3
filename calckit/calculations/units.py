"""
Unit Conversion Engine

Converts values between units of the same physical quantity.

Multiplicative quantities (length, weight, pressure, ...) share one pattern:
every unit is described by a single factor, "base units per 1 of this unit",
and a conversion normalizes into the base unit and back out again:

    value_in_base = value * factors[from_unit]
    result = value_in_base / factors[to_unit]

Temperature (affine) and fuel economy (reciprocal) have no common
multiplicative base point, so they are separate named functions.
"""

import logging
import math
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)


class QuantityKind(str, Enum):
    """Physical quantities supported by the converters."""

    LENGTH = "length"
    WEIGHT = "weight"
    AREA = "area"
    VOLUME = "volume"
    COOKING = "cooking"
    TIME = "time"
    SPEED = "speed"
    DATA_STORAGE = "data-storage"
    DATA_TRANSFER = "data-transfer"
    ENERGY = "energy"
    POWER = "power"
    FORCE = "force"
    PRESSURE = "pressure"
    TORQUE = "torque"
    DENSITY = "density"
    FLOW_RATE = "flow-rate"
    FREQUENCY = "frequency"
    LUMINANCE = "luminance"
    CONCENTRATION = "concentration"
    ANGLE = "angle"
    TEMPERATURE = "temperature"
    FUEL_ECONOMY = "fuel-economy"


class InvalidUnit(ValueError):
    """Raised when a unit key is not defined for the requested quantity."""

    def __init__(self, unit: str, quantity: str):
        self.unit = unit
        self.quantity = quantity
        super().__init__(f"Invalid unit '{unit}' for {quantity}")


def unit_label(unit: str) -> str:
    """Human readable label for a unit key ('nautical-mile' -> 'Nautical Mile')."""
    return " ".join(part.capitalize() for part in unit.split("-"))


class UnitTable:
    """
    Factor table for one multiplicative quantity.

    Args:
        quantity: Quantity name used in error messages
        base_unit: Key of the reference unit (factor exactly 1)
        factors: Unit key -> base units per 1 of that unit
    """

    def __init__(self, quantity: str, base_unit: str, factors: Dict[str, float]):
        if factors.get(base_unit) != 1:
            raise ValueError(f"Base unit '{base_unit}' of {quantity} must have factor 1")
        self.quantity = quantity
        self.base_unit = base_unit
        self.factors: Mapping[str, float] = MappingProxyType(dict(factors))

    def __contains__(self, unit: str) -> bool:
        return unit in self.factors

    @property
    def units(self) -> List[str]:
        return list(self.factors)

    def factor(self, unit: str) -> float:
        """Base units per 1 of `unit`."""
        try:
            return self.factors[unit]
        except KeyError:
            raise InvalidUnit(unit, self.quantity) from None

    def to_base(self, value: float, unit: str) -> float:
        return value * self.factor(unit)

    def from_base(self, value: float, unit: str) -> float:
        return value / self.factor(unit)

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert `value` from one unit to another through the base unit.

        Raises:
            InvalidUnit: If either unit is not in the table
        """
        from_factor = self.factor(from_unit)
        to_factor = self.factor(to_unit)
        if from_unit == to_unit:
            return value
        return value * from_factor / to_factor


# =============================================================================
# Factor tables
# =============================================================================

LENGTH = UnitTable(
    "length",
    "meter",
    {
        "nanometer": 1e-9,
        "micron": 1e-6,
        "millimeter": 0.001,
        "centimeter": 0.01,
        "meter": 1,
        "kilometer": 1000,
        "inch": 0.0254,
        "foot": 0.3048,
        "yard": 0.9144,
        "mile": 1609.344,
        "nautical-mile": 1852,
    },
)

WEIGHT = UnitTable(
    "weight",
    "kilogram",
    {
        "microgram": 1e-9,
        "milligram": 1e-6,
        "gram": 0.001,
        "kilogram": 1,
        "metric-ton": 1000,
        "ounce": 0.028349523125,
        "pound": 0.45359237,
        "stone": 6.35029318,
        "us-ton": 907.18474,
        "imperial-ton": 1016.0469088,
        "carat": 0.0002,
    },
)

AREA = UnitTable(
    "area",
    "square-meter",
    {
        "square-millimeter": 1e-6,
        "square-centimeter": 1e-4,
        "square-meter": 1,
        "hectare": 10_000,
        "square-kilometer": 1e6,
        "square-inch": 0.00064516,
        "square-foot": 0.09290304,
        "square-yard": 0.83612736,
        "acre": 4046.8564224,
        "square-mile": 2589988.110336,
    },
)

VOLUME = UnitTable(
    "volume",
    "liter",
    {
        "milliliter": 0.001,
        "cubic-centimeter": 0.001,
        "liter": 1,
        "cubic-meter": 1000,
        "cubic-inch": 0.016387064,
        "cubic-foot": 28.316846592,
        "cubic-yard": 764.554857984,
        "teaspoon-us": 0.00492892159375,
        "tablespoon-us": 0.01478676478125,
        "fluid-ounce-us": 0.0295735295625,
        "cup-us": 0.2365882365,
        "pint-us": 0.473176473,
        "quart-us": 0.946352946,
        "gallon-us": 3.785411784,
        "gallon-imperial": 4.54609,
    },
)

# Kitchen measures (US customary)
COOKING = UnitTable(
    "cooking",
    "milliliter",
    {
        "milliliter": 1,
        "liter": 1000,
        "teaspoon": 4.92892159375,
        "tablespoon": 14.78676478125,
        "fluid-ounce": 29.5735295625,
        "cup": 236.5882365,
        "pint": 473.176473,
        "quart": 946.352946,
        "gallon": 3785.411784,
    },
)

# Months and years use the mean Gregorian year (365.2425 days)
TIME = UnitTable(
    "time",
    "second",
    {
        "nanosecond": 1e-9,
        "microsecond": 1e-6,
        "millisecond": 0.001,
        "second": 1,
        "minute": 60,
        "hour": 3600,
        "day": 86_400,
        "week": 604_800,
        "month": 2_629_746,
        "year": 31_556_952,
        "decade": 315_569_520,
        "century": 3_155_695_200,
    },
)

# Mach at 20 °C, sea level
SPEED = UnitTable(
    "speed",
    "meter-per-second",
    {
        "meter-per-second": 1,
        "kilometer-per-hour": 1 / 3.6,
        "mile-per-hour": 0.44704,
        "foot-per-second": 0.3048,
        "knot": 1852 / 3600,
        "mach": 343,
    },
)

DATA_STORAGE = UnitTable(
    "data-storage",
    "byte",
    {
        "bit": 0.125,
        "kilobit": 125,
        "megabit": 125_000,
        "gigabit": 1.25e8,
        "byte": 1,
        "kilobyte": 1e3,
        "megabyte": 1e6,
        "gigabyte": 1e9,
        "terabyte": 1e12,
        "petabyte": 1e15,
        "kibibyte": 1024,
        "mebibyte": 1024**2,
        "gibibyte": 1024**3,
        "tebibyte": 1024**4,
    },
)

DATA_TRANSFER = UnitTable(
    "data-transfer",
    "bit-per-second",
    {
        "bit-per-second": 1,
        "kilobit-per-second": 1e3,
        "megabit-per-second": 1e6,
        "gigabit-per-second": 1e9,
        "terabit-per-second": 1e12,
        "byte-per-second": 8,
        "kilobyte-per-second": 8e3,
        "megabyte-per-second": 8e6,
        "gigabyte-per-second": 8e9,
    },
)

ENERGY = UnitTable(
    "energy",
    "joule",
    {
        "joule": 1,
        "kilojoule": 1e3,
        "megajoule": 1e6,
        "calorie": 4.184,
        "kilocalorie": 4184,
        "watt-hour": 3600,
        "kilowatt-hour": 3.6e6,
        "electronvolt": 1.602176634e-19,
        "btu": 1055.05585262,
        "therm": 105_505_585.262,
        "foot-pound": 1.3558179483314004,
    },
)

POWER = UnitTable(
    "power",
    "watt",
    {
        "milliwatt": 0.001,
        "watt": 1,
        "kilowatt": 1e3,
        "megawatt": 1e6,
        "gigawatt": 1e9,
        "horsepower": 745.6998715822702,
        "metric-horsepower": 735.49875,
        "btu-per-hour": 0.29307107017222,
        "foot-pound-per-second": 1.3558179483314004,
    },
)

FORCE = UnitTable(
    "force",
    "newton",
    {
        "newton": 1,
        "kilonewton": 1e3,
        "dyne": 1e-5,
        "pound-force": 4.4482216152605,
        "kilogram-force": 9.80665,
        "ounce-force": 0.27801385095378125,
        "poundal": 0.138254954376,
    },
)

PRESSURE = UnitTable(
    "pressure",
    "pascal",
    {
        "pascal": 1,
        "kilopascal": 1e3,
        "megapascal": 1e6,
        "bar": 1e5,
        "millibar": 100,
        "atmosphere": 101_325,
        "psi": 6894.757293168361,
        "torr": 101_325 / 760,
        "millimeter-of-mercury": 133.322387415,
        "inch-of-mercury": 3386.389,
    },
)

TORQUE = UnitTable(
    "torque",
    "newton-meter",
    {
        "newton-meter": 1,
        "kilonewton-meter": 1e3,
        "newton-centimeter": 0.01,
        "pound-foot": 1.3558179483314004,
        "pound-inch": 0.1129848290276167,
        "kilogram-force-meter": 9.80665,
        "ounce-force-inch": 0.00706155181422604,
    },
)

DENSITY = UnitTable(
    "density",
    "kilogram-per-cubic-meter",
    {
        "kilogram-per-cubic-meter": 1,
        "gram-per-cubic-centimeter": 1000,
        "gram-per-milliliter": 1000,
        "kilogram-per-liter": 1000,
        "gram-per-liter": 1,
        "pound-per-cubic-foot": 16.018463373960138,
        "pound-per-cubic-inch": 27_679.904710203125,
        "pound-per-gallon-us": 119.82642731689663,
    },
)

FLOW_RATE = UnitTable(
    "flow-rate",
    "cubic-meter-per-second",
    {
        "cubic-meter-per-second": 1,
        "cubic-meter-per-hour": 1 / 3600,
        "liter-per-second": 0.001,
        "liter-per-minute": 0.001 / 60,
        "liter-per-hour": 0.001 / 3600,
        "gallon-us-per-minute": 0.003785411784 / 60,
        "gallon-us-per-hour": 0.003785411784 / 3600,
        "cubic-foot-per-second": 0.028316846592,
        "cubic-foot-per-minute": 0.028316846592 / 60,
    },
)

FREQUENCY = UnitTable(
    "frequency",
    "hertz",
    {
        "hertz": 1,
        "kilohertz": 1e3,
        "megahertz": 1e6,
        "gigahertz": 1e9,
        "terahertz": 1e12,
        "revolution-per-minute": 1 / 60,
        "radian-per-second": 1 / (2 * math.pi),
    },
)

LUMINANCE = UnitTable(
    "luminance",
    "candela-per-square-meter",
    {
        "candela-per-square-meter": 1,
        "nit": 1,
        "stilb": 1e4,
        "lambert": 1e4 / math.pi,
        "foot-lambert": 3.4262590996353905,
        "apostilb": 1 / math.pi,
    },
)

# Mass concentration; ppm/ppb assume a dilute aqueous solution (1 kg per liter)
CONCENTRATION = UnitTable(
    "concentration",
    "gram-per-liter",
    {
        "gram-per-liter": 1,
        "milligram-per-liter": 0.001,
        "microgram-per-liter": 1e-6,
        "milligram-per-milliliter": 1,
        "kilogram-per-cubic-meter": 1,
        "part-per-million": 0.001,
        "part-per-billion": 1e-6,
        "percent-weight-volume": 10,
    },
)

ANGLE = UnitTable(
    "angle",
    "radian",
    {
        "radian": 1,
        "milliradian": 0.001,
        "degree": math.pi / 180,
        "gradian": math.pi / 200,
        "arcminute": math.pi / 10_800,
        "arcsecond": math.pi / 648_000,
        "turn": 2 * math.pi,
    },
)

FACTOR_TABLES: Mapping[QuantityKind, UnitTable] = MappingProxyType(
    {
        QuantityKind.LENGTH: LENGTH,
        QuantityKind.WEIGHT: WEIGHT,
        QuantityKind.AREA: AREA,
        QuantityKind.VOLUME: VOLUME,
        QuantityKind.COOKING: COOKING,
        QuantityKind.TIME: TIME,
        QuantityKind.SPEED: SPEED,
        QuantityKind.DATA_STORAGE: DATA_STORAGE,
        QuantityKind.DATA_TRANSFER: DATA_TRANSFER,
        QuantityKind.ENERGY: ENERGY,
        QuantityKind.POWER: POWER,
        QuantityKind.FORCE: FORCE,
        QuantityKind.PRESSURE: PRESSURE,
        QuantityKind.TORQUE: TORQUE,
        QuantityKind.DENSITY: DENSITY,
        QuantityKind.FLOW_RATE: FLOW_RATE,
        QuantityKind.FREQUENCY: FREQUENCY,
        QuantityKind.LUMINANCE: LUMINANCE,
        QuantityKind.CONCENTRATION: CONCENTRATION,
        QuantityKind.ANGLE: ANGLE,
    }
)


# =============================================================================
# Temperature (affine, pivots through Celsius)
# =============================================================================

TEMPERATURE_UNITS = ["celsius", "fahrenheit", "kelvin"]

KELVIN_OFFSET = 273.15


def _to_celsius(value: float, unit: str) -> float:
    if unit == "celsius":
        return value
    if unit == "fahrenheit":
        return (value - 32) * 5 / 9
    if unit == "kelvin":
        return value - KELVIN_OFFSET
    raise InvalidUnit(unit, QuantityKind.TEMPERATURE.value)


def _from_celsius(value: float, unit: str) -> float:
    if unit == "celsius":
        return value
    if unit == "fahrenheit":
        return value * 9 / 5 + 32
    if unit == "kelvin":
        return value + KELVIN_OFFSET
    raise InvalidUnit(unit, QuantityKind.TEMPERATURE.value)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature between Celsius, Fahrenheit and Kelvin.

    Args:
        value: Temperature reading
        from_unit: One of TEMPERATURE_UNITS
        to_unit: One of TEMPERATURE_UNITS

    Returns:
        Converted temperature

    Raises:
        InvalidUnit: If either unit is not a temperature unit
    """
    celsius = _to_celsius(value, from_unit)
    if from_unit == to_unit:
        return value
    return _from_celsius(celsius, to_unit)


# =============================================================================
# Fuel economy (reciprocal, pivots through liters per 100 km)
# =============================================================================

FUEL_ECONOMY_UNITS = ["mpg-us", "mpg-imperial", "kilometers-per-liter", "liters-per-100km"]

# L/100km = constant / unit value
_FUEL_ECONOMY_RECIPROCALS: Mapping[str, float] = MappingProxyType(
    {
        "mpg-us": 235.214583,
        "mpg-imperial": 282.480936,
        "kilometers-per-liter": 100.0,
    }
)


def _check_fuel_unit(unit: str) -> None:
    if unit not in FUEL_ECONOMY_UNITS:
        raise InvalidUnit(unit, QuantityKind.FUEL_ECONOMY.value)


def convert_fuel_economy(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert between distance-per-volume and volume-per-distance fuel economy.

    Every unit except liters-per-100km is reciprocal to the pivot, so the
    value is divided into a constant rather than multiplied by a factor.
    A value of 0 returns 0 instead of dividing by zero.

    Raises:
        InvalidUnit: If either unit is not a fuel economy unit
    """
    _check_fuel_unit(from_unit)
    _check_fuel_unit(to_unit)

    if value == 0:
        return 0.0
    if from_unit == to_unit:
        return value

    if from_unit == "liters-per-100km":
        liters_per_100km = value
    else:
        liters_per_100km = _FUEL_ECONOMY_RECIPROCALS[from_unit] / value

    if to_unit == "liters-per-100km":
        return liters_per_100km
    return _FUEL_ECONOMY_RECIPROCALS[to_unit] / liters_per_100km


# =============================================================================
# Dispatch
# =============================================================================


def get_table(quantity: QuantityKind) -> UnitTable:
    """
    Factor table for a multiplicative quantity.

    Raises:
        ValueError: For temperature and fuel economy, which have no table
    """
    quantity = QuantityKind(quantity)
    try:
        return FACTOR_TABLES[quantity]
    except KeyError:
        raise ValueError(f"{quantity.value} has no multiplicative factor table") from None


def list_units(quantity: QuantityKind) -> List[Dict[str, str]]:
    """Selectable units for a quantity, as value/label pairs."""
    quantity = QuantityKind(quantity)
    if quantity == QuantityKind.TEMPERATURE:
        keys = TEMPERATURE_UNITS
    elif quantity == QuantityKind.FUEL_ECONOMY:
        keys = FUEL_ECONOMY_UNITS
    else:
        keys = FACTOR_TABLES[quantity].units
    return [{"value": key, "label": unit_label(key)} for key in keys]


def convert(value: float, from_unit: str, to_unit: str, quantity: QuantityKind) -> float:
    """
    Convert `value` between two units of `quantity`.

    Args:
        value: Value to convert (no sign validation)
        from_unit: Unit key of `value`
        to_unit: Target unit key
        quantity: QuantityKind (or its string value)

    Returns:
        Converted value

    Raises:
        InvalidUnit: If either unit is not defined for the quantity
        ValueError: If `quantity` is not a known QuantityKind
    """
    quantity = QuantityKind(quantity)
    logger.debug("Converting %s %s -> %s (%s)", value, from_unit, to_unit, quantity.value)

    if quantity == QuantityKind.TEMPERATURE:
        return convert_temperature(value, from_unit, to_unit)
    if quantity == QuantityKind.FUEL_ECONOMY:
        return convert_fuel_economy(value, from_unit, to_unit)
    return FACTOR_TABLES[quantity].convert(value, from_unit, to_unit)
