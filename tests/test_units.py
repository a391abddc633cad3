"""
Tests for the unit conversion engine.
"""

import math
import pytest

from calckit.calculations.units import (
    FACTOR_TABLES,
    FUEL_ECONOMY_UNITS,
    LENGTH,
    TEMPERATURE_UNITS,
    InvalidUnit,
    QuantityKind,
    UnitTable,
    convert,
    convert_fuel_economy,
    convert_temperature,
    get_table,
    list_units,
    unit_label,
)


class TestUnitTable:
    """Test the generic factor table."""

    def test_base_unit_factor_is_one(self):
        """Every table's base unit has factor exactly 1."""
        for table in FACTOR_TABLES.values():
            assert table.factors[table.base_unit] == 1

    def test_base_unit_must_be_one(self):
        """A table whose base unit factor is not 1 is rejected."""
        with pytest.raises(ValueError):
            UnitTable("bogus", "meter", {"meter": 2.0, "foot": 0.3048})

    def test_factors_are_read_only(self):
        """Factor tables cannot be mutated after construction."""
        with pytest.raises(TypeError):
            LENGTH.factors["furlong"] = 201.168

    def test_unknown_unit_raises(self):
        """Unknown units raise InvalidUnit naming the unit and quantity."""
        with pytest.raises(InvalidUnit) as exc_info:
            LENGTH.convert(1, "furlong", "meter")
        assert exc_info.value.unit == "furlong"
        assert exc_info.value.quantity == "length"
        assert "furlong" in str(exc_info.value)

    def test_invalid_unit_is_value_error(self):
        """InvalidUnit can be handled as a ValueError."""
        with pytest.raises(ValueError):
            LENGTH.convert(1, "meter", "parsec")

    def test_to_and_from_base(self):
        """to_base/from_base multiply and divide by the factor."""
        assert LENGTH.to_base(2, "kilometer") == 2000
        assert LENGTH.from_base(2000, "kilometer") == 2


class TestConvert:
    """Test the quantity dispatcher."""

    def test_known_fixed_points(self):
        """Reference conversions."""
        assert convert(1, "kilometer", "meter", QuantityKind.LENGTH) == 1000
        assert convert(1, "mile", "meter", QuantityKind.LENGTH) == pytest.approx(1609.344)
        assert convert(1, "foot", "inch", QuantityKind.LENGTH) == pytest.approx(12)
        assert convert(1, "pound", "ounce", QuantityKind.WEIGHT) == pytest.approx(16)
        assert convert(1, "acre", "square-foot", QuantityKind.AREA) == pytest.approx(43_560)
        assert convert(1, "gallon-us", "liter", QuantityKind.VOLUME) == pytest.approx(3.785411784)
        assert convert(1, "cup", "tablespoon", QuantityKind.COOKING) == pytest.approx(16)
        assert convert(1, "day", "hour", QuantityKind.TIME) == 24
        assert convert(36, "kilometer-per-hour", "meter-per-second", QuantityKind.SPEED) == pytest.approx(10)
        assert convert(1, "kibibyte", "byte", QuantityKind.DATA_STORAGE) == 1024
        assert convert(1, "megabyte-per-second", "megabit-per-second", QuantityKind.DATA_TRANSFER) == 8
        assert convert(1, "kilowatt-hour", "joule", QuantityKind.ENERGY) == 3.6e6
        assert convert(1, "atmosphere", "pascal", QuantityKind.PRESSURE) == 101_325
        assert convert(760, "torr", "atmosphere", QuantityKind.PRESSURE) == pytest.approx(1)
        assert convert(1, "gram-per-cubic-centimeter", "kilogram-per-cubic-meter", QuantityKind.DENSITY) == 1000
        assert convert(60, "revolution-per-minute", "hertz", QuantityKind.FREQUENCY) == pytest.approx(1)
        assert convert(180, "degree", "radian", QuantityKind.ANGLE) == pytest.approx(math.pi)
        assert convert(1, "kilogram-force", "newton", QuantityKind.FORCE) == pytest.approx(9.80665)

    def test_accepts_quantity_string(self):
        """The quantity may be passed as its string value."""
        assert convert(1, "kilometer", "meter", "length") == 1000

    def test_unknown_quantity(self):
        """An unknown quantity is a ValueError."""
        with pytest.raises(ValueError):
            convert(1, "meter", "foot", "distance")

    def test_identity_is_exact(self):
        """Converting a unit to itself returns the value unchanged."""
        for quantity, table in FACTOR_TABLES.items():
            for unit in table.units:
                assert convert(0.1, unit, unit, quantity) == 0.1
        for unit in TEMPERATURE_UNITS:
            assert convert(-40.5, unit, unit, QuantityKind.TEMPERATURE) == -40.5
        for unit in FUEL_ECONOMY_UNITS:
            assert convert(23.7, unit, unit, QuantityKind.FUEL_ECONOMY) == 23.7

    def test_round_trip(self):
        """Converting there and back returns the original value."""
        for quantity, table in FACTOR_TABLES.items():
            for from_unit in table.units:
                for to_unit in table.units:
                    there = convert(123.456, from_unit, to_unit, quantity)
                    back = convert(there, to_unit, from_unit, quantity)
                    assert back == pytest.approx(123.456, rel=1e-12)

    def test_negative_values_pass_through(self):
        """The engine does not validate signs."""
        assert convert(-1, "kilometer", "meter", QuantityKind.LENGTH) == -1000

    def test_invalid_unit_for_quantity(self):
        """A valid unit of another quantity is still invalid."""
        with pytest.raises(InvalidUnit):
            convert(1, "kilogram", "meter", QuantityKind.LENGTH)


class TestTemperature:
    """Test affine temperature conversion."""

    def test_fixed_points(self):
        """Freezing and boiling points of water."""
        assert convert(0, "celsius", "fahrenheit", QuantityKind.TEMPERATURE) == 32
        assert convert(100, "celsius", "fahrenheit", QuantityKind.TEMPERATURE) == 212
        assert convert_temperature(0, "celsius", "kelvin") == 273.15
        assert convert_temperature(32, "fahrenheit", "celsius") == 0
        assert convert_temperature(0, "kelvin", "celsius") == -273.15

    def test_minus_forty(self):
        """-40 is the same in Celsius and Fahrenheit."""
        assert convert_temperature(-40, "celsius", "fahrenheit") == pytest.approx(-40)
        assert convert_temperature(-40, "fahrenheit", "celsius") == pytest.approx(-40)

    def test_fahrenheit_to_kelvin(self):
        """Conversions between non-Celsius units pivot through Celsius."""
        assert convert_temperature(212, "fahrenheit", "kelvin") == pytest.approx(373.15)

    def test_invalid_unit(self):
        """Rankine is not supported."""
        with pytest.raises(InvalidUnit):
            convert_temperature(1, "rankine", "celsius")
        with pytest.raises(InvalidUnit):
            convert_temperature(1, "celsius", "rankine")


class TestFuelEconomy:
    """Test reciprocal fuel economy conversion."""

    def test_zero_guard(self):
        """Zero converts to zero instead of infinity."""
        assert convert_fuel_economy(0, "mpg-us", "liters-per-100km") == 0
        assert convert_fuel_economy(0, "liters-per-100km", "kilometers-per-liter") == 0

    def test_reciprocal_relationship(self):
        """Higher MPG means fewer liters per 100 km."""
        low = convert_fuel_economy(20, "mpg-us", "liters-per-100km")
        high = convert_fuel_economy(40, "mpg-us", "liters-per-100km")
        assert high < low
        assert low == pytest.approx(2 * high)

    def test_known_values(self):
        """Reference conversions."""
        assert convert_fuel_economy(10, "kilometers-per-liter", "liters-per-100km") == pytest.approx(10)
        assert convert_fuel_economy(1, "mpg-us", "liters-per-100km") == pytest.approx(235.214583)
        assert convert_fuel_economy(30, "mpg-us", "mpg-imperial") == pytest.approx(36.0285, rel=1e-4)

    def test_round_trip(self):
        """Every pair converts there and back."""
        for from_unit in FUEL_ECONOMY_UNITS:
            for to_unit in FUEL_ECONOMY_UNITS:
                there = convert_fuel_economy(25.0, from_unit, to_unit)
                assert convert_fuel_economy(there, to_unit, from_unit) == pytest.approx(25.0)

    def test_invalid_unit(self):
        """Unknown fuel units raise InvalidUnit even for zero."""
        with pytest.raises(InvalidUnit):
            convert_fuel_economy(0, "mpg-metric", "mpg-us")


class TestUnitListing:
    """Test unit enumeration for selection menus."""

    def test_length_units(self):
        """Length offers the documented units."""
        values = [option["value"] for option in list_units(QuantityKind.LENGTH)]
        assert values == [
            "nanometer", "micron", "millimeter", "centimeter", "meter", "kilometer",
            "inch", "foot", "yard", "mile", "nautical-mile",
        ]

    def test_listing_matches_lookup(self):
        """Every listed unit is accepted by convert."""
        for quantity in QuantityKind:
            for option in list_units(quantity):
                convert(1.0, option["value"], option["value"], quantity)

    def test_labels(self):
        """Labels are derived from the keys."""
        assert unit_label("nautical-mile") == "Nautical Mile"

    def test_get_table(self):
        """Multiplicative quantities have tables, temperature does not."""
        assert get_table(QuantityKind.LENGTH) is LENGTH
        with pytest.raises(ValueError):
            get_table(QuantityKind.TEMPERATURE)
