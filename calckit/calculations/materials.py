"""
Material Mass/Volume Conversion

Converts between weight and volume units for a named material using its
average density. Same-dimension conversions (weight to weight, volume to
volume) do not need the density and go straight through the factor tables.
"""

from typing import Dict, List

from calckit.calculations.units import VOLUME, WEIGHT, InvalidUnit, unit_label

# Average densities at room temperature, kg/m³
MATERIAL_DENSITIES: Dict[str, float] = {
    "water": 1000,
    "ice": 917,
    "milk": 1030,
    "gasoline": 745,
    "olive-oil": 911,
    "honey": 1420,
    "flour": 593,
    "sugar": 845,
    "butter": 911,
    "sand": 1600,
    "gravel": 1680,
    "concrete": 2400,
    "wood-pine": 500,
    "aluminum": 2700,
    "steel": 7850,
    "copper": 8960,
    "gold": 19_320,
}

LITERS_PER_CUBIC_METER = 1000.0


def list_materials() -> List[Dict[str, object]]:
    """Materials with their densities, for selection menus and reference tables."""
    return [
        {"value": key, "label": unit_label(key), "density": density}
        for key, density in MATERIAL_DENSITIES.items()
    ]


def convert_material_mass_volume(
    value: float, from_unit: str, to_unit: str, material: str
) -> float:
    """
    Convert a quantity of `material` between weight and volume units.

    Args:
        value: Amount in `from_unit`
        from_unit: Any weight or volume unit key
        to_unit: Any weight or volume unit key
        material: Key of MATERIAL_DENSITIES

    Returns:
        Amount in `to_unit`

    Raises:
        ValueError: If the material is unknown
        InvalidUnit: If a unit is neither a weight nor a volume unit
    """
    if material not in MATERIAL_DENSITIES:
        raise ValueError(f"Unknown material '{material}'")
    for unit in (from_unit, to_unit):
        if unit not in WEIGHT and unit not in VOLUME:
            raise InvalidUnit(unit, "material")

    if from_unit in WEIGHT and to_unit in WEIGHT:
        return WEIGHT.convert(value, from_unit, to_unit)
    if from_unit in VOLUME and to_unit in VOLUME:
        return VOLUME.convert(value, from_unit, to_unit)

    density = MATERIAL_DENSITIES[material]
    if from_unit in WEIGHT:
        kilograms = WEIGHT.to_base(value, from_unit)
        liters = kilograms / density * LITERS_PER_CUBIC_METER
        return VOLUME.from_base(liters, to_unit)

    liters = VOLUME.to_base(value, from_unit)
    kilograms = liters / LITERS_PER_CUBIC_METER * density
    return WEIGHT.from_base(kilograms, to_unit)
