"""
Unit conversion API endpoints.

These endpoints accept a value and a pair of units and return the converted
value. Used by the converter forms for live updates.
"""

import logging
import math
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from calckit.config import get_settings
from calckit.calculations import electrical, materials, units
from calckit.calculations.units import QuantityKind

logger = logging.getLogger(__name__)

router = APIRouter()


def _display(value: float) -> str:
    """Format a result to the configured number of significant digits."""
    if not math.isfinite(value):
        raise HTTPException(status_code=400, detail="Result is out of range")
    precision = get_settings().result_precision
    return f"{value:.{precision}g}"


class UnitOption(BaseModel):
    """A selectable unit."""

    value: str
    label: str


class ConversionInput(BaseModel):
    """Input for a unit conversion."""

    value: float
    from_unit: str
    to_unit: str


class ConversionResponse(BaseModel):
    """Converted value with a display string."""

    quantity: str
    value: float
    from_unit: str
    to_unit: str
    result: float
    formatted: str


class MaterialOption(BaseModel):
    """A material with its average density."""

    value: str
    label: str
    density: float


class MaterialConversionInput(ConversionInput):
    """Input for a material mass/volume conversion."""

    material: str


class OhmsLawInput(BaseModel):
    """Known electrical quantities; at least two are required."""

    voltage: Optional[float] = None
    current: Optional[float] = None
    resistance: Optional[float] = None
    power: Optional[float] = None
    calculate: Optional[str] = None


class OhmsLawResponse(BaseModel):
    """All four electrical quantities."""

    voltage: float
    current: float
    resistance: float
    power: float


@router.get("/quantities", response_model=List[str])
async def list_quantities():
    """List the supported quantity kinds."""
    return [quantity.value for quantity in QuantityKind]


@router.get("/materials", response_model=List[MaterialOption])
async def list_materials():
    """List materials available for mass/volume conversion."""
    return materials.list_materials()


@router.post("/material", response_model=ConversionResponse)
async def convert_material(inputs: MaterialConversionInput):
    """Convert between weight and volume for a material."""
    try:
        result = materials.convert_material_mass_volume(
            inputs.value, inputs.from_unit, inputs.to_unit, inputs.material
        )
    except ValueError as e:
        logger.warning(f"Rejected material conversion: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return ConversionResponse(
        quantity="material",
        value=inputs.value,
        from_unit=inputs.from_unit,
        to_unit=inputs.to_unit,
        result=result,
        formatted=_display(result),
    )


@router.post("/ohms-law", response_model=OhmsLawResponse)
async def calculate_ohms_law(inputs: OhmsLawInput):
    """Solve Ohm's law from any two known quantities."""
    try:
        result = electrical.calculate_ohms_law(
            voltage=inputs.voltage,
            current=inputs.current,
            resistance=inputs.resistance,
            power=inputs.power,
            target=inputs.calculate,
        )
    except ValueError as e:
        logger.warning(f"Rejected Ohm's law input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return OhmsLawResponse(**result)


@router.get("/{quantity}/units", response_model=List[UnitOption])
async def list_units(quantity: QuantityKind):
    """List the units of a quantity, for populating selection menus."""
    return units.list_units(quantity)


@router.post("/{quantity}", response_model=ConversionResponse)
async def convert(quantity: QuantityKind, inputs: ConversionInput):
    """Convert a value between two units of a quantity."""
    try:
        result = units.convert(inputs.value, inputs.from_unit, inputs.to_unit, quantity)
    except units.InvalidUnit as e:
        logger.warning(f"Rejected conversion: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return ConversionResponse(
        quantity=quantity.value,
        value=inputs.value,
        from_unit=inputs.from_unit,
        to_unit=inputs.to_unit,
        result=result,
        formatted=_display(result),
    )
