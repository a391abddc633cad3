"""
Ohm's Law Calculator

Relates voltage (V), current (I), resistance (R) and power (P):

    V = I * R
    P = V * I

Any two of the four determine the other two.
"""

import math
from typing import Dict, Optional

QUANTITIES = ("voltage", "current", "resistance", "power")


def calculate_ohms_law(
    voltage: Optional[float] = None,
    current: Optional[float] = None,
    resistance: Optional[float] = None,
    power: Optional[float] = None,
    target: Optional[str] = None,
) -> Dict[str, float]:
    """
    Derive all four electrical quantities from any two known ones.

    Args:
        voltage: Volts
        current: Amperes
        resistance: Ohms
        power: Watts
        target: Quantity being solved for; a value supplied for it is ignored

    Returns:
        Dict with voltage, current, resistance and power

    Raises:
        ValueError: If fewer than two quantities are known, or the known
            values make the result undefined (division by zero)
    """
    if target is not None and target not in QUANTITIES:
        raise ValueError(f"Unknown quantity '{target}'")

    known = {
        name: value
        for name, value in zip(QUANTITIES, (voltage, current, resistance, power))
        if value is not None and name != target
    }
    if len(known) < 2:
        raise ValueError("At least two of voltage, current, resistance and power are required")

    v = known.get("voltage")
    i = known.get("current")
    r = known.get("resistance")
    p = known.get("power")

    try:
        if v is not None and i is not None:
            r = v / i
        elif v is not None and r is not None:
            i = v / r
        elif v is not None and p is not None:
            i = p / v
            r = v / i
        elif i is not None and r is not None:
            v = i * r
        elif i is not None and p is not None:
            v = p / i
            r = v / i
        else:
            # resistance and power
            if p / r < 0:
                raise ValueError("Power and resistance must have the same sign")
            i = math.sqrt(p / r)
            v = i * r
    except ZeroDivisionError:
        raise ValueError("Values lead to division by zero") from None

    return {
        "voltage": v,
        "current": i,
        "resistance": r,
        "power": v * i,
    }
