"""
Calculation Engine

Pure calculation modules for the unit converters and algebra calculators.
Nothing here performs I/O or keeps state between calls.
"""

from calckit.calculations import (
    absolute_value,
    bessel,
    combinatorics,
    electrical,
    materials,
    polynomials,
    units,
)

__all__ = [
    "absolute_value",
    "bessel",
    "combinatorics",
    "electrical",
    "materials",
    "polynomials",
    "units",
]
