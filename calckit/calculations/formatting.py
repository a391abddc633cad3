"""
Number formatting helpers shared by the calculators.
"""

import math


def format_number(value: float, precision: int = 10) -> str:
    """
    Render a number the way a person would write it.

    Integral values drop the trailing ".0"; other values are shown with up to
    `precision` significant digits, which also hides float noise such as
    0.30000000000000004.

    Args:
        value: Number to format
        precision: Maximum significant digits for non-integral values

    Returns:
        Display string
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    text = f"{value:.{precision}g}"
    # Avoid "-0" after rounding tiny negatives
    return "0" if text in ("-0", "0") else text
