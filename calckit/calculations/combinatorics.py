"""
Binomial Coefficient

C(n, k) = n! / (k! (n - k)!), the number of ways to choose k items from n.

The magnitude is estimated with log-gamma, ln C(n, k) =
lgamma(n + 1) - lgamma(k + 1) - lgamma(n - k + 1), which stays finite for
inputs whose factorials would overflow a float. The exact integer value
comes from math.comb.
"""

import math
from typing import Dict

from calckit.calculations.formatting import format_number

# C(10000, 5000) has about 3000 digits, within the int-to-str conversion limit
MAX_N = 10_000


def log_binomial_coefficient(n: int, k: int) -> float:
    """Natural log of C(n, k) via log-gamma."""
    return math.lgamma(n + 1) - math.lgamma(k + 1) - math.lgamma(n - k + 1)


def calculate_binomial_coefficient(n: int, k: int) -> Dict:
    """
    Calculate C(n, k) with a short explanation.

    Args:
        n: Total number of items (non-negative integer)
        k: Number of items chosen (0 <= k <= n)

    Returns:
        Dict with "result" (exact int), "log10_result" and "explanation"

    Raises:
        ValueError: If n or k are not integers, n exceeds MAX_N, or k is
            outside 0..n
    """
    for name, value in (("n", n), ("k", k)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be a non-negative integer")
    if n > MAX_N:
        raise ValueError(f"n must be at most {MAX_N:,}")
    if k > n:
        raise ValueError("k cannot be greater than n")

    result = math.comb(n, k)
    log10_result = log_binomial_coefficient(n, k) / math.log(10)

    explanation = (
        f"C({n}, {k}) = {n}! / ({k}! × {n - k}!) = {result:,}. "
        f"There are {result:,} ways to choose {k} item{'s' if k != 1 else ''} "
        f"from a set of {n}."
    )
    if result >= 10**15:
        explanation += f" That is about 10^{format_number(round(log10_result, 2))}."

    return {
        "result": result,
        "log10_result": log10_result,
        "explanation": explanation,
    }
