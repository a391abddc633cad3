"""
Absolute Value Equations and Inequalities

Solves |ax + b| = c and |ax + b| (<, <=, >, >=) c for real x, a != 0.

An absolute value is never negative, so a negative right-hand side means
the equation has no solution and the inequality is either never or always
true. Otherwise the problem splits into the two linear cases
ax + b = c and ax + b = -c.
"""

from typing import Dict, List

from calckit.calculations.formatting import format_number

INEQUALITIES = ("<", "<=", ">", ">=")


def _check_coefficient(a: float) -> None:
    if a == 0:
        raise ValueError('Coefficient "a" cannot be zero')


def _linear(a: float, b: float) -> str:
    """Render ax + b, e.g. "2x - 3"."""
    if a == 1:
        text = "x"
    elif a == -1:
        text = "-x"
    else:
        text = f"{format_number(a)}x"
    if b > 0:
        text += f" + {format_number(b)}"
    elif b < 0:
        text += f" - {format_number(-b)}"
    return text


def _expression(a: float, b: float) -> str:
    return f"|{_linear(a, b)}|"


def solve_absolute_value_equation(a: float, b: float, c: float) -> Dict:
    """
    Solve |ax + b| = c.

    Returns:
        Dict with "solutions" (ascending list of floats, possibly empty) and
        "explanation"

    Raises:
        ValueError: If a is zero
    """
    _check_coefficient(a)
    expr = _expression(a, b)
    linear = _linear(a, b)

    if c < 0:
        return {
            "solutions": [],
            "explanation": (
                f"{expr} = {format_number(c)} has no solution because an "
                f"absolute value can never be negative."
            ),
        }

    if c == 0:
        x = -b / a
        return {
            "solutions": [x],
            "explanation": (
                f"{expr} = 0 only when the inside is zero: "
                f"{linear} = 0, so x = {format_number(x)}."
            ),
        }

    x1 = (c - b) / a
    x2 = (-c - b) / a
    solutions: List[float] = sorted([x1, x2])
    return {
        "solutions": solutions,
        "explanation": (
            f"Split into two equations: {linear} = "
            f"{format_number(c)} gives x = {format_number(x1)}, and "
            f"{linear} = {format_number(-c)} gives "
            f"x = {format_number(x2)}."
        ),
    }


def solve_absolute_value_inequality(a: float, b: float, inequality: str, c: float) -> Dict:
    """
    Solve |ax + b| <op> c.

    Returns:
        Dict with "solution" (inequality form), "interval" (interval
        notation) and "explanation"

    Raises:
        ValueError: If a is zero or the inequality operator is unknown
    """
    _check_coefficient(a)
    if inequality not in INEQUALITIES:
        raise ValueError(f"Unsupported inequality '{inequality}'")

    expr = f"{_expression(a, b)} {inequality} {format_number(c)}"
    linear = _linear(a, b)
    less = inequality in ("<", "<=")
    strict = inequality in ("<", ">")

    if c < 0 or (c == 0 and inequality in ("<", ">=")):
        # Never negative: "< c" is impossible, ">= c" always holds
        if less:
            return {
                "solution": "No solution",
                "interval": "∅",
                "explanation": f"{expr} has no solution because an absolute value is never negative.",
            }
        return {
            "solution": "All real numbers",
            "interval": "(-∞, ∞)",
            "explanation": f"{expr} holds for every x because an absolute value is never negative.",
        }

    if c == 0:
        x = format_number(-b / a)
        if inequality == "<=":
            return {
                "solution": f"x = {x}",
                "interval": f"{{{x}}}",
                "explanation": f"{expr} only when the inside equals zero, at x = {x}.",
            }
        return {
            "solution": f"x ≠ {x}",
            "interval": f"(-∞, {x}) ∪ ({x}, ∞)",
            "explanation": f"{expr} everywhere except where the inside equals zero, at x = {x}.",
        }

    low, high = sorted([(-c - b) / a, (c - b) / a])
    lo, hi = format_number(low), format_number(high)

    if less:
        op = "<" if strict else "<="
        open_, close = ("(", ")") if strict else ("[", "]")
        return {
            "solution": f"{lo} {op} x {op} {hi}",
            "interval": f"{open_}{lo}, {hi}{close}",
            "explanation": (
                f"{expr} means {format_number(-c)} {op} {linear} "
                f"{op} {format_number(c)}; solving for x gives "
                f"{lo} {op} x {op} {hi}."
            ),
        }

    op_low = "<" if strict else "<="
    op_high = ">" if strict else ">="
    close, open_ = (")", "(") if strict else ("]", "[")
    return {
        "solution": f"x {op_low} {lo} or x {op_high} {hi}",
        "interval": f"(-∞, {lo}{close} ∪ {open_}{hi}, ∞)",
        "explanation": (
            f"{expr} means {linear} {op_high} "
            f"{format_number(c)} or {linear} "
            f"{op_low} {format_number(-c)}; solving each gives x {op_low} {lo} "
            f"or x {op_high} {hi}."
        ),
    }
