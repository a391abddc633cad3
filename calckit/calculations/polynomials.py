"""
Polynomial Algebra

Single-variable polynomials in x, represented sparsely as a mapping of
exponent -> coefficient. Absent exponents have coefficient 0 and the
canonical form never stores a zero coefficient.

Supported input grammar (whitespace ignored):

    term := [+-]? coefficient? x (^ exponent)?
          | [+-]? number

e.g. "3x^2 + 2x - 5", "-x^3 + 0.5x", "7".
"""

import re
from decimal import Decimal
from typing import Dict, List

from calckit.calculations.formatting import format_number

Polynomial = Dict[int, float]

OPERATIONS = ("add", "subtract")

_TERM_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<coef>\d+(?:\.\d*)?|\.\d+)?"
    r"(?:(?P<var>x)(?:\^(?P<exp>\d+))?)?"
)

_SPLIT_RE = re.compile(r"(?=[+-])")


class ParseError(ValueError):
    """Raised when a polynomial string contains a term outside the grammar."""

    def __init__(self, term: str, text: str = ""):
        self.term = term
        self.text = text
        super().__init__(f"Could not parse term '{term}'")


def parse_polynomial(text: str) -> Polynomial:
    """
    Parse a polynomial string into an exponent -> coefficient mapping.

    Coefficients of repeated exponents are summed. Zero coefficients are
    kept here; use `canonical` to drop them.

    Args:
        text: Polynomial such as "3x^2 + 2x - 5"

    Returns:
        Exponent -> coefficient mapping

    Raises:
        ParseError: If any term does not match the grammar
    """
    compact = re.sub(r"\s+", "", text).lower()
    if not compact:
        raise ParseError(text, text)

    poly: Polynomial = {}
    for index, term in enumerate(_SPLIT_RE.split(compact)):
        if not term and index == 0:
            # Leading sign produces an empty first chunk
            continue
        match = _TERM_RE.fullmatch(term)
        if match is None or not (match.group("coef") or match.group("var")):
            raise ParseError(term, text)

        sign = -1.0 if match.group("sign") == "-" else 1.0
        coef = float(match.group("coef")) if match.group("coef") else 1.0
        if match.group("var"):
            exponent = int(match.group("exp")) if match.group("exp") else 1
        else:
            exponent = 0

        poly[exponent] = poly.get(exponent, 0.0) + sign * coef

    return poly


def canonical(poly: Polynomial) -> Polynomial:
    """Copy of `poly` without zero coefficients."""
    return {exp: coef for exp, coef in poly.items() if coef != 0}


def _format_coefficient(value: float) -> str:
    """Like format_number, but always positional so the parser accepts it."""
    text = format_number(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def format_term(coefficient: float, exponent: int) -> str:
    """Render a single term, sign included ("-x^2", "3x", "5")."""
    if exponent == 0:
        return _format_coefficient(coefficient)

    if coefficient == 1:
        coef_text = ""
    elif coefficient == -1:
        coef_text = "-"
    else:
        coef_text = _format_coefficient(coefficient)

    if exponent == 1:
        return f"{coef_text}x"
    return f"{coef_text}x^{exponent}"


def _join_terms(terms: List[str]) -> str:
    """Join signed terms with " + " / " - " separators."""
    if not terms:
        return "0"
    text = terms[0]
    for term in terms[1:]:
        if term.startswith("-"):
            text += f" - {term[1:]}"
        else:
            text += f" + {term}"
    return text


def format_polynomial(poly: Polynomial) -> str:
    """
    Serialize a polynomial in standard form (descending exponents).

    Zero coefficients are skipped; an empty polynomial renders as "0".
    """
    terms = [
        format_term(poly[exp], exp)
        for exp in sorted(poly, reverse=True)
        if poly[exp] != 0
    ]
    return _join_terms(terms)


def normalize_polynomial(text: str) -> str:
    """Parse and re-serialize a polynomial string in standard form."""
    return format_polynomial(parse_polynomial(text))


def negate(poly: Polynomial) -> Polynomial:
    return {exp: -coef for exp, coef in poly.items()}


def combine(first: Polynomial, second: Polynomial) -> Polynomial:
    """Sum like terms of two polynomials, dropping terms that cancel out."""
    result: Polynomial = {}
    for exp in set(first) | set(second):
        total = first.get(exp, 0.0) + second.get(exp, 0.0)
        if total != 0:
            result[exp] = total
    return result


def multiply(first: Polynomial, second: Polynomial) -> Polynomial:
    """Product of two polynomials."""
    result: Polynomial = {}
    for exp1, coef1 in first.items():
        for exp2, coef2 in second.items():
            exp = exp1 + exp2
            result[exp] = result.get(exp, 0.0) + coef1 * coef2
    return canonical(result)


def _group_like_terms(first: Polynomial, second: Polynomial) -> str:
    """Render "(3x^2 - x^2) + (2x + 7x) + ..." for the explanation steps."""
    groups = []
    for exp in sorted(set(first) | set(second), reverse=True):
        terms = [
            format_term(poly[exp], exp)
            for poly in (first, second)
            if poly.get(exp, 0) != 0
        ]
        if not terms:
            continue
        if len(terms) == 1:
            groups.append(terms[0])
        else:
            groups.append(f"({_join_terms(terms)})")
    return _join_terms(groups)


def add_subtract_polynomials(poly1: str, poly2: str, operation: str) -> Dict:
    """
    Add or subtract two polynomials and explain the working.

    For subtraction every term of the second polynomial is negated before
    like terms are combined. Terms whose coefficients sum to exactly zero are
    omitted from the result.

    Args:
        poly1: First polynomial string
        poly2: Second polynomial string
        operation: "add" or "subtract"

    Returns:
        Dict with "result" (standard form string) and "steps" (list of str)

    Raises:
        ParseError: If either input cannot be parsed
        ValueError: If the operation is not supported
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unsupported operation '{operation}'")

    first = canonical(parse_polynomial(poly1))
    second = canonical(parse_polynomial(poly2))
    left = format_polynomial(first)
    right = format_polynomial(second)

    operator = "+" if operation == "add" else "-"
    steps = [f"Original problem: ({left}) {operator} ({right})"]

    if operation == "subtract":
        second = negate(second)
        steps.append(
            f"Distribute the negative sign: ({left}) + ({format_polynomial(second)})"
        )

    steps.append(f"Group like terms: {_group_like_terms(first, second)}")

    result = format_polynomial(combine(first, second))
    steps.append(f"Combine like terms: {result}")

    return {"result": result, "steps": steps}


def multiply_polynomials_box(poly1: str, poly2: str) -> Dict:
    """
    Multiply two polynomials with the box (area) method.

    The terms of the first polynomial label the rows, the terms of the second
    label the columns, and each cell holds the product of its row and column
    terms.

    Returns:
        Dict with "box" (row_headers, col_headers, rows), "steps" and
        "final_answer"

    Raises:
        ParseError: If either input cannot be parsed
    """
    first = canonical(parse_polynomial(poly1))
    second = canonical(parse_polynomial(poly2))
    if not first or not second:
        return {
            "box": {"row_headers": [], "col_headers": [], "rows": []},
            "steps": ["One of the polynomials is zero, so the product is 0."],
            "final_answer": "0",
        }

    row_terms = sorted(first.items(), reverse=True)
    col_terms = sorted(second.items(), reverse=True)

    rows = []
    cells: Polynomial = {}
    for exp1, coef1 in row_terms:
        row = []
        for exp2, coef2 in col_terms:
            exp, coef = exp1 + exp2, coef1 * coef2
            row.append(format_term(coef, exp))
            cells[exp] = cells.get(exp, 0.0) + coef
        rows.append(row)

    final_answer = format_polynomial(canonical(cells))
    all_cells = _join_terms([cell for row in rows for cell in row])
    steps = [
        f"Set up the box: rows for ({format_polynomial(first)}), "
        f"columns for ({format_polynomial(second)})",
        "Multiply each row term by each column term to fill the box",
        f"Add all cells: {all_cells}",
        f"Combine like terms: {final_answer}",
    ]

    return {
        "box": {
            "row_headers": [format_term(coef, exp) for exp, coef in row_terms],
            "col_headers": [format_term(coef, exp) for exp, coef in col_terms],
            "rows": rows,
        },
        "steps": steps,
        "final_answer": final_answer,
    }
