"""
Algebra calculator API endpoints.
"""

import logging
import math
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from calckit.calculations import absolute_value, bessel, combinatorics, polynomials

logger = logging.getLogger(__name__)

router = APIRouter()


class PolynomialInput(BaseModel):
    """Input for polynomial addition or subtraction."""

    poly1: str
    poly2: str
    operation: Literal["add", "subtract"] = "add"


class PolynomialResponse(BaseModel):
    """Combined polynomial with the working."""

    result: str
    steps: List[str]


class BoxMultiplyInput(BaseModel):
    """Input for box method multiplication."""

    poly1: str
    poly2: str


class Box(BaseModel):
    """Box method grid."""

    row_headers: List[str]
    col_headers: List[str]
    rows: List[List[str]]


class BoxMultiplyResponse(BaseModel):
    """Box method grid, working and product."""

    box: Box
    steps: List[str]
    final_answer: str


class BesselInput(BaseModel):
    """Input for Bessel function evaluation."""

    order: int = 0
    x: float = 1.0


class BesselResponse(BaseModel):
    """Jn(x) and Yn(x).

    JSON has no representation for -infinity, so Yn(0) is returned as
    ``y = null`` with ``y_singular = true``.
    """

    order: int
    x: float
    j: float
    y: Optional[float] = None
    y_singular: bool = False


class BinomialInput(BaseModel):
    """Input for C(n, k)."""

    n: int = Field(le=combinatorics.MAX_N)
    k: int


class BinomialResponse(BaseModel):
    """C(n, k) with explanation."""

    result: int
    log10_result: float
    explanation: str


class AbsoluteValueEquationInput(BaseModel):
    """Coefficients of |ax + b| = c."""

    a: float
    b: float = 0.0
    c: float


class AbsoluteValueEquationResponse(BaseModel):
    """Solutions of |ax + b| = c."""

    solutions: List[float]
    explanation: str


class AbsoluteValueInequalityInput(BaseModel):
    """Coefficients of |ax + b| <op> c."""

    a: float
    b: float = 0.0
    inequality: Literal["<", "<=", ">", ">="] = "<"
    c: float


class AbsoluteValueInequalityResponse(BaseModel):
    """Solution set of |ax + b| <op> c."""

    solution: str
    interval: str
    explanation: str


@router.post("/polynomials/add-subtract", response_model=PolynomialResponse)
async def add_subtract_polynomials(inputs: PolynomialInput):
    """Add or subtract two polynomials."""
    try:
        result = polynomials.add_subtract_polynomials(
            inputs.poly1, inputs.poly2, inputs.operation
        )
    except ValueError as e:
        logger.warning(f"Rejected polynomial input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return PolynomialResponse(**result)


@router.post("/polynomials/multiply", response_model=BoxMultiplyResponse)
async def multiply_polynomials(inputs: BoxMultiplyInput):
    """Multiply two polynomials with the box method."""
    try:
        result = polynomials.multiply_polynomials_box(inputs.poly1, inputs.poly2)
    except ValueError as e:
        logger.warning(f"Rejected polynomial input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return BoxMultiplyResponse(**result)


@router.post("/bessel", response_model=BesselResponse)
async def evaluate_bessel(inputs: BesselInput):
    """Evaluate Bessel functions of the first and second kind."""
    try:
        j_val = bessel.bessel_j(inputs.order, inputs.x)
        y_val = bessel.bessel_y(inputs.order, inputs.x) if inputs.x >= 0 else None
    except ValueError as e:
        logger.warning(f"Rejected Bessel input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    y_singular = y_val is not None and math.isinf(y_val)

    return BesselResponse(
        order=inputs.order,
        x=inputs.x,
        j=j_val,
        y=None if y_singular else y_val,
        y_singular=y_singular,
    )


@router.post("/binomial-coefficient", response_model=BinomialResponse)
async def binomial_coefficient(inputs: BinomialInput):
    """Calculate the binomial coefficient C(n, k)."""
    try:
        result = combinatorics.calculate_binomial_coefficient(inputs.n, inputs.k)
    except ValueError as e:
        logger.warning(f"Rejected binomial input: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return BinomialResponse(**result)


@router.post("/absolute-value/equation", response_model=AbsoluteValueEquationResponse)
async def absolute_value_equation(inputs: AbsoluteValueEquationInput):
    """Solve |ax + b| = c."""
    try:
        result = absolute_value.solve_absolute_value_equation(inputs.a, inputs.b, inputs.c)
    except ValueError as e:
        logger.warning(f"Rejected absolute value equation: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return AbsoluteValueEquationResponse(**result)


@router.post("/absolute-value/inequality", response_model=AbsoluteValueInequalityResponse)
async def absolute_value_inequality(inputs: AbsoluteValueInequalityInput):
    """Solve |ax + b| <op> c."""
    try:
        result = absolute_value.solve_absolute_value_inequality(
            inputs.a, inputs.b, inputs.inequality, inputs.c
        )
    except ValueError as e:
        logger.warning(f"Rejected absolute value inequality: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return AbsoluteValueInequalityResponse(**result)
