import math

from .derivative import forward_difference, DEFAULT_STEP
from .parser import compile_formula
from .types import Line, Sample

EQUATION_DIGITS = 2


def tangent_line(formula: str, x0: float) -> Line:
    """
    Tangent line to the graph of formula at x0.

    The slope is the forward difference estimate of the derivative. When
    the derivative is unavailable the slope falls back to 0, as in
    :func:`mathfn.derivative`.

    Raises:
        EvalError: if the formula is invalid or f(x0) is not available.
    """
    f = compile_formula(formula)
    y0 = f(x0)
    slope = forward_difference(f, x0, DEFAULT_STEP).value
    intercept = y0 - slope * x0
    return Line(slope, intercept, format_equation(slope, intercept), Sample(x0, y0))


def normal_line(formula: str, x0: float) -> Line:
    """
    Line perpendicular to the tangent of formula at x0.

    If the tangent is horizontal, the normal is the vertical line x = x0.
    """
    tangent = tangent_line(formula, x0)
    if tangent.slope == 0:
        return vertical_line(tangent.point)

    x0, y0 = tangent.point
    slope = -1 / tangent.slope
    if not math.isfinite(slope):
        # tangent slope is subnormal
        return vertical_line(tangent.point)
    intercept = y0 - slope * x0
    return Line(slope, intercept, format_equation(slope, intercept), tangent.point)


def vertical_line(point: Sample) -> Line:
    return Line(math.inf, math.nan, f"x = {fmt(point.x)}", point)


def format_equation(slope: float, intercept: float) -> str:
    """
    Render the equation of a non-vertical line in slope-intercept form.

    Examples:
        >>> format_equation(2, -1)
        'y = 2.00x - 1.00'
        >>> format_equation(-1, 0.5)
        'y = -x + 0.50'
    """
    if slope == 0:
        return f"y = {fmt(intercept)}"
    elif slope == 1:
        term = "x"
    elif slope == -1:
        term = "-x"
    else:
        term = f"{fmt(slope)}x"
    sign = "+" if intercept >= 0 else "-"
    return f"y = {term} {sign} {fmt(abs(intercept))}"


def fmt(value: float) -> str:
    # avoid rendering negative zero as "-0.00"
    return f"{value + 0.0:.{EQUATION_DIGITS}f}"
