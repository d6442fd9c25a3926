"""
Numerical quadrature of formulas over a closed interval.
"""
import enum
import math
from typing import Union

from .exceptions import EvalError
from .logging import log
from .parser import compile_formula, Expression
from .types import CalculationResult, RiemannRectangle, RiemannSum

DEFAULT_SUBINTERVALS = 1000
INTEGRAL_ERROR = "integral unavailable"


class Method(enum.Enum):
    """
    Integration methods accepted by :func:`integrate`.
    """

    SIMPSON = "simpson"
    TRAPEZOIDAL = "trapezoidal"
    RIEMANN = "riemann"


def integral(
    formula: str, a: float, b: float, n: int = DEFAULT_SUBINTERVALS
) -> CalculationResult:
    """
    Integrate formula from a to b using the composite Simpson's rule.

    An odd number of subintervals is rounded up to the next even number. If
    any evaluation fails, or n is smaller than 1, the whole integral is
    reported as unavailable.
    """
    if not is_valid_subintervals(n):
        return CalculationResult(0.0, INTEGRAL_ERROR)
    if n % 2:
        n += 1
    h = (b - a) / n

    def weighted_sum(f: Expression):
        total = f(a) + f(b)
        for i in range(1, n):
            total += (4 if i % 2 else 2) * f(a + i * h)
        return total

    return quadrature(formula, weighted_sum, h / 3)


def trapezoid(
    formula: str, a: float, b: float, n: int = DEFAULT_SUBINTERVALS
) -> CalculationResult:
    """
    Integrate formula from a to b using the composite trapezoidal rule.
    """
    if not is_valid_subintervals(n):
        return CalculationResult(0.0, INTEGRAL_ERROR)
    h = (b - a) / n

    def weighted_sum(f: Expression):
        total = f(a) + f(b)
        for i in range(1, n):
            total += 2 * f(a + i * h)
        return total

    return quadrature(formula, weighted_sum, h / 2)


def riemann_sum(formula: str, a: float, b: float, n: int) -> RiemannSum:
    """
    Midpoint Riemann sum of formula over n subintervals of [a, b].

    Also return one rectangle per subinterval for display. Subintervals in
    which the midpoint cannot be evaluated are skipped from both the sum and
    the list of rectangles and counted in the ``skipped`` field. The width
    of the remaining rectangles is not adjusted, so the sum is biased when
    some subintervals are skipped. With n smaller than 1 the sum is empty.
    """
    if not is_valid_subintervals(n):
        return RiemannSum(0.0, [], 0)
    dx = (b - a) / n
    try:
        f = compile_formula(formula)
    except EvalError as exc:
        log.debug(f"{INTEGRAL_ERROR}: {exc}")
        return RiemannSum(0.0, [], n)

    total = 0.0
    rectangles = []
    for i in range(n):
        x = a + i * dx
        try:
            height = f(x + dx / 2)
        except EvalError as exc:
            log.debug(f"skipping subinterval at x = {x}: {exc}")
            continue
        total += height * dx
        rectangles.append(RiemannRectangle(x, min(0.0, height), dx, abs(height)))
    return RiemannSum(total, rectangles, n - len(rectangles))


def integrate(
    formula: str,
    a: float,
    b: float,
    n: int = DEFAULT_SUBINTERVALS,
    method: Union[str, Method] = Method.SIMPSON,
) -> CalculationResult:
    """
    Integrate formula from a to b with the chosen method.

    Args:
        formula:
            Formula in the variable x.
        a, b:
            Integration bounds.
        n:
            Number of subintervals.
        method:
            One of "simpson", "trapezoidal" or "riemann" (or the equivalent
            :class:`Method` members).
    """
    method = Method(method)
    if method is Method.SIMPSON:
        return integral(formula, a, b, n)
    elif method is Method.TRAPEZOIDAL:
        return trapezoid(formula, a, b, n)

    result = riemann_sum(formula, a, b, n)
    if not result.rectangles:
        return CalculationResult(0.0, INTEGRAL_ERROR)
    return CalculationResult(result.value)


#
# Utilities
#
def quadrature(formula, weighted_sum, scale) -> CalculationResult:
    try:
        f = compile_formula(formula)
        value = scale * weighted_sum(f)
    except EvalError as exc:
        log.debug(f"{INTEGRAL_ERROR}: {exc}")
        return CalculationResult(0.0, INTEGRAL_ERROR)
    if not math.isfinite(value):
        log.debug(f"{INTEGRAL_ERROR}: integral of {formula!r} is not finite")
        return CalculationResult(0.0, INTEGRAL_ERROR)
    return CalculationResult(value)


def is_valid_subintervals(n) -> bool:
    if n < 1:
        log.debug(f"{INTEGRAL_ERROR}: number of subintervals must be positive, got {n}")
        return False
    return True
