import math
from typing import Callable, List

from .exceptions import EvalError
from .logging import log
from .parser import compile_formula
from .sampling import linspace
from .types import CalculationResult, Sample

DEFAULT_STEP = 1e-4
DEFAULT_DERIVATIVE_STEPS = 500
DERIVATIVE_ERROR = "derivative unavailable"


def derivative(formula: str, x: float, h: float = DEFAULT_STEP) -> CalculationResult:
    """
    Approximate f'(x) by the forward difference (f(x + h) - f(x)) / h.

    Failures are reported in the error field of the result instead of
    raised. This includes a zero or non-finite step h.
    """
    if not is_valid_step(h):
        return CalculationResult(0.0, DERIVATIVE_ERROR)
    try:
        expr = compile_formula(formula)
    except EvalError as exc:
        log.debug(f"{DERIVATIVE_ERROR}: {exc}")
        return CalculationResult(0.0, DERIVATIVE_ERROR)
    return forward_difference(expr, x, h)


def derivative_points(
    formula: str,
    x_min: float,
    x_max: float,
    step_count: int = DEFAULT_DERIVATIVE_STEPS,
    h: float = DEFAULT_STEP,
) -> List[Sample]:
    """
    Sample the derivative of formula over [x_min, x_max].

    Works like :func:`mathfn.generate_points` and drops points in which the
    derivative is unavailable or not finite.
    """
    if step_count < 1:
        log.debug(f"cannot sample derivative with {step_count} steps")
        return []
    if not is_valid_step(h):
        return []
    xs = linspace(x_min, x_max, step_count)
    try:
        expr = compile_formula(formula)
    except EvalError as exc:
        log.debug(f"{DERIVATIVE_ERROR}: {exc}")
        return []

    points = []
    for x in xs:
        result = forward_difference(expr, x, h)
        if result.ok:
            points.append(Sample(x, result.value))
    return points


def forward_difference(
    func: Callable[[float], float], x: float, h: float = DEFAULT_STEP
) -> CalculationResult:
    """
    Like :func:`difference_quotient`, but wraps the result or failure in a
    CalculationResult.

    A quotient that overflows is also reported as a failure.
    """
    try:
        value = difference_quotient(func, x, h)
    except EvalError as exc:
        log.debug(f"{DERIVATIVE_ERROR} at x = {x}: {exc}")
        return CalculationResult(0.0, DERIVATIVE_ERROR)
    if not math.isfinite(value):
        log.debug(f"{DERIVATIVE_ERROR} at x = {x}: difference quotient is {value}")
        return CalculationResult(0.0, DERIVATIVE_ERROR)
    return CalculationResult(value)


def difference_quotient(
    func: Callable[[float], float], x: float, h: float = DEFAULT_STEP
) -> float:
    """
    Return (func(x + h) - func(x)) / h.

    Evaluation errors propagate to the caller.
    """
    return (func(x + h) - func(x)) / h


def is_valid_step(h) -> bool:
    if h == 0 or not math.isfinite(h):
        log.debug(f"{DERIVATIVE_ERROR}: step must be a non-zero finite number, got {h}")
        return False
    return True
