from typing import Callable, Iterable, Optional

from .exceptions import EvalError
from .logging import log
from .parser import compile_formula
from .types import LimitResult

LIMIT_STEPS = (0.1, 0.01, 0.001, 0.0001)
DEFAULT_EPSILON = 1e-3


def limit(formula: str, a: float, epsilon: float = DEFAULT_EPSILON) -> LimitResult:
    """
    Estimate the limit of formula as x approaches a.

    The formula is evaluated at a - s and a + s for each step s in
    LIMIT_STEPS. Each one-sided limit is the value obtained with the smallest
    step that could be evaluated. The limit exists if both sides are
    available and differ by less than epsilon, in which case it is their
    average. If only one side is available, it is reported as the limit but
    ``exists`` is False.
    """
    try:
        f = compile_formula(formula)
    except EvalError as exc:
        log.debug(f"cannot estimate limit: {exc}")
        return LimitResult(None, None, None, False)

    left = approach(f, a, [-step for step in LIMIT_STEPS])
    right = approach(f, a, LIMIT_STEPS)

    if left is not None and right is not None:
        if abs(left - right) < epsilon:
            return LimitResult(left, right, (left + right) / 2, True)
        return LimitResult(left, right, None, False)
    elif left is not None:
        return LimitResult(left, None, left, False)
    elif right is not None:
        return LimitResult(None, right, right, False)
    return LimitResult(None, None, None, False)


def approach(
    func: Callable[[float], float], a: float, offsets: Iterable[float]
) -> Optional[float]:
    """
    Evaluate func(a + offset) for each offset and return the last value that
    could be computed, or None.
    """
    value = None
    for offset in offsets:
        try:
            value = func(a + offset)
        except EvalError as exc:
            log.debug(f"skipping x = {a + offset}: {exc}")
    return value
