import math
from typing import Callable, Iterable, List

from .exceptions import EvalError
from .logging import log
from .parser import compile_formula
from .types import Sample

DEFAULT_STEPS = 1000


def generate_points(
    formula: str, x_min: float, x_max: float, step_count: int = DEFAULT_STEPS
) -> List[Sample]:
    """
    Evaluate formula at step_count + 1 evenly spaced points of the
    [x_min, x_max] interval.

    Points in which the formula cannot be evaluated are silently dropped,
    hence the result may be sparse or even empty. A step_count smaller
    than 1 also yields an empty list. It never raises an evaluation error.
    """
    if step_count < 1:
        log.debug(f"cannot sample formula with {step_count} steps")
        return []
    xs = linspace(x_min, x_max, step_count)
    try:
        expr = compile_formula(formula)
    except EvalError as exc:
        log.debug(f"cannot sample formula: {exc}")
        return []
    return sample(expr, xs)


def sample(func: Callable[[float], float], xs: Iterable[float]) -> List[Sample]:
    """
    Return the list of samples (x, func(x)) for each x in xs in which func
    succeeds with a finite value.
    """
    points = []
    for x in xs:
        try:
            y = func(x)
        except EvalError as exc:
            log.debug(f"skipping x = {x}: {exc}")
            continue
        if math.isfinite(y):
            points.append(Sample(x, y))
    return points


def linspace(start: float, stop: float, steps: int) -> List[float]:
    """
    Return steps + 1 evenly spaced values from min(start, stop) up to
    max(start, stop), both included.
    """
    if steps < 1:
        raise ValueError(f"number of steps must be positive, got {steps}")
    if start > stop:
        start, stop = stop, start
    step = (stop - start) / steps
    xs = [start + i * step for i in range(steps)]
    xs.append(stop)
    return xs
