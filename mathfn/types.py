import math
from typing import NamedTuple, Optional, List


class Sample(NamedTuple):
    """
    A point (x, f(x)) of a sampled function.
    """

    x: float
    y: float


class CalculationResult(NamedTuple):
    """
    Result of a numerical estimate.

    Callers must check ``error`` (or ``ok``) before trusting the value: a
    failed calculation reports a sentinel value of 0.0.
    """

    value: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RiemannRectangle(NamedTuple):
    """
    Bar of a Riemann sum. Bars of negative function values lie below the
    axis, i.e., y is the lowest corner and height is always non-negative.
    """

    x: float
    y: float
    width: float
    height: float


class RiemannSum(NamedTuple):
    value: float
    rectangles: List[RiemannRectangle]
    skipped: int = 0


class LimitResult(NamedTuple):
    left_limit: Optional[float]
    right_limit: Optional[float]
    limit: Optional[float]
    exists: bool


class Line(NamedTuple):
    """
    Straight line through point.

    Vertical lines have an infinite slope, a NaN intercept and an equation
    of the form "x = constant".
    """

    slope: float
    intercept: float
    equation: str
    point: Sample

    @property
    def vertical(self) -> bool:
        return math.isinf(self.slope)
