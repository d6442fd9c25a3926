import math

import pytest

from mathfn import (
    integral,
    trapezoid,
    riemann_sum,
    integrate,
    Method,
    CalculationResult,
    RiemannRectangle,
    RiemannSum,
)

UNAVAILABLE = CalculationResult(0.0, "integral unavailable")


class TestSimpson:
    def test_integral(self):
        result = integral("x^2", 0, 3, 100)
        assert result.ok
        assert result.value == pytest.approx(9, abs=1e-3)

    def test_odd_number_of_subintervals_is_rounded_up(self):
        # Simpson is exact for cubics, but only with an even count
        assert integral("x^3", 0, 2, 1).value == pytest.approx(4)
        assert integral("x^3", 0, 2, 3).value == pytest.approx(4)

    def test_reversed_and_empty_intervals(self):
        assert integral("x", 2, 0, 10).value == pytest.approx(-2)
        assert integral("x", 1, 1, 10).value == 0.0

    def test_transcendental(self):
        assert integral("sin(x)", 0, math.pi, 100).value == pytest.approx(2)
        assert integral("exp(x)", 0, 1).value == pytest.approx(math.e - 1)

    def test_any_failure_invalidates_integral(self):
        assert integral("1/x", -1, 1, 10) == UNAVAILABLE
        assert integral("sqrt(x)", -1, 1, 10) == UNAVAILABLE
        assert integral("x +", 0, 1, 10) == UNAVAILABLE

    def test_invalid_number_of_subintervals(self):
        assert integral("x", 0, 1, 0) == UNAVAILABLE
        assert integral("x", 0, 1, -2) == UNAVAILABLE


class TestTrapezoid:
    def test_trapezoid(self):
        assert trapezoid("x", 0, 2, 1).value == 2.0
        assert trapezoid("x^2", 0, 1, 1000).value == pytest.approx(1 / 3, abs=1e-6)

    def test_failure(self):
        assert trapezoid("ln(x)", 0, 1, 10) == UNAVAILABLE

    def test_invalid_number_of_subintervals(self):
        assert trapezoid("x", 0, 1, 0) == UNAVAILABLE


class TestRiemannSum:
    def test_midpoint_sum(self):
        result = riemann_sum("x", 0, 2, 2)
        assert result.value == 2.0
        assert result.rectangles == [
            RiemannRectangle(0.0, 0.0, 1.0, 0.5),
            RiemannRectangle(1.0, 0.0, 1.0, 1.5),
        ]
        assert result.skipped == 0

    def test_negative_values_are_drawn_below_the_axis(self):
        result = riemann_sum("-1", 0, 2, 2)
        assert result.value == -2.0
        for rect in result.rectangles:
            assert rect.y == -1.0
            assert rect.height == 1.0

    def test_failed_midpoints_are_skipped(self):
        result = riemann_sum("sqrt(x)", -1, 1, 2)
        assert result.skipped == 1
        assert len(result.rectangles) == 1
        assert result.value == pytest.approx(math.sqrt(0.5))

    def test_invalid_formula(self):
        result = riemann_sum("2x", 0, 1, 4)
        assert result.value == 0.0
        assert result.rectangles == []
        assert result.skipped == 4

    def test_invalid_number_of_subintervals(self):
        assert riemann_sum("x", 0, 1, 0) == RiemannSum(0.0, [], 0)
        assert integrate("x", 0, 1, 0, "riemann") == UNAVAILABLE

    def test_converges(self):
        assert riemann_sum("x^2", 0, 3, 100).value == pytest.approx(9, abs=1e-2)


class TestIntegrate:
    def test_dispatch(self):
        simpson = integrate("x^2", 0, 3, 10)
        assert simpson == integral("x^2", 0, 3, 10)
        assert integrate("x^2", 0, 3, 10, Method.SIMPSON) == simpson
        assert integrate("x^2", 0, 3, 10, "trapezoidal") == trapezoid("x^2", 0, 3, 10)
        riemann = integrate("x^2", 0, 3, 10, "riemann")
        assert riemann == CalculationResult(riemann_sum("x^2", 0, 3, 10).value)

    def test_methods_do_not_fall_back_on_each_other(self):
        values = {integrate("x^2", 0, 3, 4, m).value for m in Method}
        assert len(values) == 3

    def test_riemann_without_rectangles_is_unavailable(self):
        assert integrate("sqrt(x)", -2, -1, 4, "riemann") == UNAVAILABLE

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            integrate("x", 0, 1, 10, "monte-carlo")
