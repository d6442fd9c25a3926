import math

import pytest

from mathfn import tangent_line, normal_line, EvalError, Line
from mathfn.lines import format_equation


class TestTangentLine:
    def test_tangent(self):
        line = tangent_line("x^2", 2)
        assert isinstance(line, Line)
        assert line.slope == pytest.approx(4, abs=1e-3)
        assert line.intercept == pytest.approx(-4, abs=1e-3)
        assert line.equation == "y = 4.00x - 4.00"
        assert line.point == (2, 4.0)
        assert not line.vertical

    def test_horizontal_tangent(self):
        line = tangent_line("5", 1)
        assert line.slope == 0.0
        assert line.equation == "y = 5.00"

    def test_unit_slope(self):
        assert tangent_line("x", 0).equation == "y = x + 0.00"
        assert tangent_line("-x", 0).equation == "y = -x + 0.00"

    def test_tangent_requires_value_at_point(self):
        with pytest.raises(EvalError):
            tangent_line("ln(x)", 0)
        with pytest.raises(EvalError):
            tangent_line("sqrt(x)", -1)
        with pytest.raises(EvalError):
            tangent_line("2x", 1)

    def test_unavailable_derivative_gives_horizontal_tangent(self):
        # f(0) exists but f(h) does not
        line = tangent_line("sqrt(-x)", 0)
        assert line.slope == 0.0
        assert line.equation == "y = 0.00"
        assert line.point == (0, 0)

    def test_overflowing_derivative_gives_horizontal_tangent(self):
        line = tangent_line("10^308*(1-2*x/0.0001)", 0)
        assert line.slope == 0.0
        assert math.isfinite(line.intercept)
        assert line.equation.startswith("y = 1")


class TestNormalLine:
    def test_normal(self):
        line = normal_line("x^2", 2)
        assert line.slope == pytest.approx(-0.25, abs=1e-3)
        assert line.equation == "y = -0.25x + 4.50"
        assert line.point == (2, 4.0)

    def test_vertical_normal(self):
        line = normal_line("5", 1)
        assert line.vertical
        assert line.slope == math.inf
        assert math.isnan(line.intercept)
        assert line.equation == "x = 1.00"
        assert line.point == (1, 5.0)

    def test_normal_of_unit_slope(self):
        assert normal_line("x", 0).equation == "y = -x + 0.00"

    def test_normal_with_unavailable_derivative_is_vertical(self):
        line = normal_line("sqrt(-x)", 0)
        assert line.vertical
        assert line.equation == "x = 0.00"


class TestFormatEquation:
    def test_formats(self):
        assert format_equation(2, -1) == "y = 2.00x - 1.00"
        assert format_equation(-1, 0.5) == "y = -x + 0.50"
        assert format_equation(1, -2) == "y = x - 2.00"
        assert format_equation(0, -3) == "y = -3.00"
        assert format_equation(0.5, 0) == "y = 0.50x + 0.00"

    def test_negative_zero(self):
        assert format_equation(0, -0.0) == "y = 0.00"
        assert format_equation(2, -0.0) == "y = 2.00x + 0.00"
