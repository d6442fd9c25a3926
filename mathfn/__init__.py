"""
Single variable formula evaluator with numerical calculus tools.
"""
from .exceptions import *
from .derivative import derivative, derivative_points
from .integral import integral, trapezoid, riemann_sum, integrate, Method
from .lexer import Token, TokenKind, tokenize
from .limit import limit
from .lines import tangent_line, normal_line
from .logging import log
from .parser import Expression, compile_formula, evaluate, is_valid_expression
from .presets import PRESETS, Preset
from .sampling import generate_points
from .types import (
    Sample,
    CalculationResult,
    RiemannRectangle,
    RiemannSum,
    LimitResult,
    Line,
)

__version__ = "0.1.0"
