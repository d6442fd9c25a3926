"""
Formula evaluator.

Formulas are parsed by a Lark LALR parser that calls :class:`PlanBuilder`
on each reduction. The builder composes plain Python closures, so parsing a
formula yields an evaluation plan (a function of x) and no parse tree is
ever created.
"""
import math
from typing import Callable

from lark import Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from .exceptions import EvalError, FormulaError, LexError, ParseError, DomainError
from .grammar import load_grammar
from .lexer import POSTLEX, strip_whitespace, unexpected_character
from .operators import BinaryOp, UnaryOp, Function, Constant

Plan = Callable[[float], float]


@v_args(inline=True)
class PlanBuilder(Transformer):
    """
    Build evaluation plans from grammar reductions.
    """

    def number(self, tk) -> Plan:
        value = float(tk)
        if not math.isfinite(value):
            raise LexError(f"number '{tk}' is too large", str(tk), tk.start_pos)
        return lambda x: value

    def variable(self, tk) -> Plan:
        return lambda x: x

    def constant(self, tk) -> Plan:
        value = Constant.from_name(tk).number
        return lambda x: value

    def call(self, name, arg: Plan) -> Plan:
        func = Function.from_name(name)
        return lambda x: func.apply(arg(x))

    def unary(self, op, arg: Plan) -> Plan:
        op = UnaryOp.from_name(op)
        return lambda x: op.apply(arg(x))

    def binop(self, lhs: Plan, op, rhs: Plan) -> Plan:
        op = BinaryOp.from_name(op)
        return lambda x: op.apply(lhs(x), rhs(x))


PLAN_BUILDER = PlanBuilder()


class Expression:
    """
    A compiled formula.

    Expressions are immutable and hold no state between calls: calling an
    expression with some value of x is equivalent to evaluating the original
    formula at x.
    """

    __slots__ = ("source", "_plan")
    source: str

    def __init__(self, source: str, plan: Plan):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "_plan", plan)

    def __setattr__(self, attr, value):
        raise AttributeError("Expression objects are immutable")

    def __call__(self, x: float) -> float:
        try:
            value = self._plan(float(x))
            if not math.isfinite(value):
                raise DomainError("result is not a finite number")
        except FormulaError as exc:
            raise EvalError(self.source, exc) from exc
        return value

    def __repr__(self):
        return f"Expression({self.source!r})"


#
# API functions
#
def compile_formula(formula: str) -> Expression:
    """
    Parse formula and return an :class:`Expression`.

    Raises:
        EvalError: wrapping the LexError or ParseError that invalidates
            the formula.
    """
    src = strip_whitespace(formula)
    try:
        plan = formula_parser().parse(src)
    except FormulaError as exc:
        raise EvalError(formula, exc) from exc
    except UnexpectedInput as exc:
        raise EvalError(formula, syntax_error(src, exc)) from exc
    return Expression(formula, plan)


def evaluate(formula: str, x: float) -> float:
    """
    Evaluate formula at the given value of x.

    Examples:
        >>> evaluate("x^2 + 3*x - 5", 2)
        5.0
    """
    return compile_formula(formula)(x)


def is_valid_expression(formula: str) -> bool:
    """
    Return True if formula can be evaluated at x = 1.
    """
    try:
        evaluate(formula, 1.0)
    except EvalError:
        return False
    return True


#
# Utilities
#
EXPECTED_NAMES = {
    "NUMBER": "number",
    "VARIABLE": "'x'",
    "CONSTANT": "constant",
    "FUNCTION": "function",
    "PLUS": "'+'",
    "MINUS": "'-'",
    "STAR": "'*'",
    "SLASH": "'/'",
    "CARET": "'^'",
    "_LPAR": "'('",
    "_RPAR": "')'",
    "$END": "end of input",
}


def formula_parser():
    return load_grammar("formula", postlex=POSTLEX, transformer=PLAN_BUILDER)


def syntax_error(src: str, exc: UnexpectedInput) -> FormulaError:
    """
    Convert a Lark error into a LexError or ParseError.
    """
    if isinstance(exc, UnexpectedCharacters):
        return unexpected_character(src, exc)

    end = len(src)
    if isinstance(exc, UnexpectedEOF):
        return ParseError("unexpected end of input", end)
    elif not isinstance(exc, UnexpectedToken):
        return ParseError(str(exc), getattr(exc, "pos_in_stream", None))

    expected = set(exc.expected)
    tk = exc.token
    if tk.type == "$END":
        if "_RPAR" in expected:
            return ParseError("missing ')' at end of input", end)
        return ParseError(
            f"unexpected end of input; expected {describe(expected)}", end
        )

    pos = tk.start_pos
    if "$END" in expected:
        return ParseError(
            f"unexpected '{tk}' at position {pos} after a complete expression", pos
        )
    return ParseError(
        f"unexpected '{tk}' at position {pos}; expected {describe(expected)}", pos
    )


def describe(expected) -> str:
    return ", ".join(sorted(EXPECTED_NAMES.get(name, name) for name in expected))
