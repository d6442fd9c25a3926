import enum
import math
from typing import Union, Callable

from .exceptions import DomainError

VARIABLE = "x"


class Op(enum.Enum):
    """
    Abstract enum that serves as base class for all closed sets of symbols
    recognized in formulas (operators, functions and constants).
    """

    @classmethod
    def from_name(cls, symb: Union[str, "Op"]) -> "Op":
        """
        Return an Op constant from string.
        """
        if isinstance(symb, cls):
            return symb
        try:
            return cls(str(symb))
        except ValueError:
            raise ValueError(f"invalid {cls.__name__.lower()}: {symb}") from None

    @classmethod
    def names(cls) -> frozenset:
        """
        Set of strings that represent members of the enumeration.
        """
        return frozenset(op.value for op in cls)

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


class BinaryOp(Op):
    """
    Binary arithmetic operators.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    def apply(self, lhs: float, rhs: float) -> float:
        """
        Apply operator to arguments.

        Raises DomainError on division by zero and if the result is not a
        finite number.
        """
        if self is BinaryOp.DIV and rhs == 0:
            raise DomainError("division by zero")
        return checked(BINARY_OPERATIONS[self], lhs, rhs, name=self.value)


class UnaryOp(Op):
    """
    Prefix sign operators.
    """

    POS = "+"
    NEG = "-"

    def apply(self, arg: float) -> float:
        return -arg if self is UnaryOp.NEG else arg


class Function(Op):
    """
    The closed set of functions that may be applied in a formula.
    """

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LN = "ln"
    LOG = "log"
    SQRT = "sqrt"
    ABS = "abs"
    EXP = "exp"

    def apply(self, arg: float) -> float:
        """
        Evaluate function at the given argument.

        Raises DomainError if argument is outside the function domain.
        """
        try:
            is_valid, message = DOMAINS[self]
        except KeyError:
            pass
        else:
            if not is_valid(arg):
                raise DomainError(message)
        return checked(FUNCTIONS[self], arg, name=self.value)


class Constant(Op):
    """
    Named mathematical constants.
    """

    E = "e"
    PI = "pi"

    @property
    def number(self) -> float:
        return CONSTANTS[self]


#
# Dispatch tables
#
BINARY_OPERATIONS = {
    BinaryOp.ADD: lambda x, y: x + y,
    BinaryOp.SUB: lambda x, y: x - y,
    BinaryOp.MUL: lambda x, y: x * y,
    BinaryOp.DIV: lambda x, y: x / y,
    BinaryOp.POW: math.pow,
}
FUNCTIONS = {
    Function.SIN: math.sin,
    Function.COS: math.cos,
    Function.TAN: math.tan,
    Function.LN: math.log,
    Function.LOG: math.log10,
    Function.SQRT: math.sqrt,
    Function.ABS: abs,
    Function.EXP: math.exp,
}
DOMAINS = {
    Function.LN: (lambda x: x > 0, "natural logarithm of non-positive number"),
    Function.LOG: (lambda x: x > 0, "logarithm of non-positive number"),
    Function.SQRT: (lambda x: x >= 0, "square root of negative number"),
}
CONSTANTS = {Constant.E: math.e, Constant.PI: math.pi}


def checked(func: Callable[..., float], *args: float, name: str) -> float:
    """
    Call func(*args) and make sure the result is a finite float.

    Python signals some IEEE special values with exceptions (e.g., math.exp
    overflows or math.pow of a negative base with a fractional exponent).
    Those are all reported as DomainError.
    """
    try:
        value = func(*args)
    except OverflowError:
        raise DomainError(f"result of '{name}' is too large") from None
    except (ValueError, ZeroDivisionError):
        raise DomainError(f"'{name}' is undefined for {fmt_args(args)}") from None
    if not math.isfinite(value):
        raise DomainError(f"result of '{name}' is not a finite number")
    return value


def fmt_args(args) -> str:
    return ", ".join(map(repr, args))
