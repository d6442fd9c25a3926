"""
Errors raised while lexing, parsing and evaluating formulas.
"""
__all__ = [
    "MathFnError",
    "FormulaError",
    "LexError",
    "ParseError",
    "DomainError",
    "EvalError",
]


class MathFnError(Exception):
    """
    Base class for all errors raised by mathfn.
    """


class FormulaError(MathFnError, ValueError):
    """
    Base class for failures found inside a single formula.

    Attributes:
        position:
            Offset of the offending text in the whitespace-stripped formula,
            or None if the error is not tied to a location (e.g., domain
            errors).
    """

    kind = "formula error"

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position


class LexError(FormulaError):
    """
    Unexpected character, malformed number or unknown identifier.
    """

    kind = "lex error"

    def __init__(self, message, text="", position=None):
        super().__init__(message, position)
        self.text = text


class ParseError(FormulaError):
    """
    Missing parenthesis, unexpected token or trailing input.
    """

    kind = "parse error"


class DomainError(FormulaError):
    """
    Argument outside the mathematical domain of an operation.
    """

    kind = "domain error"


class EvalError(MathFnError, ValueError):
    """
    Failure to evaluate a formula.

    Wraps a :class:`FormulaError` together with the original formula text.
    """

    def __init__(self, formula: str, error: FormulaError):
        super().__init__(f"invalid expression: {formula}. {error}")
        self.formula = formula
        self.error = error

    @property
    def kind(self) -> str:
        return self.error.kind
