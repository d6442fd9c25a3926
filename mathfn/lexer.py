import enum
from typing import List, NamedTuple

from lark import Token as LarkToken
from lark.exceptions import UnexpectedCharacters
from lark.lark import PostLex

from .exceptions import LexError
from .grammar import load_grammar
from .operators import VARIABLE, Function, Constant


class TokenKind(enum.Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    CONSTANT = "constant"
    FUNCTION = "function"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"
    END = "end"


class Token(NamedTuple):
    """
    A lexeme of a formula.

    Position is the offset of the token in the whitespace-stripped formula.
    """

    kind: TokenKind
    text: str
    position: int

    def __str__(self):
        return self.text


# Maps terminal names of the Lark grammar to token kinds
KINDS = {
    "NUMBER": TokenKind.NUMBER,
    "VARIABLE": TokenKind.VARIABLE,
    "CONSTANT": TokenKind.CONSTANT,
    "FUNCTION": TokenKind.FUNCTION,
    "PLUS": TokenKind.OPERATOR,
    "MINUS": TokenKind.OPERATOR,
    "STAR": TokenKind.OPERATOR,
    "SLASH": TokenKind.OPERATOR,
    "CARET": TokenKind.OPERATOR,
    "_LPAR": TokenKind.LPAREN,
    "_RPAR": TokenKind.RPAREN,
}
FUNCTION_NAMES = Function.names()
CONSTANT_NAMES = Constant.names()


class FormulaPostLex(PostLex):
    """
    Classify identifiers and validate numeric literals emitted by the Lark
    lexer.

    The grammar matches any run of letters as NAME and any run of digits and
    dots as NUMBER. Names are re-typed as VARIABLE, FUNCTION or CONSTANT and
    everything else is rejected here, before reaching the parser.
    """

    always_accept = ("NAME",)

    def process(self, stream):
        for tk in stream:
            if tk.type == "NAME":
                tk = LarkToken.new_borrow_pos(classify_name(tk), str(tk), tk)
            elif tk.type == "NUMBER":
                check_number(tk)
            yield tk


POSTLEX = FormulaPostLex()


def tokenize(formula: str) -> List[Token]:
    """
    Split formula into a list of tokens.

    Whitespace is removed before scanning and the resulting list always ends
    with an END token.

    Raises:
        LexError: on unexpected characters, malformed numbers or unknown
            identifiers.
    """
    src = strip_whitespace(formula)
    lark = load_grammar("formula", postlex=POSTLEX)
    try:
        tokens = [Token(KINDS[tk.type], str(tk), tk.start_pos) for tk in lark.lex(src)]
    except UnexpectedCharacters as exc:
        raise unexpected_character(src, exc) from None
    tokens.append(Token(TokenKind.END, "", len(src)))
    return tokens


#
# Utility functions
#
def strip_whitespace(formula: str) -> str:
    return "".join(formula.split())


def classify_name(tk: LarkToken) -> str:
    """
    Return the terminal name for an identifier.
    """
    name = str(tk)
    if name == VARIABLE:
        return "VARIABLE"
    elif name in FUNCTION_NAMES:
        return "FUNCTION"
    elif name in CONSTANT_NAMES:
        return "CONSTANT"
    raise LexError(
        f"unknown identifier '{name}' at position {tk.start_pos}", name, tk.start_pos
    )


def check_number(tk: LarkToken):
    """
    Raise LexError if numeric literal is a lone dot or has many dots.
    """
    text = str(tk)
    if text == "." or text.count(".") > 1:
        raise LexError(
            f"invalid number format '{text}' at position {tk.start_pos}",
            text,
            tk.start_pos,
        )


def unexpected_character(src: str, exc: UnexpectedCharacters) -> LexError:
    pos = exc.pos_in_stream
    char = src[pos] if pos is not None and pos < len(src) else ""
    return LexError(f"unexpected character '{char}' at position {pos}", char, pos)
