from functools import lru_cache
from pathlib import Path

from lark import Lark

OPTIONS = {"formula": {"start": "start"}}
DEFAULTS = {"parser": "lalr", "lexer": "basic"}
PATH = Path(__file__).parent / "grammars"


@lru_cache(8)
def load_grammar(name, **kwargs):
    """
    Load internal grammar.

    Extra keyword arguments are forwarded to Lark and override the default
    options. They must be hashable, since grammars are cached.
    """
    options = {**DEFAULTS, **OPTIONS.get(name, {}), **kwargs}
    with open(PATH / (name + ".lark")) as fd:
        return Lark(fd, **options)
