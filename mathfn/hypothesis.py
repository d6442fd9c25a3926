"""
Hypothesis strategies for formulas.

Generated formulas only use operations that are defined and finite for
every x in the range produced by :func:`xs`.
"""
from hypothesis import strategies as st

SAFE_FUNCTIONS = ("sin", "cos", "abs")
SAFE_OPERATORS = ("+", "-", "*")

xs = lambda: st.floats(min_value=-10, max_value=10, allow_nan=False)


def numbers():
    return st.one_of(
        st.integers(min_value=0, max_value=100).map(str),
        st.floats(min_value=0, max_value=100).map(lambda x: f"{x:.3f}"),
    )


def atoms():
    return st.one_of(
        numbers(),
        st.sampled_from(["x", "x^2", "e", "pi"]),
    )


def formulas(max_leaves=8):
    """
    Strategy for valid formulas in x.
    """

    def extend(children):
        binop = st.tuples(children, st.sampled_from(SAFE_OPERATORS), children)
        call = st.tuples(st.sampled_from(SAFE_FUNCTIONS), children)
        return st.one_of(
            binop.map(lambda args: "({} {} {})".format(*args)),
            call.map(lambda args: "{}({})".format(*args)),
            children.map(lambda arg: f"-{arg}"),
        )

    return st.recursive(atoms(), extend, max_leaves=max_leaves)
