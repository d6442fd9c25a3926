import argparse
import sys

from .derivative import derivative, DEFAULT_STEP
from .exceptions import EvalError, LexError
from .integral import integrate, riemann_sum, Method, DEFAULT_SUBINTERVALS
from .lexer import tokenize
from .limit import limit, DEFAULT_EPSILON
from .lines import tangent_line, normal_line
from .parser import compile_formula, evaluate
from .presets import PRESETS
from .sampling import generate_points, DEFAULT_STEPS


def eval_interact(x=0.0):
    """
    Keep asking a new formula and prints its value at x.
    """
    while True:
        expr = input("f(x) = ")
        if expr:
            try:
                print(evaluate(expr, x))
            except EvalError as ex:
                print("error:", ex)
        else:
            break


def lexer_interact():
    """
    Keep asking a new formula and prints the token stream.
    """
    while True:
        expr = input("formula: ")
        if expr:
            try:
                print([(tk.kind.name, tk.text) for tk in tokenize(expr)])
            except LexError as ex:
                print("error:", ex)
        else:
            break


def main(argv=None):
    """
    Entry point of the mathfn command.
    """
    args = make_argparser().parse_args(argv)
    try:
        for line in args.command(args):
            print(line)
    except (EvalError, ValueError) as ex:
        print(f"error: {ex}", file=sys.stderr)
        raise SystemExit(1)


#
# Sub-commands. Each yields the lines of output.
#
def cmd_tokens(args):
    for tk in tokenize(args.formula):
        yield f"{tk.position:>3} {tk.kind.name:<9} {tk.text}"


def cmd_eval(args):
    yield repr(evaluate(args.formula, args.x))


def cmd_points(args):
    compile_formula(args.formula)
    for x, y in generate_points(args.formula, args.xmin, args.xmax, args.steps):
        yield f"{x!r} {y!r}"


def cmd_derivative(args):
    yield from calculation(derivative(args.formula, args.x, args.step))


def cmd_integral(args):
    yield from calculation(integrate(args.formula, args.a, args.b, args.n, args.method))


def cmd_riemann(args):
    compile_formula(args.formula)
    result = riemann_sum(args.formula, args.a, args.b, args.n)
    yield repr(result.value)
    if result.skipped:
        yield f"skipped {result.skipped} of {args.n} subintervals"


def cmd_limit(args):
    result = limit(args.formula, args.a, args.epsilon)
    yield f"left:   {result.left_limit!r}"
    yield f"right:  {result.right_limit!r}"
    yield f"limit:  {result.limit!r}"
    yield f"exists: {result.exists}"


def cmd_tangent(args):
    yield tangent_line(args.formula, args.x).equation


def cmd_normal(args):
    yield normal_line(args.formula, args.x).equation


def cmd_presets(args):
    for preset in PRESETS:
        yield f"{preset.name:<12} {preset.expression}"


def cmd_interact(args):
    if args.tokens:
        lexer_interact()
    else:
        eval_interact(args.x)
    return ()


def calculation(result):
    if not result.ok:
        raise ValueError(result.error)
    yield repr(result.value)


def make_argparser():
    parser = argparse.ArgumentParser(
        prog="mathfn", description="Evaluate formulas in x and their calculus."
    )
    sub = parser.add_subparsers(dest="name", required=True)

    def command(name, func, summary, *args):
        cmd = sub.add_parser(name, help=summary)
        cmd.set_defaults(command=func)
        if name not in ("presets", "interact"):
            cmd.add_argument("formula", help="formula in the variable x")
        for arg in args:
            cmd.add_argument(arg, type=float)
        return cmd

    command("tokens", cmd_tokens, "show tokens of formula")
    command("eval", cmd_eval, "evaluate formula at x", "x")
    cmd = command("points", cmd_points, "sample formula in range", "xmin", "xmax")
    cmd.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    cmd = command("derivative", cmd_derivative, "derivative at x", "x")
    cmd.add_argument("--step", type=float, default=DEFAULT_STEP)
    cmd = command("integral", cmd_integral, "definite integral from a to b", "a", "b")
    cmd.add_argument("-n", type=int, default=DEFAULT_SUBINTERVALS)
    cmd.add_argument(
        "--method", choices=[m.value for m in Method], default=Method.SIMPSON.value
    )
    cmd = command("riemann", cmd_riemann, "midpoint Riemann sum", "a", "b")
    cmd.add_argument("-n", type=int, default=100)
    cmd = command("limit", cmd_limit, "limit as x approaches a", "a")
    cmd.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON)
    command("tangent", cmd_tangent, "tangent line at x", "x")
    command("normal", cmd_normal, "normal line at x", "x")
    command("presets", cmd_presets, "list example formulas")
    cmd = command("interact", cmd_interact, "evaluate formulas interactively")
    cmd.add_argument("-x", type=float, default=0.0)
    cmd.add_argument("--tokens", action="store_true", help="show tokens instead")
    return parser
