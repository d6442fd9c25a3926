"""
Calculator built on top of mathfn.

Lines of the form "x = <formula>" bind x to the value of the formula, any
other line is evaluated at the current value of x. The calculator also
understands a few calculus commands:

    d <formula>            derivative at the current x
    int <a> <b> <formula>  definite integral from a to b
    lim <a> <formula>      limit as x approaches a

Exercises for the reader:

1) Add a command that prints the tangent line at the current x.
2) Accept named bounds in integrals, e.g., "int 0 pi sin(x)".
"""

import mathfn


def eval_line(src, env):
    """
    Evaluate a line of input in the given environment, a dictionary holding
    the current value of x.
    """
    x = env.setdefault("x", 0.0)
    head, _, tail = src.partition(" ")

    if head == "d":
        return check(mathfn.derivative(tail, x))
    elif head == "int":
        a, b, formula = tail.split(" ", 2)
        return check(mathfn.integral(formula, float(a), float(b), 100))
    elif head == "lim":
        a, formula = tail.split(" ", 1)
        result = mathfn.limit(formula, float(a))
        if not result.exists:
            raise ValueError("limit does not exist")
        return result.limit

    lhs, eq, rhs = src.partition("=")
    if eq and lhs.strip() == "x":
        env["x"] = mathfn.evaluate(rhs, x)
        return env["x"]
    return mathfn.evaluate(src, x)


def eval_expr(src, env=None, **kwargs):
    """
    Similar to eval_line, but receives x as keyword argument.
    """
    env = {} if env is None else env
    env.update(kwargs)
    return eval_line(src, env)


def check(result):
    if not result.ok:
        raise ValueError(result.error)
    return result.value


def eval_loop(**env):
    """
    Calculator interactive mainloop.
    """
    while True:
        expr = input('> ')
        if not expr:
            if input('quit? [y/N] ').lower() == 'y':
                break
            else:
                continue
        try:
            print(eval_line(expr, env))
        except ValueError as ex:
            print('error:', ex)


if __name__ == '__main__':
    print('Starting mathfn calculator')
    eval_loop()
