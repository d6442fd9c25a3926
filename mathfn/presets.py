from typing import NamedTuple


class Preset(NamedTuple):
    expression: str
    name: str
    description: str


PRESETS = (
    Preset("x^2 + 2*x - 1", "Quadratic", "x² + 2x - 1"),
    Preset("sin(x)", "Sine", "sin(x)"),
    Preset("cos(x)", "Cosine", "cos(x)"),
    Preset("exp(x)", "Exponential", "eˣ"),
    Preset("ln(x)", "Natural Log", "ln(x)"),
    Preset("x^3 - 3*x^2 + 2*x", "Cubic", "x³ - 3x² + 2x"),
    Preset("1/x", "Reciprocal", "1/x"),
    Preset("sqrt(x)", "Square Root", "√x"),
)


def get_preset(name: str) -> Preset:
    """
    Return preset with the given name (case insensitive).
    """
    key = name.lower()
    for preset in PRESETS:
        if preset.name.lower() == key:
            return preset
    raise KeyError(name)
