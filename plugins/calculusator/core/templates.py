"""Text fragments inserted when a function button is pressed."""

from __future__ import annotations

FUNCTION_TEMPLATES: dict[str, str] = {
    # trigonometric
    "sin": "sin(",
    "cos": "cos(",
    "tan": "tan(",
    "sec": "1/cos(",
    "csc": "1/sin(",
    "cot": "1/tan(",
    # inverse trigonometric
    "arcsin": "asin(",
    "arccos": "acos(",
    "arctan": "atan(",
    "arcsec": "asec(",
    "arccsc": "acsc(",
    "arccot": "acot(",
    # hyperbolic
    "sinh": "sinh(",
    "cosh": "cosh(",
    "tanh": "tanh(",
    "sech": "1/cosh(",
    "csch": "1/sinh(",
    "coth": "1/tanh(",
    # logarithmic
    "ln": "ln(",
    "log": "log10(",
    "log₂": "log2(",
    "log₁₀": "log10(",
    "logₙ": "log(",
    # exponential
    "exp": "exp(",
    "e^x": "exp(",
    # powers and roots
    "sqrt": "sqrt(",
    "cbrt": "cbrt(",
    "nthRoot": "nthRoot(",
    # rounding and misc
    "abs": "abs(",
    "floor": "floor(",
    "ceil": "ceil(",
    "round": "round(",
    "sign": "sign(",
    "factorial": "!",
    "gamma": "gamma(",
    # constants
    "pi": "pi",
    "e": "e",
    "phi": "1.618033988749",
    # combinatorics
    "nCr": "combinations(",
    "nPr": "permutations(",
    "gcd": "gcd(",
    "lcm": "lcm(",
}


def get_function_template(name: str) -> str:
    """Return the fragment for ``name``; unknown names are echoed back."""

    return FUNCTION_TEMPLATES.get(name, name)


def list_function_templates() -> dict[str, str]:
    return dict(FUNCTION_TEMPLATES)


__all__ = ["FUNCTION_TEMPLATES", "get_function_template", "list_function_templates"]
