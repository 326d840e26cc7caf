"""Table-driven antiderivatives for a fixed set of elementary forms.

This is a literal lookup, not a rule engine: an expression either matches one
of the shapes below exactly (after lower-casing and trimming), or it matches
``<integer>[*]<shape>``, or it is reported as unsupported.
"""

from __future__ import annotations

import re

FALLBACK_NOTE = "(symbolic integration not available for this function)"

# (accepted shapes, antiderivative); ``{v}`` is the integration variable.
_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("{v}",), "{v}²/2 + C"),
    (("{v}^2", "{v}²"), "{v}³/3 + C"),
    (("{v}^3", "{v}³"), "{v}⁴/4 + C"),
    (("sin({v})",), "-cos({v}) + C"),
    (("cos({v})",), "sin({v}) + C"),
    (("tan({v})",), "-ln|cos({v})| + C"),
    (("e^{v}", "exp({v})"), "e^{v} + C"),
    (("ln({v})",), "{v}*ln({v}) - {v} + C"),
    (("1/{v}",), "ln|{v}| + C"),
)

_COEFFICIENT = re.compile(r"([0-9]+)\*?(.+)")
_CONSTANT_SUFFIX = "+ C"


def lookup_antiderivative(expression: str, variable: str) -> str | None:
    """Return the closed form for ``expression`` or ``None`` when no rule matches."""

    expr = expression.lower().strip()
    for shapes, antiderivative in _RULES:
        if any(expr == shape.format(v=variable) for shape in shapes):
            return antiderivative.format(v=variable)

    match = _COEFFICIENT.fullmatch(expr)
    if match:
        coefficient, rest = match.groups()
        inner = lookup_antiderivative(rest, variable)
        if inner is not None:
            return inner.replace(_CONSTANT_SUFFIX, f"*{coefficient} {_CONSTANT_SUFFIX}", 1)
    return None


def integrate(expression: str, variable: str = "x") -> str:
    """Return an antiderivative of ``expression`` or an explanatory message.

    Never raises. Unsupported input yields
    ``∫<expression> d<variable> (symbolic integration not available ...)``.
    """

    antiderivative = lookup_antiderivative(expression, variable)
    if antiderivative is None:
        return f"∫{expression} d{variable} {FALLBACK_NOTE}"
    return antiderivative


def is_fallback(text: str) -> bool:
    """Whether ``text`` is the unsupported-integral message rather than a closed form."""

    return FALLBACK_NOTE in text


__all__ = ["FALLBACK_NOTE", "integrate", "is_fallback", "lookup_antiderivative"]
