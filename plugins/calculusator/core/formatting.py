"""Turn evaluator values into display strings."""

from __future__ import annotations

from decimal import Decimal

from .results import Number, Symbolic, Text

_ZERO_THRESHOLD = 1e-10
_EXPONENTIAL_THRESHOLD = 1e10
_MANTISSA_DIGITS = 6


def _format_number(number: int | float) -> str:
    magnitude = abs(number)
    if magnitude < _ZERO_THRESHOLD:
        return "0"
    if magnitude > _EXPONENTIAL_THRESHOLD:
        if isinstance(number, int):
            # Decimal keeps arbitrarily large integers out of float range errors.
            return format(Decimal(number), f".{_MANTISSA_DIGITS}e")
        return f"{number:.{_MANTISSA_DIGITS}e}"
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def format_value(value: object) -> str:
    """Render ``value`` the way the calculator display shows it.

    Magnitudes below ``1e-10`` collapse to ``"0"`` and magnitudes above
    ``1e10`` switch to exponential notation with six mantissa digits.
    Symbolic results keep SymPy's printing with ``^`` for powers.
    """

    if isinstance(value, Number):
        return _format_number(value.value)
    if isinstance(value, Symbolic):
        return str(value.expr).replace("**", "^")
    if isinstance(value, Text):
        return value.text
    return str(value)


__all__ = ["format_value"]
