"""Rewrite calculator display text into evaluator syntax."""

from __future__ import annotations

import re

_GLYPHS: tuple[tuple[str, str], ...] = (
    ("×", "*"),
    ("÷", "/"),
    ("π", "pi"),
    ("√", "sqrt"),
    ("²", "^2"),
    ("³", "^3"),
    ("⁴", "^4"),
    ("⁵", "^5"),
)

# Applied in order, one global pass each.
_IMPLICIT_MULTIPLICATION: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"([0-9]+)([a-zA-Z])"), r"\1*\2"),
    (re.compile(r"([a-zA-Z])([0-9]+)"), r"\1*\2"),
    (re.compile(r"\)([0-9]+)"), r")*\1"),
    (re.compile(r"([0-9]+)\("), r"\1*("),
)


def normalize(raw: str) -> str:
    """Return ``raw`` with display glyphs replaced and implicit products made explicit.

    ``normalize("2x")`` gives ``"2*x"`` and ``normalize("x²")`` gives ``"x^2"``.
    Characters that match no rule pass through unchanged.
    """

    processed = raw
    for glyph, replacement in _GLYPHS:
        processed = processed.replace(glyph, replacement)
    for pattern, replacement in _IMPLICIT_MULTIPLICATION:
        processed = pattern.sub(replacement, processed)
    return processed


__all__ = ["normalize"]
