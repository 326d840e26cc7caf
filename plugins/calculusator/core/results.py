"""Value types shared by the calculusator core."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Literal

import sympy as sp

ResultKind = Literal["basic", "derivative", "integral", "error"]


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """One attempted calculation as shown to the user."""

    input: str
    result: str
    kind: ResultKind
    timestamp: int = field(default_factory=_now_ms)

    @property
    def is_error(self) -> bool:
        return self.kind == "error"

    def to_dict(self) -> dict[str, object]:
        return {
            "input": self.input,
            "result": self.result,
            "type": self.kind,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True, slots=True)
class Number:
    """A real, finite numeric value."""

    value: int | float


@dataclass(frozen=True, slots=True)
class Symbolic:
    """A SymPy expression that did not reduce to a real number."""

    expr: sp.Basic


@dataclass(frozen=True, slots=True)
class Text:
    text: str


Value = Number | Symbolic | Text


__all__ = ["CalculationResult", "Number", "ResultKind", "Symbolic", "Text", "Value"]
