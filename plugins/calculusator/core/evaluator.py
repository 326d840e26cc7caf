"""SymPy-backed evaluation and differentiation for normalized expressions."""

from __future__ import annotations

import math
import re
from tokenize import TokenError
from typing import Any, Callable, Mapping

import sympy as sp
from sympy.parsing.sympy_parser import convert_xor, parse_expr, standard_transformations

from .results import Number, Symbolic, Value


class EvalError(ValueError):
    """Raised when an expression cannot be parsed, evaluated or differentiated."""


_MAX_EXPR_LENGTH = 1024
_EVALF_DIGITS = 17
_ALLOWED_CHARACTERS = re.compile(r"[0-9A-Za-z\s_.,+\-*/^%!()]")
_ATTRIBUTE_ACCESS = re.compile(r"[A-Za-z_)]\s*\.\s*[A-Za-z_]")
_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
_CALL = re.compile(r"(?<![A-Za-z_])([A-Za-z_][A-Za-z0-9_]*)\s*\(")

TRANSFORMATIONS = standard_transformations + (convert_xor,)

# Only the constructors the parser transformations emit; calculator names live in COMMON_LOCALS.
GLOBAL_DICT: dict[str, Any] = {
    "__builtins__": {},
    "Integer": sp.Integer,
    "Float": sp.Float,
    "Rational": sp.Rational,
    "Symbol": sp.Symbol,
    "factorial": sp.factorial,
}


def _log_base(base: int) -> Callable[[sp.Expr], sp.Expr]:
    def log(value: sp.Expr) -> sp.Expr:
        return sp.log(value, base)

    return log


def _nth_root(value: sp.Expr, degree: sp.Expr = 2) -> sp.Expr:
    return sp.real_root(value, degree)


def _cbrt(value: sp.Expr) -> sp.Expr:
    return sp.real_root(value, 3)


def _round(value: sp.Expr, digits: int | None = None) -> sp.Expr:
    return sp.sympify(value).round(None if digits is None else int(digits))


def _permutations(n: sp.Expr, k: sp.Expr) -> sp.Expr:
    return sp.ff(n, k)


FUNCTIONS: dict[str, Callable[..., Any]] = {
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "sec": sp.sec,
    "csc": sp.csc,
    "cot": sp.cot,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "asec": sp.asec,
    "acsc": sp.acsc,
    "acot": sp.acot,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "asinh": sp.asinh,
    "acosh": sp.acosh,
    "atanh": sp.atanh,
    "ln": sp.log,
    "log": sp.log,
    "log10": _log_base(10),
    "log2": _log_base(2),
    "exp": sp.exp,
    "sqrt": sp.sqrt,
    "cbrt": _cbrt,
    "nthRoot": _nth_root,
    "abs": sp.Abs,
    "floor": sp.floor,
    "ceil": sp.ceiling,
    "round": _round,
    "sign": sp.sign,
    "factorial": sp.factorial,
    "gamma": sp.gamma,
    "combinations": sp.binomial,
    "permutations": _permutations,
    "gcd": sp.gcd,
    "lcm": sp.lcm,
}

CONSTANTS: dict[str, sp.Basic] = {
    "pi": sp.pi,
    "e": sp.E,
}

COMMON_LOCALS: dict[str, Any] = {**FUNCTIONS, **CONSTANTS}


def _check_expression(expression: str) -> str:
    if not isinstance(expression, str) or not expression.strip():
        raise EvalError("Expression is required")
    expression = expression.strip()
    if len(expression) > _MAX_EXPR_LENGTH:
        raise EvalError("Expression is too long")
    for char in expression:
        if not _ALLOWED_CHARACTERS.fullmatch(char):
            raise EvalError(f"Unsupported character '{char}'")
    if "__" in expression:
        raise EvalError("Names starting with __ are not allowed")
    if _ATTRIBUTE_ACCESS.search(expression):
        raise EvalError("Attribute access is not allowed")
    return expression


def _message(exc: BaseException, fallback: str) -> str:
    text = str(exc).strip()
    return text or fallback


def _check_calls(expression: str, names: Mapping[str, Any]) -> None:
    for match in _CALL.finditer(expression):
        name = match.group(1)
        target = names.get(name)
        if target is None or isinstance(target, sp.Basic):
            raise EvalError(f"Function '{name}' is not allowed")


def _ensure_finite(expr: sp.Basic) -> None:
    if expr.has(sp.zoo, sp.oo, -sp.oo, sp.nan):
        raise EvalError("Result is not finite")


class SympyEvaluator:
    """Adapter between normalized calculator text and SymPy.

    ``evaluate`` reduces an expression to a :class:`Number` where it can and
    ``derivative`` returns a :class:`Symbolic` result. Every failure surfaces
    as :class:`EvalError` with a human readable message.
    """

    def __init__(self, extra_locals: Mapping[str, Any] | None = None) -> None:
        self._locals = dict(COMMON_LOCALS)
        if extra_locals:
            self._locals.update(extra_locals)

    def parse(self, expression: str, extra_locals: Mapping[str, Any] | None = None) -> sp.Basic:
        text = _check_expression(expression)
        local_dict = dict(self._locals)
        if extra_locals:
            local_dict.update(extra_locals)
        # Unknown callees would otherwise become undefined SymPy functions.
        _check_calls(text, local_dict)
        try:
            parsed = parse_expr(
                text,
                local_dict=local_dict,
                global_dict=GLOBAL_DICT,
                transformations=TRANSFORMATIONS,
            )
        except SyntaxError as exc:
            raise EvalError(f"Could not parse expression: {exc.msg}") from exc
        except TokenError as exc:
            raise EvalError("Could not parse expression: unbalanced parentheses") from exc
        except Exception as exc:
            raise EvalError(_message(exc, "Invalid expression")) from exc
        if not isinstance(parsed, sp.Basic):
            raise EvalError("Expression returned a non-numeric value")
        return parsed

    def evaluate(self, expression: str) -> Value:
        parsed = self.parse(expression)
        free = sorted(parsed.free_symbols, key=lambda symbol: symbol.name)
        if free:
            raise EvalError(f"Undefined symbol {free[0].name}")
        _ensure_finite(parsed)
        if parsed.is_Integer:
            return Number(int(parsed))
        try:
            numeric = parsed.evalf(_EVALF_DIGITS)
        except Exception as exc:
            raise EvalError(_message(exc, "Invalid expression")) from exc
        _ensure_finite(numeric)
        if numeric.is_Integer:
            return Number(int(numeric))
        if numeric.is_Number and numeric.is_real:
            value = float(numeric)
            # evalf keeps exponents a float cannot hold, e.g. exp(1000).
            if not math.isfinite(value):
                raise EvalError("Result is not finite")
            return Number(value)
        return Symbolic(numeric)

    def derivative(self, expression: str, variable: str = "x") -> Symbolic:
        if not isinstance(variable, str) or not _IDENTIFIER.fullmatch(variable):
            raise EvalError(f"Invalid variable '{variable}'")
        symbol = sp.Symbol(variable)
        parsed = self.parse(expression, {variable: symbol})
        try:
            result = sp.diff(parsed, symbol)
        except Exception as exc:
            raise EvalError(_message(exc, "Cannot compute derivative")) from exc
        _ensure_finite(result)
        return Symbolic(result)


__all__ = ["COMMON_LOCALS", "EvalError", "FUNCTIONS", "SympyEvaluator", "TRANSFORMATIONS"]
