"""Calculation entry points used by the calculusator API."""

from __future__ import annotations

from typing import Literal

from common.logging import get_logger

from .evaluator import EvalError, SympyEvaluator
from .formatting import format_value
from .history import DEFAULT_HISTORY_LIMIT, History
from .integrator import integrate
from .normalize import normalize
from .results import CalculationResult, ResultKind
from .templates import get_function_template

CalculationMode = Literal["basic", "derivative", "integral"]

logger = get_logger()


def _error_text(exc: Exception, fallback: str) -> str:
    message = str(exc).strip()
    return f"Error: {message or fallback}"


class CalculatorEngine:
    """Evaluate, differentiate and integrate expressions while keeping a history.

    Each engine owns its history, so independent sessions never share state.
    Failures never propagate: they are returned (and recorded) as results of
    kind ``"error"``.
    """

    def __init__(
        self,
        history: History | None = None,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        evaluator: SympyEvaluator | None = None,
    ) -> None:
        self.history = history if history is not None else History(history_limit)
        self.evaluator = evaluator or SympyEvaluator()

    def _finish(self, text: str, result: str, kind: ResultKind) -> CalculationResult:
        outcome = CalculationResult(input=text, result=result, kind=kind)
        self.history.record(outcome)
        return outcome

    def _fail(self, text: str, exc: Exception, fallback: str) -> CalculationResult:
        if isinstance(exc, EvalError):
            logger.warning("calculation failed: %s (%s)", text, exc)
        else:
            logger.exception("unexpected calculation failure: %s", text)
        return self._finish(text, _error_text(exc, fallback), "error")

    def evaluate_expression(self, expression: str) -> CalculationResult:
        try:
            value = self.evaluator.evaluate(normalize(expression))
            formatted = format_value(value)
        except Exception as exc:
            return self._fail(expression, exc, "Invalid expression")
        logger.debug("evaluated %s -> %s", expression, formatted)
        return self._finish(expression, formatted, "basic")

    def calculate_derivative(self, expression: str, variable: str = "x") -> CalculationResult:
        label = f"d/d{variable}[{expression}]"
        try:
            value = self.evaluator.derivative(normalize(expression), variable)
            formatted = format_value(value)
        except Exception as exc:
            return self._fail(label, exc, "Cannot compute derivative")
        logger.debug("differentiated %s -> %s", label, formatted)
        return self._finish(label, formatted, "derivative")

    def calculate_integral(self, expression: str, variable: str = "x") -> CalculationResult:
        label = f"∫{expression} d{variable}"
        try:
            antiderivative = integrate(expression, variable)
        except Exception as exc:  # pragma: no cover - integrate does not raise
            return self._fail(label, exc, "Cannot compute integral")
        logger.debug("integrated %s -> %s", label, antiderivative)
        return self._finish(label, antiderivative, "integral")

    def calculate(
        self, expression: str, mode: CalculationMode = "basic", variable: str = "x"
    ) -> CalculationResult:
        """Dispatch on the display mode: plain evaluation, derivative or integral."""

        if mode == "derivative":
            return self.calculate_derivative(expression, variable)
        if mode == "integral":
            return self.calculate_integral(expression, variable)
        if mode == "basic":
            return self.evaluate_expression(expression)
        logger.warning("unknown calculation mode %r for %s", mode, expression)
        return self._finish(expression, f"Error: Unknown calculation mode '{mode}'", "error")

    @staticmethod
    def get_function_template(name: str) -> str:
        return get_function_template(name)

    def get_history(self) -> list[CalculationResult]:
        return self.history.list()

    def clear_history(self) -> None:
        self.history.clear()


__all__ = ["CalculationMode", "CalculatorEngine"]
