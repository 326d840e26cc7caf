"""Exports for the calculusator core."""

from .engine import CalculationMode, CalculatorEngine
from .evaluator import EvalError, SympyEvaluator
from .formatting import format_value
from .history import DEFAULT_HISTORY_LIMIT, History, history_limit_from_settings
from .integrator import FALLBACK_NOTE, integrate, is_fallback, lookup_antiderivative
from .normalize import normalize
from .results import CalculationResult, Number, ResultKind, Symbolic, Text, Value
from .templates import FUNCTION_TEMPLATES, get_function_template, list_function_templates

__all__ = [
    "CalculationMode",
    "CalculatorEngine",
    "EvalError",
    "SympyEvaluator",
    "format_value",
    "DEFAULT_HISTORY_LIMIT",
    "History",
    "history_limit_from_settings",
    "FALLBACK_NOTE",
    "integrate",
    "is_fallback",
    "lookup_antiderivative",
    "normalize",
    "CalculationResult",
    "Number",
    "ResultKind",
    "Symbolic",
    "Text",
    "Value",
    "FUNCTION_TEMPLATES",
    "get_function_template",
    "list_function_templates",
]
