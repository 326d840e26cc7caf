"""API routes for the Calculusator plugin."""

from __future__ import annotations

from typing import Literal

from flask import Blueprint, Response, current_app, request

from common.errors import ValidationAppError
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    CalculatorEngine,
    get_function_template,
    history_limit_from_settings,
    list_function_templates,
)

ENGINE_KEY = "calculusator_engine"


class ExpressionPayload(SchemaModel):
    expression: str


class VariablePayload(ExpressionPayload):
    variable: str = "x"


class CalculatePayload(VariablePayload):
    mode: Literal["basic", "derivative", "integral"] = "basic"


api_bp = Blueprint("calculusator_api", __name__, url_prefix="/api/calculusator")


@api_bp.record_once
def _install_engine(state) -> None:
    settings = state.app.config.get("PLUGIN_SETTINGS", {}).get("calculusator", {})
    state.app.extensions[ENGINE_KEY] = CalculatorEngine(
        history_limit=history_limit_from_settings(settings)
    )


def _engine() -> CalculatorEngine:
    return current_app.extensions[ENGINE_KEY]


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="calculusator.invalid_request",
            details=getattr(exc, "details", None),
        )
    )


@api_bp.post("/evaluate")
def evaluate() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ExpressionPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    return ok(_engine().evaluate_expression(payload.expression).to_dict())


@api_bp.post("/derivative")
def derivative() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(VariablePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = _engine().calculate_derivative(payload.expression, payload.variable)
    return ok(result.to_dict())


@api_bp.post("/integral")
def integral() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(VariablePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = _engine().calculate_integral(payload.expression, payload.variable)
    return ok(result.to_dict())


@api_bp.post("/calculate")
def calculate() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(CalculatePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = _engine().calculate(payload.expression, payload.mode, payload.variable)
    return ok(result.to_dict())


@api_bp.get("/templates")
def templates() -> Response:
    return ok({"templates": list_function_templates()})


@api_bp.get("/templates/<name>")
def template(name: str) -> Response:
    return ok({"name": name, "template": get_function_template(name)})


@api_bp.get("/history")
def history() -> Response:
    entries = [entry.to_dict() for entry in _engine().get_history()]
    return ok({"entries": entries})


@api_bp.delete("/history")
def clear_history() -> Response:
    _engine().clear_history()
    return ok({"cleared": True})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "evaluate",
    "derivative",
    "integral",
    "calculate",
    "templates",
    "template",
    "history",
    "clear_history",
]
