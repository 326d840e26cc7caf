"""JSON envelopes shared by every endpoint.

Success responses look like ``{"success": true, "data": ...}`` and failures
like ``{"success": false, "error": {"code", "message", "details"}}``.
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from .errors import AppError


def _envelope(payload: dict[str, Any], status: int) -> Response:
    response = jsonify(payload)
    response.status_code = status
    return response


def ok(data: Any, *, status: int = 200) -> Response:
    return _envelope({"success": True, "data": data}, status)


def fail(error: AppError, *, status: int | None = None) -> Response:
    return _envelope({"success": False, "error": error.to_dict()}, status or error.status_code)


__all__ = ["ok", "fail"]
