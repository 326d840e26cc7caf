"""Error types rendered into the JSON failure envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


@dataclass(slots=True)
class AppError(Exception):
    """Base application error with a JSON friendly payload."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | list[Any] | None = None

    def to_dict(self) -> Mapping[str, Any]:
        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if isinstance(self.details, list):
            payload["details"] = list(self.details)
        else:
            payload["details"] = dict(self.details or {})
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Invalid request payload."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class MethodNotAllowedAppError(AppError):
    code: str = "method_not_allowed"
    status_code: int = 405


@dataclass(slots=True)
class PayloadTooLargeAppError(AppError):
    code: str = "payload_too_large"
    status_code: int = 413


@dataclass(slots=True)
class InternalAppError(AppError):
    """Generic internal error wrapper to avoid leaking implementation details."""

    code: str = "internal_error"
    status_code: int = 500


__all__ = [
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "MethodNotAllowedAppError",
    "PayloadTooLargeAppError",
    "InternalAppError",
]
