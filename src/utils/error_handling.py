"""Custom exceptions and helpers for consistent callable error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    code = "internal"

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def canonical_status(self) -> str:
        """Callable protocol status, e.g. ``invalid-argument`` -> ``INVALID_ARGUMENT``."""
        return self.code.upper().replace("-", "_")


class InvalidArgumentError(AppError):
    """Raised when a request payload is missing or malformed."""

    code = "invalid-argument"

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, status_code=400)


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    code = "not-found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


def error_body(status: str, message: str) -> Dict[str, Any]:
    """Build the callable error envelope."""
    return {"error": {"status": status, "message": message}}


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(error_body(error.canonical_status, error.message)),
    }


def internal_error_response() -> Dict[str, Any]:
    """Response for failures that are not AppErrors."""
    return {
        "statusCode": 500,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(error_body("INTERNAL", "INTERNAL")),
    }
