"""
API exceptions and their translation to JSON error responses.

Services and blueprints raise these; ``register_error_handlers`` turns them
into HTTP responses in one place.
"""
from __future__ import annotations

from typing import Any, Dict

from flask import Flask, jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from .utils.logging_utils import get_logger

logger = get_logger("errors")


class ApiError(Exception):
    """Base exception for all errors reported to API clients."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code}


class ResourceNotFoundError(ApiError):
    """A required entity does not exist."""

    status_code = 404
    code = "NOT_FOUND"


class ValidationError(ApiError):
    """Input failed a required-field or required-relation check."""

    status_code = 400
    code = "VALIDATION_ERROR"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        logger.warning(f"{e.__class__.__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(PydanticValidationError)
    def handle_schema_error(e: PydanticValidationError):
        details = e.errors(include_url=False, include_context=False)
        logger.warning(f"Request body rejected: {len(details)} error(s)")
        return jsonify({"error": "Validation error", "code": "VALIDATION_ERROR", "details": details}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            "error": "Endpoint not found",
            "code": "NOT_FOUND"
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            "error": "Method not allowed",
            "code": "METHOD_NOT_ALLOWED"
        }), 405

    # A missing body or a non-JSON content type surfaces as 415 from get_json()
    @app.errorhandler(400)
    @app.errorhandler(415)
    def bad_request(error):
        return jsonify({
            "error": "Bad request",
            "code": "BAD_REQUEST"
        }), 400

    @app.errorhandler(Exception)
    def internal_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"Unhandled error: {e}")
        return jsonify({
            "error": "Internal server error",
            "code": "INTERNAL_ERROR"
        }), 500
