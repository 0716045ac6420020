"""Application exceptions, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500
    slug = "internal_server_error"

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(AppError):
    status_code = 400
    slug = "bad_request"


class UnauthorizedError(AppError):
    status_code = 401
    slug = "unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    slug = "forbidden"


class NotFoundError(AppError):
    status_code = 404
    slug = "not_found"


class ConflictError(AppError):
    status_code = 409
    slug = "conflict"


def error_body(slug: str, message: str, status: int, **extra: Any):
    return jsonify({"error": slug, "message": message, **extra}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def app_error(err: AppError):
        return error_body(err.slug, err.message, err.status_code)

    @app.errorhandler(ValidationError)
    def validation_error(err: ValidationError):
        details = err.errors(include_url=False, include_context=False, include_input=False)
        return error_body("unprocessable_entity", "request validation failed", 422, details=details)

    @app.errorhandler(400)
    def bad_request(err: Exception):  # type: ignore[override]
        return error_body("bad_request", _describe(err), 400)

    @app.errorhandler(401)
    def unauthorized(err: Exception):  # type: ignore[override]
        return error_body("unauthorized", _describe(err), 401)

    @app.errorhandler(403)
    def forbidden(err: Exception):  # type: ignore[override]
        return error_body("forbidden", _describe(err), 403)

    @app.errorhandler(404)
    def not_found(err: Exception):  # type: ignore[override]
        return error_body("not_found", _describe(err), 404)

    @app.errorhandler(405)
    def method_not_allowed(err: Exception):  # type: ignore[override]
        return error_body("method_not_allowed", _describe(err), 405)

    @app.errorhandler(409)
    def conflict(err: Exception):  # type: ignore[override]
        return error_body("conflict", _describe(err), 409)

    @app.errorhandler(422)
    def unprocessable(err: Exception):  # type: ignore[override]
        return error_body("unprocessable_entity", _describe(err), 422)

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        logger.exception("unhandled error: {}", err)
        return error_body("internal_server_error", "unexpected error", 500)


def _describe(err: Exception) -> str:
    if isinstance(err, HTTPException) and err.description:
        return err.description
    return str(err)


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status
