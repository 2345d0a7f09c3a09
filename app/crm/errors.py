"""
Domain errors raised by the service layer, and their JSON rendering.
"""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from app.crm.db import rollback_db_session


class CustomerError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(CustomerError):
    status_code = 404


class DuplicateResourceError(CustomerError):
    status_code = 409


class RequestValidationError(CustomerError):
    status_code = 400


def _error_body(message: str, status: int):
    return jsonify({"error": message, "status": status}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(CustomerError)
    def _customer_error(e: CustomerError):
        rollback_db_session()
        return _error_body(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        resp, status = _error_body(e.description or e.name, e.code or 500)
        # keep headers such as Allow on 405, but not the HTML Content-Type
        resp.headers.extend([(k, v) for k, v in e.get_headers() if k.lower() != "content-type"])
        return resp, status

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        # Ensure stack trace shows in the logs.
        rollback_db_session()
        app.logger.exception("Unhandled 500: %s", getattr(e, "original_exception", e))
        return _error_body("internal server error", 500)
