import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger("cohesia")

class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self):
        return jsonify({"success": False, "message": self.message}), self.status_code

class ValidationError(ApiError):
    status_code = 400

class AuthError(ApiError):
    status_code = 401

class PermissionDeniedError(ApiError):
    status_code = 403

class NotFoundError(ApiError):
    status_code = 404

class ConflictError(ApiError):
    status_code = 409

class InternalError(ApiError):
    status_code = 500

# Hibakezelők regisztrálása az apphoz
def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def _handle_api_error(e: ApiError):
        return e.to_response()

    @app.errorhandler(Exception)
    def _handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"unhandled_exception err={e}")
        return jsonify({"success": False, "message": "Internal server error"}), 500
