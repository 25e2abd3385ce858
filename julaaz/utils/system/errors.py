import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from julaaz.badges import BadgeConfigError

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(APIError):
    status_code = 400


class ForbiddenError(APIError):
    status_code = 403


class NotFoundError(APIError):
    status_code = 404


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(APIError)
    def _handle_api_error(e: APIError):
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(BadgeConfigError)
    def _handle_badge_config(e: BadgeConfigError):
        logger.warning(f"[Badge] Rejected configuration: {e}")
        return jsonify({"error": str(e)}), 422

    @app.errorhandler(HTTPException)
    def _handle_http(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def _handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500
