# storefront/errors.py

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Request error rendered as {"error": message}."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class VectorStoreUnavailable(Exception):
    """Raised when the vector index cannot be reached or is not configured."""


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(exc):
        return jsonify({"error": exc.message}), exc.status_code

    @app.errorhandler(404)
    def handle_not_found(exc):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(exc):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return jsonify({"error": exc.description}), exc.code
        logger.exception(f"Unhandled error: {exc}")
        return jsonify({"error": "Internal server error"}), 500
