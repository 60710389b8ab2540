# storefront/auth.py

import logging

from flask import Blueprint, jsonify, request

from storefront.errors import APIError

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth_bp", __name__, url_prefix="/api/auth")

# Placeholder identity: no Google token or bearer token is ever checked.
MOCK_USER = {
    "id": "user123",
    "name": "Test User",
    "email": "test@example.com",
    "avatar": "TU",
}
MOCK_TOKEN = "mock-jwt-token"


@auth_bp.route("/google", methods=["POST"])
def google_login():
    logger.info("Mock Google login")
    return jsonify({"user": dict(MOCK_USER), "token": MOCK_TOKEN})


@auth_bp.route("/verify", methods=["GET"])
def verify_token():
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise APIError("No token provided", 401)
    return jsonify({"user": dict(MOCK_USER)})
