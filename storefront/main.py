# storefront/main.py

import logging
import time

from dotenv import load_dotenv
from flask import Flask, current_app, g, jsonify, request
from flask_cors import CORS

from storefront.auth import auth_bp
from storefront.catalog import MOCK_PRODUCTS, filter_mock_products
from storefront.config import Settings
from storefront.constants import STOREFRONT_HTML
from storefront.embedding_helper import embed_text
from storefront.errors import APIError, register_error_handlers
from storefront.logging_setup import configure_logging
from storefront.pinecone_client import matches_to_products, semantic_search

logger = logging.getLogger(__name__)


def _settings():
    return current_app.config["SETTINGS"]


def create_app(config_overrides=None):
    load_dotenv(override=False)
    settings = Settings.from_env(config_overrides)
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    CORS(app, origins=list(settings.cors_origins))

    register_error_handlers(app)
    app.register_blueprint(auth_bp)

    @app.before_request
    def _start_timer():
        g.started_at = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = getattr(g, "started_at", None)
        latency_ms = int((time.perf_counter() - started) * 1000) if started else -1
        logger.info(f"{request.method} {request.path} -> {response.status_code} ({latency_ms} ms)")
        return response

    # ==== Routes ====
    @app.route("/")
    def index():
        return STOREFRONT_HTML, 200

    @app.route("/api/health")
    def health():
        return jsonify({"status": "OK", "message": "Server is running"})

    @app.route("/api/products")
    def list_products():
        settings = _settings()
        try:
            # Zero vector: every record scores equally, so this lists the namespace.
            results = semantic_search(
                query_embedding=[0.0] * settings.embedding_dimension,
                settings=settings,
                top_k=settings.products_top_k,
            )
            return jsonify(matches_to_products(results))
        except Exception as e:
            logger.error(f"Failed to fetch products from Pinecone: {e}")
            return jsonify(MOCK_PRODUCTS)

    @app.route("/api/search", methods=["POST"])
    def search():
        data = request.get_json(silent=True) or {}
        query = data.get("query") if isinstance(data, dict) else None
        if not isinstance(query, str) or not query.strip():
            raise APIError("Search query is required", 400)

        settings = _settings()
        try:
            query_embedding = embed_text(query, settings)
            results = semantic_search(
                query_embedding=query_embedding,
                settings=settings,
                top_k=settings.search_top_k,
            )
            return jsonify({"products": matches_to_products(results, include_score=True)})
        except Exception as e:
            logger.error(f"Pinecone search error, falling back to text match: {e}")
            return jsonify({"products": filter_mock_products(query)})

    logger.info(
        f"Storefront API ready (index={settings.pinecone_index_name}, "
        f"namespace={settings.pinecone_namespace}, embeddings={settings.embedding_provider})"
    )
    return app


my_app = create_app()

if __name__ == "__main__":
    settings = my_app.config["SETTINGS"]
    my_app.run(host=settings.host, port=settings.port, debug=settings.debug)
