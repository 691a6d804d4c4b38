import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from app.crm.config import load_config
from app.crm.store import CustomerStore, init_store
from app.crm.routes import bp as routes_bp
from app.crm.modules.customers.api import bp as customers_bp


def create_app(store: CustomerStore | None = None) -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Keep JSON keys in the order handlers build them.
    app.json.sort_keys = False

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("CORS_ORIGIN") or app.config["CORS_ORIGIN"] == "*":
            raise RuntimeError("CORS_ORIGIN must name a single origin in production (not '*').")
    if (app.config.get("CUSTOMER_COUNT") or 0) < 0:
        raise RuntimeError("CUSTOMER_COUNT must be >= 0.")

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGIN"]}})
    app.logger.info("CORS enabled for: %s", app.config["CORS_ORIGIN"])

    init_store(app, store)

    app.register_blueprint(routes_bp, url_prefix="/api")
    app.register_blueprint(customers_bp, url_prefix="/api")

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(405)
    def _err_405(e):  # type: ignore[no-redef]
        # Unsupported methods are reported like unknown routes.
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        original = getattr(e, "original_exception", None) or e
        app.logger.exception("Unhandled 500", exc_info=original)
        return jsonify({"error": "Internal server error"}), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
