"""Application factory for the translation exclusion service."""

import logging
import os
import secrets
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from translation_exclusions.backend.config.schema import SiteConfiguration
from translation_exclusions.backend.config.site_config import load_site_configuration
from translation_exclusions.backend.version import get_project_version

from .context import build_context, build_option_store, init_app
from .http import problem_response
from .routes import register_routes
from .services.options import OptionStore

logger = logging.getLogger(__name__)

ADMIN_TOKEN_ENV = "TRANSEXCLUDE_ADMIN_TOKEN"
SECRET_KEY_ENV = "TRANSEXCLUDE_SECRET_KEY"
ALLOWED_ORIGINS_ENV = "TRANSEXCLUDE_ALLOWED_ORIGINS"


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def _resolve_secret_key() -> str:
    secret = os.getenv(SECRET_KEY_ENV)
    if secret and secret.strip():
        return secret.strip()

    warn(
        f"{SECRET_KEY_ENV} is not set; form nonces will not survive a restart.",
        stacklevel=2,
    )
    return secrets.token_hex(32)


def create_app(
    config: SiteConfiguration | None = None,
    options: OptionStore | None = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``config`` and ``options`` default to the YAML site configuration and the
    option backend selected by the environment; tests inject their own.
    """

    app = Flask(__name__)
    app.secret_key = _resolve_secret_key()

    admin_token = os.getenv(ADMIN_TOKEN_ENV)
    app.config["ADMIN_TOKEN"] = admin_token.strip() if admin_token and admin_token.strip() else None
    if app.config["ADMIN_TOKEN"] is None:
        warn(
            f"{ADMIN_TOKEN_ENV} is not set; admin routes will reject every request.",
            stacklevel=1,
        )

    allowed_origins = _parse_allowed_origins(os.getenv(ALLOWED_ORIGINS_ENV))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST", "PUT"],
        allow_headers=["Authorization", "Content-Type"],
    )

    site_config = config or load_site_configuration()
    context = build_context(site_config, options or build_option_store())
    init_app(app, context)

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "translation_service": site_config.translation_service.name,
            "translation_service_active": context.translation_service_active,
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    logger.debug("Application created with option key %s", site_config.option_key)
    return app
