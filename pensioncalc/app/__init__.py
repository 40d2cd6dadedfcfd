"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from pensioncalc.app.api.routes import api_bp
from pensioncalc.config import default_settings


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from config.default_settings(), then PENSIONCALC_* env vars,
    then ``overrides`` (used by tests).
    """
    app = Flask(__name__)
    app.config.from_mapping(default_settings())
    app.config.from_prefixed_env("PENSIONCALC")
    if overrides:
        app.config.from_mapping(overrides)

    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")

    if not app.debug and not app.testing:
        app.logger.setLevel(logging.INFO)
    return app
