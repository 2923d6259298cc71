"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from finplan.app.api.routes import api_bp
from finplan.config import Config, env_overrides, resolve_log_level


def create_app(config_object: type = Config, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance; environment variables are read here, not at import."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(env_overrides())
    if overrides:
        app.config.update(overrides)

    app.config["LOG_LEVEL"] = resolve_log_level(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])
    logging.getLogger("finplan").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.logger.debug("registered api blueprint, CORS origins %s", app.config["CORS_ORIGINS"])
    return app
