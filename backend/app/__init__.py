"""Application factory and app-wide configuration."""

#setup: pip install -e .
#setup: flask --app backend.app run --port 5000 --debug

import logging

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.app.views import calculator_bp
from backend.config import Config, configure_logging

logger = logging.getLogger(__name__)


def create_app(config_class=Config) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(calculator_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info("Investment calculator ready (CORS origins: %s)", app.config["CORS_ORIGINS"])
    return app
