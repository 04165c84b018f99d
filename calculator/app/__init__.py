"""Application factory and app-wide configuration."""

import logging
import sys
from typing import Optional

from flask import Flask
from flask_cors import CORS

from calculator.app.api.routes import api_bp
from calculator.app.web.routes import web_bp
from calculator.config import Settings, get_settings


def configure_logging(level: str) -> None:
    """Send log records to stdout at ``level``."""
    logging.basicConfig(
        force=True,
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["APP_NAME"] = settings.app_name

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(web_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    app.logger.info("%s ready", settings.app_name)
    return app
