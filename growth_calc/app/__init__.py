"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app growth_calc.app run --port 5000 --debug

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from growth_calc import config
from growth_calc.app.api.routes import api_bp
from growth_calc.app.views import pages_bp


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.update(
        CORS_ORIGINS=list(config.CORS_ORIGINS),
        LOG_LEVEL=config.LOG_LEVEL,
        LOG_FORMAT=config.LOG_FORMAT,
    )
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=app.config["LOG_FORMAT"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(pages_bp)
    return app
