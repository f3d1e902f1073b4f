"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the package logger, which is also the Flask app logger.

    ``Flask(__name__)`` names ``app.logger`` after the package, so the handlers
    installed here serve both the app and every module logger below it.
    """

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
        log_to_file=app.config.get("LOG_TO_FILE", True),
    )
    app.logger.propagate = False


def register_errors(app: Flask) -> None:
    """Attach the JSON error handlers."""

    register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    names = register_default_modules(app)
    app.logger.info("Đã đăng ký %d module: %s", len(names), ", ".join(names))
