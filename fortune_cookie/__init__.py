"""Flask application package."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

def create_app(config_overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        config_overrides: Values applied on top of the environment config,
            e.g. ``FORTUNE_CATALOG`` or ``REVEAL_SCHEDULER`` in tests.

    Returns:
        Configured Flask application.

    Raises:
        ConfigurationError: if the fortune catalog is empty.
    """
    if load_dotenv is not None:
        load_dotenv()

    from fortune_cookie.config import get_config
    from fortune_cookie.error_handlers import register_error_handlers
    from fortune_cookie.logging_config import configure_logging
    from fortune_cookie.routes.fortune import fortune_bp
    from fortune_cookie.routes.health import health_bp
    from fortune_cookie.routes.web import web_bp
    from fortune_cookie.surfaces import init_surfaces

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    init_surfaces(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(fortune_bp, url_prefix="/api")

    return app
