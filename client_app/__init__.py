"""
Task list client Flask application factory.

Provides the ``create_app`` factory that assembles the client. The client
is a stateless Backend-for-Frontend (BFF): it serves server-rendered login
and task list pages and calls the remote task API on behalf of the
browser. The only state it keeps is the bearer token in the session
cookie.

Key Concepts Demonstrated:
- Application factory pattern (``create_app``)
- Backend-for-Frontend (BFF) architecture
- Blueprint-based route registration
- Lazy import to avoid circular dependencies
"""

from __future__ import annotations

import logging

from flask import Flask

from config import get_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the task list client application.

    Args:
        config_name: Optional configuration environment name
            (``"development"``, ``"testing"``, ``"production"``). When
            *None*, the value is read from the ``FLASK_ENV`` environment
            variable, defaulting to ``"development"``.

    Returns:
        A configured :class:`~flask.Flask` application.
    """
    app = Flask(__name__, instance_relative_config=True)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating task list client with config: %s", config_class.__name__)

    # Import inside the factory: the blueprint module imports from this package.
    from .routes.views import views_bp

    app.register_blueprint(views_bp)
    return app
