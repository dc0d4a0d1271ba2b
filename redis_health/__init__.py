"""
Redis Health Application Factory
================================

One Flask app per check variant:
- secret: REDIS_CLUSTER_* endpoint, credentials from Secrets Manager
- plain:  REDIS_HOST / REDIS_PASSWORD
"""

from __future__ import annotations

import logging
import tempfile
from datetime import datetime
from typing import Optional, Union

from flask import Flask

from .config import CheckVariant, get_config
from .health_check import RedisHealthCheck

log = logging.getLogger(__name__)

__version__ = "1.0.0"


def create_app(
    config_name: str = "production",
    variant: Union[CheckVariant, str] = CheckVariant.SECRET,
    check: Optional[RedisHealthCheck] = None,
) -> Flask:
    """
    Build the status page app.

    Args:
        config_name: Configuration name ('lambda', 'production', 'development', 'testing')
        variant: Which env layout to check ('secret' or 'plain')
        check: Pre-built RedisHealthCheck, mainly for tests
    """
    variant = CheckVariant(variant)

    # Lambda uses /tmp for writable filesystem
    if config_name == "lambda":
        app = Flask(__name__, instance_path=tempfile.gettempdir())
    else:
        app = Flask(__name__)

    app.config.from_object(get_config(config_name))
    app.extensions["redis_check"] = check or RedisHealthCheck(variant)

    from .routes.health import bp as health_bp
    app.register_blueprint(health_bp)

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle internal server errors with proper logging."""
        log.error(f"INTERNAL_ERROR | error={error}", exc_info=True)
        return {
            "error": "Internal server error",
            "timestamp": datetime.now().isoformat(),
            "details": str(error) if app.debug else "Contact support",
        }, 500

    log.info(f"APP_INIT_COMPLETE | config={config_name} | variant={variant.value}")
    return app
