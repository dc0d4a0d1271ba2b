#!/usr/bin/env python3
"""
Redis Health local entry point
- Serves the status page with Flask's dev server (python run.py).
- CHECK_VARIANT=secret|plain picks which env layout is checked.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Tuple

from dotenv import load_dotenv
from flask import request

# Load env before any other imports that might read it
load_dotenv()

from redis_health import create_app
from redis_health.config import CheckVariant
from redis_health.logging_setup import setup_logging


def create_application():
    setup_logging()

    variant = os.getenv("CHECK_VARIANT", CheckVariant.SECRET.value).lower()
    try:
        variant = CheckVariant(variant)
    except ValueError:
        logging.getLogger(__name__).warning(f"Invalid CHECK_VARIANT '{variant}', using 'secret'")
        variant = CheckVariant.SECRET

    app = create_app(os.getenv("APP_ENV", "development"), variant)

    @app.before_request
    def _log_request():
        app.logger.info("→ %s %s", request.method, request.path)

    return app


def _resolve_server_config() -> Tuple[str, int, bool]:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8080"))

    flask_debug = os.getenv("FLASK_DEBUG", "").lower()
    if flask_debug in ("1", "true", "yes", "on"):
        debug = True
    elif flask_debug in ("0", "false", "no", "off"):
        debug = False
    else:
        debug = os.getenv("APP_ENV", "development").lower() == "development"

    return host, port, debug


def main() -> None:
    app = create_application()
    host, port, debug = _resolve_server_config()

    print("Redis Health Starting")
    print("=" * 60)
    print(f"Status page:  http://{host}:{port}/")
    print(f"Variant:      {app.extensions['redis_check'].variant.value}")
    print(f"Debug mode:   {debug}")
    print("=" * 60)

    try:
        app.run(host=host, port=port, debug=debug, use_reloader=False)
    except KeyboardInterrupt:
        print("\nShutting down gracefully...")
    except Exception as e:
        print(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
