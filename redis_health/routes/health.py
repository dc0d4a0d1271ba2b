# redis_health/routes/health.py
"""
Redis status page.

Every path and method renders the same page. The response is always 200;
a failed check is reported in the body, not the status code.
"""

from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app

from ..config import CheckVariant
from ..health_check import RedisHealthCheck
from ..status_page import build_status_page

log = logging.getLogger(__name__)
bp = Blueprint("health", __name__)


@bp.route("/", defaults={"_path": ""}, methods=["GET", "POST", "HEAD"])
@bp.route("/<path:_path>", methods=["GET", "POST", "HEAD"])
def redis_status(_path: str) -> Response:
    check: RedisHealthCheck = current_app.extensions["redis_check"]
    settings = check.load_settings()
    result = check.run(settings)

    resp = Response(build_status_page(settings, result), status=200, mimetype="text/html")
    if check.variant is CheckVariant.SECRET:
        resp.headers["Cache-Control"] = "no-store"
    return resp
