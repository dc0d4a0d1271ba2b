# redis_health/routes/__init__.py
"""
Route blueprints.

The app factory (redis_health.__init__.py) stores the RedisHealthCheck for
the app's variant in `app.extensions["redis_check"]`; route modules reach it
via `from flask import current_app`.
"""
