from __future__ import annotations

from markupsafe import escape

from .config import RedisCheckSettings
from .redis_probe import ProbeResult

NOT_AVAILABLE = "n/a"
CONFIGURED = "[configured]"


def _format_elapsed(elapsed_ms) -> str:
    if elapsed_ms is None:
        return NOT_AVAILABLE
    return f"{elapsed_ms:g} ms"


def build_status_page(settings: RedisCheckSettings, result: ProbeResult) -> str:
    """Render the status page. Only shows whether auth is configured, never its value."""
    service = escape(settings.service_name)
    badge_class = "ok" if result.ok else "fail"
    badge_text = "OK" if result.ok else "FAIL"
    endpoint = escape(settings.host or NOT_AVAILABLE)
    port = escape(settings.port or NOT_AVAILABLE)
    auth = CONFIGURED if settings.auth_configured else NOT_AVAILABLE

    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{service}</title>
    <style>
      body {{ font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif; margin: 2rem; }}
      .badge {{ display: inline-block; padding: .25rem .5rem; border-radius: .5rem; background: #eee; }}
      .ok {{ background: #d1fae5; }}
      .fail {{ background: #fee2e2; }}
      code {{ background: #f6f6f6; padding: .1rem .25rem; border-radius: .25rem; }}
    </style>
  </head>
  <body>
    <h1>{service}</h1>
    <p>Redis connectivity: <span class="badge {badge_class}">{badge_text}</span></p>
    <ul>
      <li>Endpoint: <code>{endpoint}</code></li>
      <li>Port: <code>{port}</code></li>
      <li>{settings.auth_label}: <code>{auth}</code></li>
    </ul>
    <p>Details: <code>{escape(result.message)}</code></p>
    <p>Elapsed: <code>{_format_elapsed(result.elapsed_ms)}</code></p>
  </body>
</html>
"""
