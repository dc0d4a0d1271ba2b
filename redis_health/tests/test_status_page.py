from redis_health.config import CheckVariant, RedisCheckSettings
from redis_health.redis_probe import ProbeResult
from redis_health.status_page import build_status_page


def test_success_page():
    settings = RedisCheckSettings(host="redis.local", port=6379, service_name="Auth API")
    html = build_status_page(settings, ProbeResult(ok=True, message="PONG", elapsed_ms=3.2))
    assert html.startswith("<!doctype html>")
    assert "<title>Auth API</title>" in html
    assert "<h1>Auth API</h1>" in html
    assert 'class="badge ok">OK<' in html
    assert "<code>redis.local</code>" in html
    assert "<code>6379</code>" in html
    assert "Secret: <code>n/a</code>" in html
    assert "<code>PONG</code>" in html
    assert "3.2 ms" in html


def test_failure_page_when_unconfigured():
    settings = RedisCheckSettings(host="", port=None)
    html = build_status_page(settings, ProbeResult(ok=False, message="Redis env not configured"))
    assert 'class="badge fail">FAIL<' in html
    assert "Endpoint: <code>n/a</code>" in html
    assert "Port: <code>n/a</code>" in html
    assert "Elapsed: <code>n/a</code>" in html
    assert "Redis env not configured" in html


def test_credentials_never_rendered():
    settings = RedisCheckSettings(host="redis.local", password="hunter2", secret_id="arn:secret",
                                  variant=CheckVariant.PLAIN)
    html = build_status_page(settings, ProbeResult(ok=False, message="WRONGPASS", elapsed_ms=1))
    assert "hunter2" not in html
    assert "Password: <code>[configured]</code>" in html


def test_message_is_escaped():
    settings = RedisCheckSettings(host="<redis>")
    html = build_status_page(settings, ProbeResult(ok=False, message="<script>x</script>", elapsed_ms=1))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;redis&gt;" in html
