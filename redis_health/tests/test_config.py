from redis_health.config import CheckVariant, RedisCheckSettings, get_config, parse_port


def test_parse_port_defaults_and_invalid():
    assert parse_port(None) == 6379
    assert parse_port("") == 6379
    assert parse_port(" 6380 ") == 6380
    assert parse_port("abc") is None
    assert parse_port("6379.5") is None


def test_secret_variant_reads_cluster_vars():
    env = {
        "REDIS_CLUSTER_ENDPOINT": "cluster.cache.amazonaws.com",
        "REDIS_CLUSTER_PORT": "6380",
        "SECRET_MANAGER_NAME_USERPASS": "arn:aws:secretsmanager:eu-west-1:123:secret:redis",
        "SERVICE_NAME": "Auth API",
        "REDIS_HOST": "ignored",
        "REDIS_TLS": "true",
    }
    s = RedisCheckSettings.from_env(CheckVariant.SECRET, env)
    assert s.host == "cluster.cache.amazonaws.com"
    assert s.port == 6380
    assert s.secret_id.endswith(":secret:redis")
    assert s.service_name == "Auth API"
    assert s.password is None
    assert s.tls is True
    assert s.is_configured
    assert s.auth_label == "Secret"
    assert s.auth_configured


def test_plain_variant_reads_host_and_password():
    env = {"REDIS_HOST": "redis.local", "REDIS_PASSWORD": "hunter2"}
    s = RedisCheckSettings.from_env(CheckVariant.PLAIN, env)
    assert s.host == "redis.local"
    assert s.port == 6379
    assert s.password == "hunter2"
    assert s.secret_id is None
    assert s.service_name == "OIDC Service"
    assert s.auth_label == "Password"
    assert s.auth_configured


def test_missing_host_or_bad_port_is_not_configured():
    assert not RedisCheckSettings.from_env(CheckVariant.SECRET, {}).is_configured
    bad_port = {"REDIS_CLUSTER_ENDPOINT": "h", "REDIS_CLUSTER_PORT": "six"}
    s = RedisCheckSettings.from_env(CheckVariant.SECRET, bad_port)
    assert s.port is None
    assert not s.is_configured


def test_invalid_timeout_falls_back_to_default():
    s = RedisCheckSettings.from_env(CheckVariant.PLAIN, {"REDIS_CONNECT_TIMEOUT": "soon"})
    assert s.connect_timeout == 5.0


def test_get_config_by_name():
    assert get_config("testing").TESTING is True
    assert get_config("lambda").DEBUG is False
    assert get_config("unknown").DEBUG is True
