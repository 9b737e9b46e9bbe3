"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from tagcloud.core.config import Settings, get_settings


def test_defaults_are_valid() -> None:
    settings = Settings()
    assert settings.tagcloud_size == 20
    assert settings.cache_backend == "memory"
    assert settings.base_url == "/"


def test_cloud_size_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="TAGCLOUD_SIZE"):
        Settings(tagcloud_size=0)


def test_unknown_cache_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="cache_backend"):
        Settings(cache_backend="memcached")


def test_redis_backend_requires_host() -> None:
    with pytest.raises(ValidationError, match="REDIS_HOST"):
        Settings(cache_backend="redis", redis_host="")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAGCLOUD_SIZE", "7")
    monkeypatch.setenv("BASE_URL", "/blog/")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.tagcloud_size == 7
        assert settings.base_url == "/blog/"
    finally:
        get_settings.cache_clear()
