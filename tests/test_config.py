"""Tests for settings loading and precedence."""

import json

import pytest
from pydantic import ValidationError

from t1comercios.config import (
    DEFAULT_AUTH_URL,
    DEFAULT_BASE_URL,
    DEFAULT_CLIENT_ID,
    T1Settings,
    load_settings,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in an empty directory so no real .env or config.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDefaults:
    def test_defaults(self, workdir):
        settings = load_settings()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.auth_url == DEFAULT_AUTH_URL
        assert settings.client_id == DEFAULT_CLIENT_ID
        assert settings.expiry_skew_seconds == 60
        assert settings.http_timeout_ms == 10000
        assert settings.timeout_seconds == 10.0
        assert settings.commerce_id is None
        assert settings.log_level == "INFO"
        assert settings.has_credentials is False


class TestSources:
    def test_environment(self, workdir, monkeypatch):
        monkeypatch.setenv("T1_USERNAME", "ops@example.com")
        monkeypatch.setenv("T1_PASSWORD", "pw")
        monkeypatch.setenv("T1_HTTP_TIMEOUT_MS", "2500")
        monkeypatch.setenv("T1_COMMERCE_ID", "42")

        settings = load_settings()

        assert settings.username == "ops@example.com"
        assert settings.password.get_secret_value() == "pw"
        assert settings.http_timeout_ms == 2500
        assert settings.commerce_id == "42"
        assert settings.has_credentials is True

    def test_dotenv(self, workdir):
        (workdir / ".env").write_text("T1_COMMERCE_ID=77\nT1_LOG_LEVEL=debug\n")

        settings = load_settings()

        assert settings.commerce_id == "77"
        assert settings.log_level == "DEBUG"

    def test_config_json(self, workdir):
        (workdir / "config.json").write_text(
            json.dumps({"base_url": "https://sandbox.test/", "expiry_skew_seconds": 30})
        )

        settings = load_settings()

        assert settings.base_url == "https://sandbox.test"
        assert settings.expiry_skew_seconds == 30

    def test_environment_beats_config_json(self, workdir, monkeypatch):
        (workdir / "config.json").write_text(json.dumps({"commerce_id": "1"}))
        monkeypatch.setenv("T1_COMMERCE_ID", "2")

        assert load_settings().commerce_id == "2"

    def test_overrides_beat_everything(self, workdir, monkeypatch):
        monkeypatch.setenv("T1_COMMERCE_ID", "2")

        assert load_settings(commerce_id="3").commerce_id == "3"


class TestValidation:
    def test_frozen(self, settings):
        with pytest.raises(ValidationError):
            settings.base_url = "https://other.test"

    def test_timeout_must_be_positive(self, workdir):
        with pytest.raises(ValidationError):
            T1Settings(http_timeout_ms=0)

    def test_skew_cannot_be_negative(self, workdir):
        with pytest.raises(ValidationError):
            T1Settings(expiry_skew_seconds=-1)

    def test_unknown_log_level(self, workdir):
        with pytest.raises(ValidationError):
            T1Settings(log_level="verbose")


class TestDescribe:
    def test_masked_username(self, workdir):
        assert T1Settings(username="integrador@example.com").masked_username == "in***om"
        assert T1Settings(username="abcd").masked_username == "***"
        assert T1Settings().masked_username == "***"

    def test_describe_has_no_password(self, settings):
        info = settings.describe()

        assert info["user"] == "in***om"
        assert info["timeout_ms"] == 5000
        assert "password" not in info
        assert "s3cret" not in str(info)

    def test_secret_hidden_in_repr(self, settings):
        assert "s3cret" not in repr(settings)
