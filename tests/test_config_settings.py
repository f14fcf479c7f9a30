"""Tests for config/settings.py."""

from watchlayer.config import Settings, get_settings


class TestSettings:
    """Tests for environment-based settings."""

    def test_defaults(self, monkeypatch):
        for var in ("WATCHLAYER_AWS_REGION", "WATCHLAYER_AWS_ENDPOINT_URL", "WATCHLAYER_AWS_PROFILE"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.aws_region == "us-east-1"
        assert settings.aws_endpoint_url is None
        assert settings.aws_profile is None
        assert settings.resource_kind == "sqs_queue"
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("WATCHLAYER_AWS_REGION", "eu-west-1")
        monkeypatch.setenv("WATCHLAYER_AWS_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.setenv("WATCHLAYER_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.aws_region == "eu-west-1"
        assert settings.aws_endpoint_url == "http://localhost:4566"
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
