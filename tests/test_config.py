"""Tests for environment-driven configuration"""

from issuetracker.config import DEFAULT_DATABASE_URL, Config


def test_defaults(monkeypatch):
    for name in (
        "ISSUETRACKER_DATABASE_URL",
        "ISSUETRACKER_JWT_SECRET",
        "ISSUETRACKER_JWT_EXPIRES_DAYS",
        "ISSUETRACKER_CORS_ORIGINS",
        "ISSUETRACKER_LOG_LEVEL",
        "ISSUETRACKER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)

    config = Config()

    assert config.database_url == DEFAULT_DATABASE_URL
    assert config.uses_default_secret
    assert config.jwt_expires_days == 7
    assert config.log_level == "INFO"
    assert config.port == 8080


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ISSUETRACKER_DATABASE_URL", "sqlite:///tmp/other.db")
    monkeypatch.setenv("ISSUETRACKER_JWT_SECRET", "another-secret")
    monkeypatch.setenv("ISSUETRACKER_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("ISSUETRACKER_LOG_LEVEL", "debug")

    config = Config()

    assert config.database_url == "sqlite:///tmp/other.db"
    assert not config.uses_default_secret
    assert config.cors_origins == ["http://a.test", "http://b.test"]
    assert config.log_level == "DEBUG"
