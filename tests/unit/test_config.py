"""Unit tests for settings loading."""

from infrastructure.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("OPENJUDGE_DOMAIN", "OPENJUDGE_GROUPS", "OPENJUDGE_POLL_INTERVAL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("infrastructure.config.load_dotenv", lambda: False)

    settings = load_settings()

    assert settings.domain == "openjudge.cn"
    assert settings.groups == ["python"]
    assert settings.poll_interval == 2.0
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setattr("infrastructure.config.load_dotenv", lambda: False)
    monkeypatch.setenv("OPENJUDGE_DOMAIN", "example.test")
    monkeypatch.setenv("OPENJUDGE_GROUPS", "python, noi ,,")
    monkeypatch.setenv("OPENJUDGE_MAX_POLL_ATTEMPTS", "5")
    monkeypatch.setenv("OPENJUDGE_INTERFACE_LANGUAGE", "en_US")

    settings = load_settings()

    assert settings.domain == "example.test"
    assert settings.groups == ["python", "noi"]
    assert settings.max_poll_attempts == 5
    assert settings.interface_language == "en_US"
    assert Settings().interface_language is None
