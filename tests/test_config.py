import pytest

from apollo_client.config import ClientConfig


def test_from_env_reads_settings(monkeypatch):
    monkeypatch.setenv("APOLLO_AI_API_KEY", "secret")
    monkeypatch.setenv("APOLLO_AI_BASE_URL", "https://staging.example.com/")
    monkeypatch.setenv("APOLLO_AI_DEBUG", "yes")
    monkeypatch.setenv("APOLLO_AI_TIMEOUT", "12.5")

    config = ClientConfig.from_env()

    assert config.api_key == "secret"
    assert config.debug is True
    assert config.timeout == 12.5
    assert config.clustering_timeout == 300.0
    assert config.url_for("/combinedapi") == "https://staging.example.com/combinedapi"


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("APOLLO_AI_API_KEY", "secret")
    for name in ("APOLLO_AI_BASE_URL", "APOLLO_AI_DEBUG", "APOLLO_AI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    config = ClientConfig.from_env()

    assert config.base_url == "https://api.apollo.ai"
    assert config.debug is False


def test_from_env_requires_api_key(monkeypatch):
    monkeypatch.delenv("APOLLO_AI_API_KEY", raising=False)

    with pytest.raises(ValueError):
        ClientConfig.from_env()
