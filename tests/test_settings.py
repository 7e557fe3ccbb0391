# tests/test_settings.py
from config.settings import DEFAULT_ADAPTER_TIMEOUT, SearchSettings


def test_from_env(monkeypatch):
    monkeypatch.setenv("SEMANTIC_SCHOLAR_API_KEY", "s2-key")
    monkeypatch.setenv("CORE_API_KEY", "   ")
    monkeypatch.setenv("SEARCH_ADAPTER_TIMEOUT", "2.5")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "0")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("NCBI_API_KEY", raising=False)

    settings = SearchSettings.from_env()

    assert settings.semantic_scholar_api_key == "s2-key"
    assert settings.core_api_key is None
    assert settings.ncbi_api_key is None
    assert settings.adapter_timeout == 2.5
    assert settings.rate_limit_per_minute == 0
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "DEBUG"


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("SEARCH_ADAPTER_TIMEOUT", "soon")

    assert SearchSettings.from_env().adapter_timeout == DEFAULT_ADAPTER_TIMEOUT
