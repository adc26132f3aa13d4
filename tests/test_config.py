import pytest

from careerguide.core.config import Settings
from careerguide.core.security import require_cohere_key, require_ollama_url
from careerguide.llms.errors import ProviderUnavailable


def test_from_env_reads_provider_settings(monkeypatch):
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "hf_123")
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://ollama:11434/")
    monkeypatch.setenv("DEFAULT_AI_PROVIDER", "Cohere")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12")

    s = Settings.from_env()

    assert s.huggingface_api_key == "hf_123"
    assert s.cohere_api_key == ""
    assert s.default_provider == "cohere"
    assert s.request_timeout == 12
    assert require_ollama_url(s) == "http://ollama:11434"


def test_defaults_leave_every_provider_unconfigured():
    s = Settings.from_env()

    assert s.default_provider == "auto"
    assert s.ollama_base_url == ""
    with pytest.raises(ProviderUnavailable):
        require_cohere_key(s)


def test_invalid_default_provider_rejected(monkeypatch):
    monkeypatch.setenv("DEFAULT_AI_PROVIDER", "openai")

    with pytest.raises(ValueError, match="DEFAULT_AI_PROVIDER"):
        Settings.from_env()


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings.from_env().log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings.from_env()
