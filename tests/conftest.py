"""
Shared fixtures: scripted provider clients so the router can be exercised
without network calls.
"""
import pytest

from careerguide.core.config import Settings
from careerguide.llms.base import BaseLLM


class ScriptedLLM(BaseLLM):
    """Provider stand-in that replays a fixed reply or raises a fixed error."""

    hint_pattern = r".+"

    def __init__(self, name: str, *, configured: bool = True, reply: str = "", error: Exception | None = None):
        super().__init__(Settings())
        self.name = name
        self._configured = configured
        self._reply = reply
        self._error = error
        self.calls: list[dict] = []

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def generate(self, prompt, model, max_tokens, temperature):
        self.calls.append(
            {"prompt": prompt, "model": model, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self._error is not None:
            raise self._error
        return self._reply


@pytest.fixture
def scripted():
    """Factory: scripted("cohere", reply="hi") or scripted("ollama", error=RuntimeError())."""
    return ScriptedLLM


@pytest.fixture(autouse=True)
def _clean_provider_env(monkeypatch):
    for var in (
        "HUGGINGFACE_API_KEY",
        "HUGGINGFACE_BASE_URL",
        "COHERE_API_KEY",
        "COHERE_BASE_URL",
        "OLLAMA_BASE_URL",
        "DEFAULT_AI_PROVIDER",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
