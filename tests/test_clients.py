"""
Request shapes and error mapping of the provider clients, driven through
httpx.MockTransport.
"""
import asyncio
import json

import httpx
import pytest

from careerguide.core.config import Settings
from careerguide.llms.cohere_client import CohereClient
from careerguide.llms.errors import ProviderCallFailed, ProviderUnavailable
from careerguide.llms.huggingface_client import (
    HF_DEFAULT_MODEL,
    HF_QA_MODEL,
    HuggingFaceClient,
    route_model_hint,
)
from careerguide.llms.ollama_client import OllamaClient


def _transport(status=200, payload=None, text=None, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=payload)

    return httpx.MockTransport(handler)


def _generate(client, *, prompt="prompt", model=None, max_tokens=100, temperature=0.3):
    async def go():
        try:
            return await client.generate(prompt, model, max_tokens, temperature)
        finally:
            await client.close()

    return asyncio.run(go())


HF = Settings(huggingface_api_key="hf_key", huggingface_base_url="https://hf.test")
COHERE = Settings(cohere_api_key="co_key", cohere_base_url="https://cohere.test")
OLLAMA = Settings(ollama_base_url="http://ollama.test")


# --- Hugging Face ------------------------------------------------------------


@pytest.mark.parametrize(
    "hint,expected",
    [
        (None, ("text-generation", HF_DEFAULT_MODEL)),
        ("t5-base", ("text-generation", "t5-base")),
        ("facebook/bart-large-cnn", ("text-generation", "facebook/bart-large-cnn")),
        ("bert-base-uncased", ("text-generation", HF_DEFAULT_MODEL)),
        ("microsoft/deberta-v3-base", ("text-generation", HF_DEFAULT_MODEL)),
        ("deepset/roberta-base-squad2", ("question-answering", HF_QA_MODEL)),
        ("gpt2", ("text-generation", HF_DEFAULT_MODEL)),
    ],
)
def test_hf_model_hint_routing(hint, expected):
    assert route_model_hint(hint) == expected


def test_hf_text_generation_request():
    seen = []
    client = HuggingFaceClient(HF, transport=_transport(payload=[{"generated_text": " A plan. "}], seen=seen))

    out = _generate(client, prompt="roadmap please", max_tokens=250, temperature=0.4)

    assert out == "A plan."
    req = seen[0]
    assert str(req.url) == f"https://hf.test/models/{HF_DEFAULT_MODEL}"
    assert req.headers["authorization"] == "Bearer hf_key"
    body = json.loads(req.content)
    assert body == {
        "inputs": "roadmap please",
        "parameters": {
            "max_new_tokens": 250,
            "temperature": 0.4,
            "do_sample": True,
            "return_full_text": False,
        },
    }


def test_hf_question_answering_is_wrapped_as_text():
    seen = []
    client = HuggingFaceClient(HF, transport=_transport(payload={"answer": "Python, SQL", "score": 0.8}, seen=seen))

    out = _generate(client, prompt="resume text", model="deepset/roberta-base-squad2")

    assert out == "Answer: Python, SQL"
    body = json.loads(seen[0].content)
    assert str(seen[0].url).endswith(HF_QA_MODEL)
    assert body["inputs"]["context"] == "resume text"
    assert "question" in body["inputs"]


def test_hf_rate_limit_maps_to_call_failed():
    client = HuggingFaceClient(HF, transport=_transport(status=429, payload={"error": "slow down"}))

    with pytest.raises(ProviderCallFailed, match="rate limit") as exc:
        _generate(client)
    assert exc.value.status_code == 429


def test_hf_malformed_payload():
    client = HuggingFaceClient(HF, transport=_transport(payload={"unexpected": True}))

    with pytest.raises(ProviderCallFailed, match="Invalid response format"):
        _generate(client)


def test_hf_timeout_has_free_tier_floor():
    assert HuggingFaceClient(Settings(request_timeout=10)).timeout == 45
    assert HuggingFaceClient(Settings(request_timeout=90)).timeout == 90


def test_hf_without_key_is_unavailable():
    client = HuggingFaceClient(Settings())

    assert client.is_configured is False
    with pytest.raises(ProviderUnavailable):
        _generate(client)


# --- Cohere ------------------------------------------------------------------


def test_cohere_generate_request():
    seen = []
    client = CohereClient(COHERE, transport=_transport(payload={"generations": [{"text": " Hi "}]}, seen=seen))

    out = _generate(client, prompt="hello", max_tokens=64, temperature=0.1)

    assert out == "Hi"
    req = seen[0]
    assert str(req.url) == "https://cohere.test/v1/generate"
    assert req.headers["authorization"] == "Bearer co_key"
    body = json.loads(req.content)
    assert body["model"] == "command-light"
    assert body["max_tokens"] == 64
    assert body["temperature"] == 0.1
    assert body["k"] == 0
    assert body["return_likelihoods"] == "NONE"


def test_cohere_uses_default_for_foreign_model_hint():
    seen = []
    client = CohereClient(COHERE, transport=_transport(payload={"generations": [{"text": "x"}]}, seen=seen))

    _generate(client, model="deepset/roberta-base-squad2")
    _generate(client, model="command-r")

    assert json.loads(seen[0].content)["model"] == "command-light"
    assert json.loads(seen[1].content)["model"] == "command-r"


def test_cohere_no_generations():
    client = CohereClient(COHERE, transport=_transport(payload={"generations": []}))

    with pytest.raises(ProviderCallFailed, match="No response"):
        _generate(client)


def test_cohere_server_error():
    client = CohereClient(COHERE, transport=_transport(status=500, text="oops"))

    with pytest.raises(ProviderCallFailed) as exc:
        _generate(client)
    assert exc.value.status_code == 500


# --- Ollama ------------------------------------------------------------------


def test_ollama_generate_request():
    seen = []
    client = OllamaClient(OLLAMA, transport=_transport(payload={"response": " local answer "}, seen=seen))

    out = _generate(client, prompt="hi", model="mistral:7b", max_tokens=77, temperature=0.5)

    assert out == "local answer"
    body = json.loads(seen[0].content)
    assert str(seen[0].url) == "http://ollama.test/api/generate"
    assert body == {
        "model": "mistral:7b",
        "prompt": "hi",
        "stream": False,
        "options": {"num_predict": 77, "temperature": 0.5},
    }


def test_ollama_missing_model_hint():
    client = OllamaClient(OLLAMA, transport=_transport(status=404, text="model not found"))

    with pytest.raises(ProviderCallFailed, match="ollama pull llama3.2:1b"):
        _generate(client)


def test_ollama_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = OllamaClient(OLLAMA, transport=httpx.MockTransport(handler))

    with pytest.raises(ProviderCallFailed, match="unreachable"):
        _generate(client)


def test_ollama_check_reachable():
    async def go(client):
        try:
            return await client.check_reachable()
        finally:
            await client.close()

    assert asyncio.run(go(OllamaClient(OLLAMA, transport=_transport(payload={"models": []})))) is True
    assert asyncio.run(go(OllamaClient(Settings()))) is False


@pytest.mark.parametrize("hint", ["bert-base-uncased", "command-r", "t5-small", "facebook/bart-large-cnn"])
def test_ollama_ignores_hints_owned_by_other_providers(hint):
    client = OllamaClient(OLLAMA)

    assert not client.supports_model(hint)
    assert client.resolve_model(hint) == "llama3.2:1b"


def test_ollama_keeps_its_own_tags():
    assert OllamaClient(OLLAMA).resolve_model("mistral:7b") == "mistral:7b"


@pytest.mark.parametrize(
    "hint",
    [
        "t5-base",
        "facebook/bart-large-cnn",
        "deepset/roberta-base-squad2",
        "bert-base-uncased",
        "mistralai/Mistral-7B-Instruct",
        "gpt2",
    ],
)
def test_hf_capability_agrees_with_routing(hint):
    client = HuggingFaceClient(HF)
    task, model = route_model_hint(hint)
    honoured = model == hint or task == "question-answering"

    assert client.supports_model(hint) == honoured
    assert client.capability().supports_model(hint) == honoured
