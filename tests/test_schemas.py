import pytest
from pydantic import ValidationError

from careerguide.schemas.generation import GenerationRequest, GenerationResult


def test_request_is_immutable():
    req = GenerationRequest(prompt="hello")

    with pytest.raises(ValidationError):
        req.max_tokens = 5

    assert req.preferred_provider == "auto"
    assert req.max_tokens == 1000
    assert req.temperature == 0.7
    assert req.model is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"prompt": ""},
        {"prompt": "x", "temperature": 1.5},
        {"prompt": "x", "max_tokens": 0},
        {"prompt": "x", "preferred_provider": "openai"},
    ],
)
def test_request_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        GenerationRequest(**kwargs)


def test_result_fallback_flag_must_match_provider():
    with pytest.raises(ValidationError):
        GenerationResult(content="x", provider_used="fallback", confidence=0.6, is_fallback=False)
    with pytest.raises(ValidationError):
        GenerationResult(content="x", provider_used="cohere", confidence=0.9, is_fallback=True)
