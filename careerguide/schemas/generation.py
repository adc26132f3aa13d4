import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from careerguide.core.providers import FALLBACK_PROVIDER, ProviderChoice


class GenerationRequest(BaseModel):
    """One generation call. Frozen so every candidate sees the same parameters."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1)
    preferred_provider: ProviderChoice = "auto"
    max_tokens: int = Field(1000, gt=0)
    temperature: float = Field(0.7, ge=0.0, le=1.0)
    model: str | None = None


class TokenUsage(BaseModel):
    input_tokens: int
    output_tokens: int
    total_tokens: int


class GenerationResult(BaseModel):
    content: str
    provider_used: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    token_usage: TokenUsage | None = None
    is_fallback: bool = False
    model: str | None = None
    latency_ms: float = 0.0
    error: str | None = None

    @model_validator(mode="after")
    def _fallback_flag_matches_provider(self) -> "GenerationResult":
        if self.is_fallback != (self.provider_used == FALLBACK_PROVIDER):
            raise ValueError("is_fallback must be true exactly when provider_used is 'fallback'")
        return self


class ProviderCapability(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider_id: str
    is_configured: bool
    default_model: str
    # Model hints matching this pattern are passed through unchanged
    hint_pattern: str

    def supports_model(self, model_hint: str | None) -> bool:
        if not model_hint or not model_hint.strip():
            return False
        return re.search(self.hint_pattern, model_hint.strip().lower()) is not None
