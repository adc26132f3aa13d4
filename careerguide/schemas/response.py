from pydantic import BaseModel

from careerguide.schemas.generation import ProviderCapability, TokenUsage


class ChatResponse(BaseModel):
    response: str
    provider: str
    confidence: float
    usage: TokenUsage | None = None
    is_fallback: bool


class ProvidersResponse(BaseModel):
    default_provider: str
    auto_order: list[str]
    capabilities: list[ProviderCapability]
