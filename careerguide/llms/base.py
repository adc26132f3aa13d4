from abc import ABC, abstractmethod

import httpx

from careerguide.core.config import Settings
from careerguide.core.providers import PROVIDERS
from careerguide.schemas.generation import ProviderCapability


class BaseLLM(ABC):
    """Common surface of every provider client the router can try.

    Subclasses set ``name`` and ``hint_pattern`` and implement
    ``is_configured`` and ``generate``. Connection pooling and closing are
    shared here; each client owns one lazily created ``httpx.AsyncClient``.
    """

    name: str
    hint_pattern: str

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def confidence(self) -> float:
        return PROVIDERS[self.name]["confidence"]

    @property
    def default_model(self) -> str:
        return PROVIDERS[self.name]["default_model"]

    @property
    @abstractmethod
    def is_configured(self) -> bool: ...

    @property
    def timeout(self) -> float:
        return float(self._settings.request_timeout)

    def capability(self) -> ProviderCapability:
        return ProviderCapability(
            provider_id=self.name,
            is_configured=self.is_configured,
            default_model=self.default_model,
            hint_pattern=self.hint_pattern,
        )

    def supports_model(self, model_hint: str | None) -> bool:
        return self.capability().supports_model(model_hint)

    def resolve_model(self, model_hint: str | None) -> str:
        if self.supports_model(model_hint):
            return model_hint.strip()
        return self.default_model

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        model: str | None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Return the generated text; raise a ProviderError on any failure."""
