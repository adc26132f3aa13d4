# =============================================================================
# careerguide/llms/router.py — Multi-provider generation with fallback chain
# =============================================================================
# Candidates: [preferred] + configured providers (priority order) minus the
# preferred one; "auto" starts straight from the priority order.
# Each candidate gets exactly one attempt, one at a time. The first non-empty
# answer wins. When every candidate fails (or none is configured) the answer
# is the keyword fallback. generate() never raises.
# =============================================================================

import time
from collections.abc import Sequence

from careerguide.core.config import Settings
from careerguide.core.providers import PROVIDER_PRIORITY, ProviderChoice
from careerguide.llms.base import BaseLLM
from careerguide.llms.cohere_client import CohereClient
from careerguide.llms.errors import ProviderUnavailable
from careerguide.llms.huggingface_client import HuggingFaceClient
from careerguide.llms.ollama_client import OllamaClient
from careerguide.schemas.generation import GenerationRequest, GenerationResult, ProviderCapability
from careerguide.services.fallback import build_fallback_result
from careerguide.utils.logger import logger
from careerguide.utils.token_estimator import estimate_usage


class ProviderOrchestrator:
    def __init__(self, clients: Sequence[BaseLLM]) -> None:
        by_name = {c.name: c for c in clients}
        # Priority order is fixed; unknown names keep their given order after it
        ordered = [by_name[n] for n in PROVIDER_PRIORITY if n in by_name]
        ordered += [c for c in clients if c.name not in PROVIDER_PRIORITY]
        self._clients: dict[str, BaseLLM] = {c.name: c for c in ordered}
        self._configured: tuple[str, ...] = tuple(
            name for name, c in self._clients.items() if c.is_configured
        )

    @property
    def configured_providers(self) -> tuple[str, ...]:
        return self._configured

    def capabilities(self) -> list[ProviderCapability]:
        return [c.capability() for c in self._clients.values()]

    def candidate_order(self, preferred: ProviderChoice) -> list[str]:
        if preferred == "auto":
            return list(self._configured)
        return [preferred] + [p for p in self._configured if p != preferred]

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        start = time.perf_counter()
        for candidate in self.candidate_order(request.preferred_provider):
            client = self._clients.get(candidate)
            if client is None or not client.is_configured:
                logger.debug("provider_skipped", extra={"provider": candidate})
                continue
            attempt_start = time.perf_counter()
            try:
                content = await client.generate(
                    request.prompt,
                    request.model,
                    request.max_tokens,
                    request.temperature,
                )
            except ProviderUnavailable:
                logger.debug("provider_skipped", extra={"provider": candidate})
                continue
            except Exception as e:
                logger.warning(
                    "provider_failed",
                    extra={"provider": candidate, "error": str(e), "error_type": type(e).__name__},
                )
                continue

            if not content or not content.strip():
                logger.warning(
                    "provider_failed",
                    extra={"provider": candidate, "error": "empty content", "error_type": "EmptyContent"},
                )
                continue

            latency_ms = (time.perf_counter() - attempt_start) * 1000
            logger.info(
                "llm_used",
                extra={
                    "requested_provider": request.preferred_provider,
                    "final_provider_used": candidate,
                    "latency_ms": latency_ms,
                },
            )
            return GenerationResult(
                content=content.strip(),
                provider_used=candidate,
                confidence=client.confidence,
                token_usage=estimate_usage(request.prompt, content.strip()),
                is_fallback=False,
                model=client.resolve_model(request.model),
                latency_ms=latency_ms,
            )

        latency_ms = (time.perf_counter() - start) * 1000
        logger.warning(
            "fallback_used",
            extra={
                "requested_provider": request.preferred_provider,
                "configured_providers": list(self._configured),
            },
        )
        return build_fallback_result(request.prompt, latency_ms=latency_ms)

    async def aclose(self) -> None:
        for client in self._clients.values():
            await client.close()


def build_orchestrator(settings: Settings) -> ProviderOrchestrator:
    return ProviderOrchestrator(
        [
            HuggingFaceClient(settings),
            CohereClient(settings),
            OllamaClient(settings),
        ]
    )
