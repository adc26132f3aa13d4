import json
from typing import Any

from careerguide.core.providers import ProviderChoice
from careerguide.llms.router import ProviderOrchestrator
from careerguide.schemas.generation import GenerationRequest, GenerationResult
from careerguide.services.prompts import CAREER_ADVISOR_SYSTEM

HISTORY_TURNS = 3


def build_chat_prompt(
    message: str,
    context: dict[str, Any] | None = None,
    history: list[dict[str, str]] | None = None,
) -> str:
    """Career-advisor prompt; recent history takes precedence over context."""
    contextual = message
    if context:
        contextual = f"Context: {json.dumps(context)}\n\nUser Question: {message}"
    if history:
        lines = "\n".join(
            f"{'User' if turn.get('role') == 'user' else 'Assistant'}: {turn.get('content', '')}"
            for turn in history[-HISTORY_TURNS:]
        )
        contextual = f"Previous conversation:\n{lines}\n\nCurrent question: {message}"
    return f"{CAREER_ADVISOR_SYSTEM}\n\n{contextual}"


async def chat(
    orchestrator: ProviderOrchestrator,
    message: str,
    provider: ProviderChoice = "auto",
    context: dict[str, Any] | None = None,
    history: list[dict[str, str]] | None = None,
) -> GenerationResult:
    request = GenerationRequest(
        prompt=build_chat_prompt(message, context, history),
        preferred_provider=provider,
        max_tokens=1000,
        temperature=0.7,
    )
    return await orchestrator.generate(request)
