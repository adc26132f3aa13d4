# =============================================================================
# careerguide/llms/huggingface_client.py — Hugging Face Inference API client
# =============================================================================
# Uses HUGGINGFACE_API_KEY. The model hint picks the task:
#   roberta / squad  -> question answering on deepset/roberta-base-squad2,
#                       answer wrapped as "Answer: ..."
#   bart / t5        -> text generation on the hinted model
#   anything else    -> text generation on the default model (this includes
#                       classification-style hints such as bert / deberta)
# Free tier: cold models can take a while, so timeout is at least 45s.
# =============================================================================

from typing import Any, Literal

import httpx

from careerguide.core.security import require_huggingface_key
from careerguide.llms.base import BaseLLM
from careerguide.llms.errors import ProviderCallFailed

HF_DEFAULT_MODEL = "facebook/bart-large-cnn"
HF_QA_MODEL = "deepset/roberta-base-squad2"
RESUME_QUESTION = "What are the key skills and experience mentioned in this resume?"
MIN_TIMEOUT = 45

Task = Literal["text-generation", "question-answering"]


def route_model_hint(model: str | None) -> tuple[Task, str]:
    hint = (model or "").strip()
    lowered = hint.lower()
    # roberta must be checked before bert
    if "roberta" in lowered or "squad" in lowered:
        return "question-answering", HF_QA_MODEL
    if "bart" in lowered or "t5" in lowered:
        return "text-generation", hint
    return "text-generation", HF_DEFAULT_MODEL


def _extract_generated_text(data: Any) -> str:
    if isinstance(data, list) and data:
        data = data[0]
    if isinstance(data, dict) and isinstance(data.get("generated_text"), str):
        return data["generated_text"].strip()
    if isinstance(data, str):
        return data.strip()
    raise ValueError("Invalid response format from Hugging Face")


class HuggingFaceClient(BaseLLM):
    name = "huggingface"
    # Same hints route_model_hint honours; everything else gets the default
    hint_pattern = r"bart|t5|roberta|squad"

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.huggingface_api_key.strip())

    @property
    def timeout(self) -> float:
        return float(max(self._settings.request_timeout, MIN_TIMEOUT))

    def resolve_model(self, model_hint: str | None) -> str:
        return route_model_hint(model_hint)[1]

    async def generate(
        self,
        prompt: str,
        model: str | None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        key = require_huggingface_key(self._settings)
        task, resolved_model = route_model_hint(model)
        if task == "question-answering":
            payload: dict[str, Any] = {
                "inputs": {"question": RESUME_QUESTION, "context": prompt},
            }
        else:
            payload = {
                "inputs": prompt,
                "parameters": {
                    "max_new_tokens": max_tokens,
                    "temperature": temperature,
                    "do_sample": True,
                    "return_full_text": False,
                },
            }

        client = await self._get_client()
        url = f"{self._settings.huggingface_base_url.rstrip('/')}/models/{resolved_model}"
        try:
            r = await client.post(url, headers={"Authorization": f"Bearer {key}"}, json=payload)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                raise ProviderCallFailed(
                    self.name,
                    "Hugging Face API rate limit exceeded. Please try again later.",
                    status_code=429,
                ) from e
            raise ProviderCallFailed(
                self.name,
                f"Hugging Face API error {status}: {(e.response.text or '')[:500]}",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            raise ProviderCallFailed(self.name, f"Hugging Face API unreachable: {e!s}") from e
        except ValueError as e:
            raise ProviderCallFailed(self.name, "Invalid response format from Hugging Face") from e

        try:
            if task == "question-answering":
                answer = data.get("answer") if isinstance(data, dict) else None
                if not isinstance(answer, str):
                    raise ValueError("Invalid response format from Hugging Face")
                return f"Answer: {answer.strip()}" if answer.strip() else ""
            return _extract_generated_text(data)
        except ValueError as e:
            raise ProviderCallFailed(self.name, str(e)) from e
