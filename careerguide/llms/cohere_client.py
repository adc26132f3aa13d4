import httpx

from careerguide.core.security import require_cohere_key
from careerguide.llms.base import BaseLLM
from careerguide.llms.errors import ProviderCallFailed


class CohereClient(BaseLLM):
    name = "cohere"
    # command, command-light, command-r, ...
    hint_pattern = r"^command"

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.cohere_api_key.strip())

    async def generate(
        self,
        prompt: str,
        model: str | None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        key = require_cohere_key(self._settings)
        client = await self._get_client()
        try:
            r = await client.post(
                f"{self._settings.cohere_base_url.rstrip('/')}/v1/generate",
                headers={"Authorization": f"Bearer {key}"},
                json={
                    "model": self.resolve_model(model),
                    "prompt": prompt,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "k": 0,
                    "stop_sequences": [],
                    "return_likelihoods": "NONE",
                },
            )
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 429:
                raise ProviderCallFailed(self.name, "Cohere rate limit exceeded", status_code=429) from e
            raise ProviderCallFailed(
                self.name,
                f"Cohere API error {status}: {(e.response.text or '')[:500]}",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            raise ProviderCallFailed(self.name, f"Cohere API unreachable: {e!s}") from e
        except ValueError as e:
            raise ProviderCallFailed(self.name, "Invalid response format from Cohere") from e

        generations = data.get("generations") if isinstance(data, dict) else None
        if not generations:
            raise ProviderCallFailed(self.name, "No response from Cohere")
        return (generations[0].get("text") or "").strip()
