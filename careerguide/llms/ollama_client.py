import httpx

from careerguide.core.security import require_ollama_url
from careerguide.llms.base import BaseLLM
from careerguide.llms.errors import ProviderCallFailed


class OllamaClient(BaseLLM):
    name = "ollama"
    # Ollama tags ("llama3.2:1b"); repo ids and hints owned by the
    # Hugging Face or Cohere clients fall back to the default model
    hint_pattern = r"^(?!command)(?!.*(?:bert|bart|t5|squad))[^/]+$"

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.ollama_base_url.strip())

    async def generate(
        self,
        prompt: str,
        model: str | None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        base_url = require_ollama_url(self._settings)
        resolved_model = self.resolve_model(model)
        client = await self._get_client()
        try:
            r = await client.post(
                f"{base_url}/api/generate",
                json={
                    "model": resolved_model,
                    "prompt": prompt,
                    "stream": False,
                    "options": {
                        "num_predict": max_tokens,
                        "temperature": temperature,
                    },
                },
            )
        except httpx.RequestError as e:
            raise ProviderCallFailed(self.name, f"Ollama unreachable: {e!s}") from e

        if r.status_code == 404:
            raise ProviderCallFailed(
                self.name,
                f"Ollama model '{resolved_model}' not found. Pull it first: ollama pull {resolved_model}",
                status_code=404,
            )
        if r.is_error:
            raise ProviderCallFailed(
                self.name,
                f"Ollama API error {r.status_code}: {(r.text or '')[:500]}",
                status_code=r.status_code,
            )
        try:
            data = r.json()
        except ValueError as e:
            raise ProviderCallFailed(self.name, "Invalid response format from Ollama") from e
        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ProviderCallFailed(self.name, "Invalid response format from Ollama")
        return text.strip()

    async def check_reachable(self) -> bool:
        if not self.is_configured:
            return False
        try:
            client = await self._get_client()
            r = await client.get(f"{require_ollama_url(self._settings)}/api/tags", timeout=5.0)
            return r.status_code == 200
        except httpx.HTTPError:
            return False
