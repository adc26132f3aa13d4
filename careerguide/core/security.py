from careerguide.core.config import Settings
from careerguide.llms.errors import ProviderUnavailable


def require_huggingface_key(settings: Settings) -> str:
    key = settings.huggingface_api_key
    if not key or not key.strip():
        raise ProviderUnavailable("huggingface", "HUGGINGFACE_API_KEY is not set")
    return key.strip()


def require_cohere_key(settings: Settings) -> str:
    key = settings.cohere_api_key
    if not key or not key.strip():
        raise ProviderUnavailable("cohere", "COHERE_API_KEY is not set")
    return key.strip()


def require_ollama_url(settings: Settings) -> str:
    url = settings.ollama_base_url
    if not url or not url.strip():
        raise ProviderUnavailable("ollama", "OLLAMA_BASE_URL is not set")
    return url.strip().rstrip("/")
