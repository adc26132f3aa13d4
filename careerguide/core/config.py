import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

PROVIDER_CHOICES = ("huggingface", "cohere", "ollama", "auto")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    huggingface_api_key: str = ""
    huggingface_base_url: str = "https://api-inference.huggingface.co"
    cohere_api_key: str = ""
    cohere_base_url: str = "https://api.cohere.ai"
    # Empty = Ollama not configured
    ollama_base_url: str = ""
    default_provider: str = "auto"
    request_timeout: int = 30
    log_level: str = "INFO"

    @field_validator("default_provider")
    @classmethod
    def _check_default_provider(cls, value: str) -> str:
        value = (value or "auto").strip().lower()
        if value not in PROVIDER_CHOICES:
            raise ValueError(
                f"DEFAULT_AI_PROVIDER must be one of: {', '.join(PROVIDER_CHOICES)}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = (value or "INFO").strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            huggingface_api_key=os.getenv("HUGGINGFACE_API_KEY", ""),
            huggingface_base_url=os.getenv(
                "HUGGINGFACE_BASE_URL", "https://api-inference.huggingface.co"
            ),
            cohere_api_key=os.getenv("COHERE_API_KEY", ""),
            cohere_base_url=os.getenv("COHERE_BASE_URL", "https://api.cohere.ai"),
            ollama_base_url=os.getenv("OLLAMA_BASE_URL", ""),
            default_provider=os.getenv("DEFAULT_AI_PROVIDER", "auto"),
            request_timeout=int(os.getenv("REQUEST_TIMEOUT", "30")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
