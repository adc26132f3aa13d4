from typing import Literal

ProviderName = Literal["huggingface", "cohere", "ollama"]
ProviderChoice = Literal["huggingface", "cohere", "ollama", "auto"]

# Fixed priority order for the candidate list
PROVIDER_PRIORITY: tuple[ProviderName, ...] = ("huggingface", "cohere", "ollama")

FALLBACK_PROVIDER = "fallback"
FALLBACK_CONFIDENCE = 0.6

PROVIDERS = {
    "huggingface": {
        "default_model": "facebook/bart-large-cnn",
        "confidence": 0.85,
        "credential": "HUGGINGFACE_API_KEY",
    },
    "cohere": {
        "default_model": "command-light",
        "confidence": 0.9,
        "credential": "COHERE_API_KEY",
    },
    "ollama": {
        "default_model": "llama3.2:1b",
        # Local models are trusted most
        "confidence": 0.95,
        "credential": "OLLAMA_BASE_URL",
    },
}
