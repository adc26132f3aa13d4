# =============================================================================
# run.py — Start the Career Guidance AI backend (FastAPI via uvicorn)
# =============================================================================
# Usage: python run.py
# Backend: http://127.0.0.1:8000 (override with HOST / PORT)
# =============================================================================

import os

import uvicorn

from careerguide.core.config import get_settings

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))


def main():
    settings = get_settings()
    configured = [
        name
        for name, value in (
            ("huggingface", settings.huggingface_api_key),
            ("cohere", settings.cohere_api_key),
            ("ollama", settings.ollama_base_url),
        )
        if value.strip()
    ]
    print(f"Starting Career Guidance AI on http://{HOST}:{PORT} ...")
    print(f"Configured providers: {', '.join(configured) or 'none (fallback answers only)'}")
    uvicorn.run("careerguide.main:app", host=HOST, port=PORT, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
