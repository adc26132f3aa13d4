# =============================================================================
# scripts/test_api.py — Quick API smoke test (run with backend on 127.0.0.1:8000)
# =============================================================================
# Usage: python scripts/test_api.py
# Works with or without provider keys: without any, answers come from the
# canned fallback and the script says so.
# =============================================================================

import os
import sys

import requests

BASE = os.environ.get("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 5


def get(path: str) -> dict | list | None:
    try:
        r = requests.get(f"{BASE}{path}", timeout=TIMEOUT)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        print(f"GET {path} failed: {e}")
        return None


def post(path: str, json: dict) -> tuple[dict | None, int | None]:
    try:
        r = requests.post(f"{BASE}{path}", json=json, timeout=90)
        r.raise_for_status()
        return r.json(), r.status_code
    except requests.HTTPError as e:
        code = e.response.status_code if e.response is not None else None
        print(f"POST {path} failed: {e} (status={code})")
        if e.response is not None:
            print("Response:", e.response.text[:500])
        return None, code
    except requests.RequestException as e:
        print(f"POST {path} failed: {e}")
        return None, None


def main() -> int:
    print("1. GET /health ...")
    h = get("/health")
    if not h:
        print("   Backend not reachable. Start with: uvicorn careerguide.main:app --host 127.0.0.1 --port 8000")
        return 1
    print("   OK:", h.get("status"), "| providers:", h.get("providers"))

    print("2. GET /providers ...")
    p = get("/providers")
    if p is None:
        return 1
    print("   OK: auto order =", p.get("auto_order"))

    print("3. POST /generate (provider=auto, career question) ...")
    out, _ = post("/generate", {"prompt": "What careers suit someone who likes math?", "max_tokens": 200})
    if out is None:
        return 1
    print("   OK: provider_used =", out.get("provider_used"), "| fallback =", out.get("is_fallback"))
    print("   content (first 200 chars):", (out.get("content") or "")[:200])
    if out.get("is_fallback"):
        print("   Tip: set HUGGINGFACE_API_KEY, COHERE_API_KEY or OLLAMA_BASE_URL for real answers.")

    print("4. POST /chat ...")
    out, _ = post("/chat", {"message": "How do I pick a university?"})
    if out is None:
        return 1
    print("   OK: provider =", out.get("provider"), "| confidence =", out.get("confidence"))

    print("5. POST /quiz/analyze ...")
    out, _ = post("/quiz/analyze", {
        "questions": [{"id": "1", "question": "Which skills interest you most?"}],
        "answers": [{"questionId": "1", "answer": "Programming and technology"}],
    })
    if out is None:
        return 1
    print("   OK: careerPath =", out.get("careerPath"), "| score =", out.get("score"))

    print("6. POST /roadmap/generate ...")
    out, _ = post("/roadmap/generate", {"career_goal": "Full-stack developer", "profile": {"timeframe": 12}})
    if out is None:
        return 1
    print("   OK:", out.get("title"), "| phases =", len(out.get("phases", [])))

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
