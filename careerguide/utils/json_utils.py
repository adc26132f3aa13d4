import json
import re
from typing import Any

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def load_json_obj(text: str) -> dict[str, Any]:
    """
    Parse a JSON object from model output, tolerating code fences and
    surrounding prose. Raises ValueError if no object can be recovered.
    """
    if not text or not text.strip():
        raise ValueError("empty JSON payload")

    cleaned = text.strip()
    fence_match = _CODE_FENCE_RE.match(cleaned)
    if fence_match:
        cleaned = fence_match.group(1).strip()

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError:
        start = cleaned.find("{")
        end = cleaned.rfind("}")
        if start == -1 or end == -1 or start >= end:
            raise ValueError("no JSON object found")
        try:
            payload = json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON payload: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError("expected JSON object")
    return payload
