import math

from careerguide.schemas.generation import TokenUsage

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    if not text:
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_usage(prompt: str, content: str) -> TokenUsage:
    return TokenUsage(
        input_tokens=estimate_tokens(prompt),
        output_tokens=estimate_tokens(content),
        total_tokens=math.ceil((len(prompt) + len(content)) / CHARS_PER_TOKEN),
    )
