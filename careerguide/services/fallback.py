# =============================================================================
# careerguide/services/fallback.py — Canned guidance when every provider fails
# =============================================================================
# Rules are evaluated top to bottom against the lowercased prompt; the first
# rule with any keyword contained in the prompt wins.
# =============================================================================

from careerguide.core.providers import FALLBACK_CONFIDENCE, FALLBACK_PROVIDER
from careerguide.schemas.generation import GenerationResult

FALLBACK_ERROR = "AI services temporarily unavailable"

PREAMBLE = "I'm here to help with your career and education questions! "

CAREER_GUIDANCE = (
    "Based on current industry trends, here are some popular career paths to consider: "
    "Software Development, Data Science, UX/UI Design, Digital Marketing, and Cybersecurity. "
    "Each offers good growth potential."
)
COLLEGE_GUIDANCE = (
    "College selection is important! Consider factors like program strength, location, cost, "
    "campus culture, and career services. Research schools that excel in your field of interest."
)
SKILL_GUIDANCE = (
    "Skill development is key to career success! Focus on both technical skills relevant to "
    "your field and soft skills like communication and problem-solving."
)
PLANNING_GUIDANCE = (
    "Creating a career roadmap involves setting clear goals, identifying required skills, and "
    "planning learning milestones. Start with short-term achievable goals and build momentum."
)
GENERIC_GUIDANCE = (
    "Due to current AI service limitations, I'm providing general guidance. Feel free to ask "
    "specific questions about careers, education, skills, or learning paths."
)

FALLBACK_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("career", "job"), CAREER_GUIDANCE),
    (("college", "university"), COLLEGE_GUIDANCE),
    (("skill", "learn"), SKILL_GUIDANCE),
    (("roadmap", "plan"), PLANNING_GUIDANCE),
)


def select_guidance(prompt: str) -> str:
    lower = (prompt or "").lower()
    for keywords, guidance in FALLBACK_RULES:
        if any(k in lower for k in keywords):
            return PREAMBLE + guidance
    return PREAMBLE + GENERIC_GUIDANCE


def build_fallback_result(prompt: str, latency_ms: float = 0.0) -> GenerationResult:
    return GenerationResult(
        content=select_guidance(prompt),
        provider_used=FALLBACK_PROVIDER,
        confidence=FALLBACK_CONFIDENCE,
        token_usage=None,
        is_fallback=True,
        latency_ms=latency_ms,
        error=FALLBACK_ERROR,
    )
