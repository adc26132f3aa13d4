# =============================================================================
# careerguide/services/career_service.py — Structured guidance helpers
# =============================================================================
# Each helper builds a prompt, asks the router, and parses the answer as a JSON
# object. If parsing fails (including when the router itself fell back to
# canned text) the helper answers with its own structured fallback.
# =============================================================================

import datetime
from typing import Any, Callable

from careerguide.core.providers import ProviderChoice
from careerguide.llms.router import ProviderOrchestrator
from careerguide.schemas.generation import GenerationRequest
from careerguide.services import prompts
from careerguide.services import structured_fallbacks as fallbacks
from careerguide.utils.json_utils import load_json_obj
from careerguide.utils.logger import logger

RESUME_MODEL = "deepset/roberta-base-squad2"
QUIZ_MODEL = "bert-base-uncased"
ROADMAP_MODEL = "facebook/bart-large-cnn"


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


class CareerAdvisor:
    def __init__(self, orchestrator: ProviderOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def _ask_json(
        self,
        helper: str,
        request: GenerationRequest,
        fallback: Callable[[], dict[str, Any]],
    ) -> tuple[dict[str, Any], bool]:
        """Return (payload, parsed_from_model)."""
        result = await self._orchestrator.generate(request)
        try:
            return load_json_obj(result.content), True
        except ValueError as e:
            logger.warning(
                "structured_parse_failed",
                extra={"helper": helper, "provider": result.provider_used, "error": str(e)},
            )
            return fallback(), False

    async def parse_resume(self, resume_text: str, temperature: float = 0.7) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.resume_prompt(resume_text),
            preferred_provider="huggingface",
            model=RESUME_MODEL,
            max_tokens=2000,
            temperature=temperature,
        )
        payload, _ = await self._ask_json("parse_resume", request, fallbacks.resume_fallback)
        return payload

    async def analyze_quiz(
        self,
        questions: list[Any],
        answers: list[Any],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.quiz_prompt(questions, answers),
            preferred_provider="huggingface",
            model=QUIZ_MODEL,
            max_tokens=1500,
            temperature=temperature,
        )
        analysis, parsed = await self._ask_json("analyze_quiz", request, fallbacks.quiz_fallback)
        if not parsed:
            return analysis
        try:
            score = float(analysis.get("score") or 75)
        except (TypeError, ValueError):
            score = 75.0
        return {
            "careerPath": analysis.get("careerPath") or "General Career Path",
            "score": min(100.0, max(0.0, score)),
            "interests": _as_list(analysis.get("interests")),
            "skills": _as_list(analysis.get("skills")),
            "description": analysis.get("description") or "Career path analysis completed.",
            "relatedCareers": _as_list(analysis.get("relatedCareers")),
            "averageSalary": analysis.get("averageSalary") or "Varies by location and experience",
            "growthProspect": analysis.get("growthProspect") or "Medium growth potential",
            "personalityMatch": analysis.get("personalityMatch") or "Good personality match",
            "recommendedSkills": _as_list(analysis.get("recommendedSkills")),
            "industryInsights": analysis.get("industryInsights") or "Growing industry with opportunities",
            "nextSteps": _as_list(analysis.get("nextSteps")),
            "analyzed_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "ai_generated": True,
        }

    async def generate_roadmap(
        self,
        career_goal: str,
        profile: dict[str, Any],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.roadmap_prompt(career_goal, profile),
            preferred_provider="huggingface",
            model=ROADMAP_MODEL,
            max_tokens=2500,
            temperature=temperature,
        )
        timeframe = int(profile.get("timeframe") or 12)
        payload, _ = await self._ask_json(
            "generate_roadmap",
            request,
            lambda: fallbacks.roadmap_fallback(career_goal, timeframe),
        )
        return payload

    async def match_resume_to_job(
        self,
        resume_text: str,
        job_description: str,
        provider: ProviderChoice = "auto",
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.job_match_prompt(resume_text, job_description),
            preferred_provider=provider,
            temperature=temperature,
        )
        payload, _ = await self._ask_json("match_resume_to_job", request, fallbacks.job_match_fallback)
        return payload

    async def analyze_career_fit(
        self,
        profile: dict[str, Any],
        career_path: str,
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.build_enhanced_prompt(
                prompts.career_fit_prompt(profile, career_path),
                system_prompt=prompts.CAREER_COUNSELOR_SYSTEM,
            ),
            preferred_provider="huggingface",
            max_tokens=1500,
            temperature=temperature,
        )
        payload, _ = await self._ask_json(
            "analyze_career_fit",
            request,
            lambda: fallbacks.career_fit_fallback(profile, career_path),
        )
        return payload

    async def recommend_colleges(
        self,
        profile: dict[str, Any],
        preferences: dict[str, Any],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.build_enhanced_prompt(
                prompts.college_prompt(profile, preferences),
                system_prompt=prompts.ADMISSIONS_COUNSELOR_SYSTEM,
            ),
            preferred_provider="huggingface",
            max_tokens=2000,
            temperature=temperature,
        )
        payload, _ = await self._ask_json("recommend_colleges", request, fallbacks.college_fallback)
        return payload

    async def analyze_skill_progress(
        self,
        skills: list[dict[str, Any]],
        learning_goals: list[str],
        temperature: float = 0.7,
    ) -> dict[str, Any]:
        request = GenerationRequest(
            prompt=prompts.build_enhanced_prompt(
                prompts.skill_progress_prompt(skills, learning_goals),
                system_prompt=prompts.LEARNING_ANALYST_SYSTEM,
            ),
            preferred_provider="huggingface",
            max_tokens=1500,
            temperature=temperature,
        )
        payload, _ = await self._ask_json(
            "analyze_skill_progress",
            request,
            lambda: fallbacks.skill_progress_fallback(skills, learning_goals),
        )
        return payload
