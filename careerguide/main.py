from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request

from careerguide.core.config import Settings, get_settings
from careerguide.llms.ollama_client import OllamaClient
from careerguide.llms.router import ProviderOrchestrator, build_orchestrator
from careerguide.schemas.generation import GenerationRequest, GenerationResult
from careerguide.schemas.request import (
    ChatRequest,
    CareerFitRequest,
    CollegeRequest,
    GenerateRequest,
    JobMatchRequest,
    QuizRequest,
    ResumeRequest,
    RoadmapRequest,
    SkillProgressRequest,
)
from careerguide.schemas.response import ChatResponse, ProvidersResponse
from careerguide.security.rate_guard import (
    PromptTooLarge,
    RateGuard,
    RateLimitExceeded,
    check_prompt_size,
)
from careerguide.services.career_service import CareerAdvisor
from careerguide.services.chat_service import chat


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    orchestrator = build_orchestrator(settings)
    app.state.settings = settings
    app.state.orchestrator = orchestrator
    app.state.rate_guard = RateGuard()
    yield
    await orchestrator.aclose()


app = FastAPI(title="Career Guidance AI", lifespan=lifespan)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_orchestrator(request: Request) -> ProviderOrchestrator:
    return request.app.state.orchestrator


def get_advisor(orchestrator: ProviderOrchestrator = Depends(get_orchestrator)) -> CareerAdvisor:
    return CareerAdvisor(orchestrator)


async def rate_limit(request: Request) -> None:
    client_host = request.client.host if request.client else "unknown"
    forwarded = request.headers.get("x-forwarded-for")
    ip = forwarded.split(",")[0].strip() if forwarded else client_host
    try:
        await request.app.state.rate_guard.check(ip)
    except RateLimitExceeded:
        raise HTTPException(status_code=429, detail="Rate limit exceeded")


def _guard_size(text: str) -> None:
    try:
        check_prompt_size(text)
    except PromptTooLarge:
        raise HTTPException(status_code=413, detail="Prompt exceeds maximum length")


@app.get("/")
async def root():
    return {
        "message": "Career Guidance AI",
        "docs": "/docs",
        "health": "/health",
        "generate": "POST /generate",
        "chat": "POST /chat",
    }


@app.get("/health")
async def get_health(
    settings: Settings = Depends(get_app_settings),
    orchestrator: ProviderOrchestrator = Depends(get_orchestrator),
):
    providers = {
        "huggingface": "configured" if settings.huggingface_api_key.strip() else "missing_key",
        "cohere": "configured" if settings.cohere_api_key.strip() else "missing_key",
    }
    if settings.ollama_base_url.strip():
        ollama = OllamaClient(settings)
        try:
            providers["ollama"] = "reachable" if await ollama.check_reachable() else "unreachable"
        finally:
            await ollama.close()
    else:
        providers["ollama"] = "missing_url"
    # No provider means every answer comes from the canned fallback
    status = "ok" if orchestrator.configured_providers else "degraded"
    return {"status": status, "providers": providers}


@app.get("/providers", response_model=ProvidersResponse)
async def get_providers(
    settings: Settings = Depends(get_app_settings),
    orchestrator: ProviderOrchestrator = Depends(get_orchestrator),
) -> ProvidersResponse:
    return ProvidersResponse(
        default_provider=settings.default_provider,
        auto_order=orchestrator.candidate_order("auto"),
        capabilities=orchestrator.capabilities(),
    )


@app.post("/generate", response_model=GenerationResult, dependencies=[Depends(rate_limit)])
async def post_generate(
    body: GenerateRequest,
    settings: Settings = Depends(get_app_settings),
    orchestrator: ProviderOrchestrator = Depends(get_orchestrator),
) -> GenerationResult:
    _guard_size(body.prompt)
    request = GenerationRequest(
        prompt=body.prompt,
        preferred_provider=body.provider or settings.default_provider,
        max_tokens=body.max_tokens,
        temperature=body.temperature,
        model=body.model or None,
    )
    return await orchestrator.generate(request)


@app.post("/chat", response_model=ChatResponse, dependencies=[Depends(rate_limit)])
async def post_chat(
    body: ChatRequest,
    settings: Settings = Depends(get_app_settings),
    orchestrator: ProviderOrchestrator = Depends(get_orchestrator),
) -> ChatResponse:
    if not body.message or not body.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")
    _guard_size(body.message)
    result = await chat(
        orchestrator,
        body.message,
        provider=body.provider or settings.default_provider,
        context=body.context,
        history=[turn.model_dump() for turn in body.conversation_history],
    )
    return ChatResponse(
        response=result.content,
        provider=result.provider_used,
        confidence=result.confidence,
        usage=result.token_usage,
        is_fallback=result.is_fallback,
    )


@app.post("/resume/parse", dependencies=[Depends(rate_limit)])
async def post_resume_parse(body: ResumeRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    _guard_size(body.resume_text)
    return await advisor.parse_resume(body.resume_text)


@app.post("/quiz/analyze", dependencies=[Depends(rate_limit)])
async def post_quiz_analyze(body: QuizRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    return await advisor.analyze_quiz(body.questions, body.answers)


@app.post("/roadmap/generate", dependencies=[Depends(rate_limit)])
async def post_roadmap_generate(body: RoadmapRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    return await advisor.generate_roadmap(body.career_goal, body.profile.model_dump())


@app.post("/jobs/match", dependencies=[Depends(rate_limit)])
async def post_jobs_match(
    body: JobMatchRequest,
    settings: Settings = Depends(get_app_settings),
    advisor: CareerAdvisor = Depends(get_advisor),
) -> dict:
    _guard_size(body.resume_text + body.job_description)
    return await advisor.match_resume_to_job(
        body.resume_text,
        body.job_description,
        provider=body.provider or settings.default_provider,
    )


@app.post("/career/fit", dependencies=[Depends(rate_limit)])
async def post_career_fit(body: CareerFitRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    return await advisor.analyze_career_fit(body.profile.model_dump(), body.career_path)


@app.post("/colleges/recommend", dependencies=[Depends(rate_limit)])
async def post_colleges_recommend(body: CollegeRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    return await advisor.recommend_colleges(body.profile.model_dump(), body.preferences.model_dump())


@app.post("/skills/progress", dependencies=[Depends(rate_limit)])
async def post_skills_progress(body: SkillProgressRequest, advisor: CareerAdvisor = Depends(get_advisor)) -> dict:
    return await advisor.analyze_skill_progress(
        [s.model_dump() for s in body.skills],
        body.learning_goals,
    )
