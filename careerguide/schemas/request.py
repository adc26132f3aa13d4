from typing import Any, Literal

from pydantic import BaseModel, Field

ProviderField = Literal["huggingface", "cohere", "ollama", "auto"] | None


class GenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    provider: ProviderField = None  # None = DEFAULT_AI_PROVIDER
    model: str | None = None  # None = provider default
    max_tokens: int = Field(1000, gt=0, le=4096)
    temperature: float = Field(0.7, ge=0.0, le=1.0)


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    provider: ProviderField = None
    context: dict[str, Any] | None = None
    conversation_history: list[ChatTurn] = Field(default_factory=list)


class ResumeRequest(BaseModel):
    resume_text: str = Field(..., min_length=1)


class QuizRequest(BaseModel):
    questions: list[Any]
    answers: list[Any]


class RoadmapProfile(BaseModel):
    current_level: str = "beginner"
    timeframe: int = Field(12, gt=0, le=120)
    interests: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    learning_style: str | None = None
    budget: str | None = None


class RoadmapRequest(BaseModel):
    career_goal: str = Field(..., min_length=1)
    profile: RoadmapProfile = Field(default_factory=RoadmapProfile)


class JobMatchRequest(BaseModel):
    resume_text: str = Field(..., min_length=1)
    job_description: str = Field(..., min_length=1)
    provider: ProviderField = None


class UserProfile(BaseModel):
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    experience: str | None = None
    education: str | None = None


class CareerFitRequest(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    career_path: str = Field(..., min_length=1)


class CollegePreferences(BaseModel):
    location: list[str] = Field(default_factory=list)
    budget: str | None = None
    program_type: str | None = None
    size: str | None = None
    specializations: list[str] = Field(default_factory=list)


class CollegeRequest(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    preferences: CollegePreferences = Field(default_factory=CollegePreferences)


class SkillEntry(BaseModel):
    name: str
    level: float = Field(0, ge=0, le=100)
    last_updated: str | None = None


class SkillProgressRequest(BaseModel):
    skills: list[SkillEntry] = Field(default_factory=list)
    learning_goals: list[str] = Field(default_factory=list)
