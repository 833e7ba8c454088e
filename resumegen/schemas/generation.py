from __future__ import annotations

from datetime import datetime
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

OperationKind = Literal[
    "resume-content",
    "section-enhance",
    "profile-summary",
    "multi-section-enhance",
    "ats-score",
    "resume-review",
]
Provenance = Literal["ai", "local"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def _as_str_list(value):
    if value is None:
        return value
    if isinstance(value, str):
        lines = [line.strip().lstrip("•-* ").strip() for line in value.splitlines()]
        return [line for line in lines if line]
    return value


class PersonalInfo(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None
    objective: str | None = None


class Education(CamelModel):
    institution: str | None = None
    degree: str | None = None
    field: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: str | None = None
    description: str | None = None
    achievements: list[str] | None = None

    @field_validator("achievements", mode="before")
    @classmethod
    def _coerce_achievements(cls, value):
        return _as_str_list(value)


class Experience(CamelModel):
    company: str | None = None
    position: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool | None = None
    description: list[str] = Field(default_factory=list)
    achievements: list[str] | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value):
        return _as_str_list(value) or []

    @field_validator("achievements", mode="before")
    @classmethod
    def _coerce_achievements(cls, value):
        return _as_str_list(value)


class Skills(CamelModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)


class Project(CamelModel):
    name: str = ""
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    outcomes: list[str] | None = None
    link: str | None = None
    github: str | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _coerce_technologies(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value or []

    @field_validator("outcomes", mode="before")
    @classmethod
    def _coerce_outcomes(cls, value):
        return _as_str_list(value)


class Achievement(CamelModel):
    title: str = ""
    description: str | None = None
    date: str | None = None


class Certification(CamelModel):
    name: str = ""
    issuer: str | None = None
    date: str | None = None
    link: str | None = None


class ResumeData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: list[Education] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    projects: list[Project] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)


# --- requests ---------------------------------------------------------------


class ResumeContentRequest(ResumeData):
    model_config = ConfigDict(frozen=True)

    operation: Literal["resume-content"] = "resume-content"
    role_applying_for: str | None = Field(default=None, max_length=200)
    is_fresher: bool = False
    years_experience: int | None = Field(default=None, ge=0, le=70)
    job_description: str | None = Field(default=None, max_length=20000)
    template: str | None = Field(default=None, max_length=50)


class SectionEnhanceRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    operation: Literal["section-enhance"] = "section-enhance"
    section: str = Field(default="", max_length=50)
    content: str = Field(default="", max_length=10000)
    field: str = Field(default="", max_length=50)
    target_role: str | None = Field(default=None, max_length=200)
    job_description: str | None = Field(default=None, max_length=20000)
    project_name: str | None = Field(default=None, max_length=200)
    technologies: str | None = Field(default=None, max_length=500)
    achievement_title: str | None = Field(default=None, max_length=200)
    date: str | None = Field(default=None, max_length=50)


class ProfileSummaryRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    operation: Literal["profile-summary"] = "profile-summary"
    role_applying_for: str = Field(default="", max_length=200)
    is_fresher: bool = False
    years_experience: int | None = Field(default=None, ge=0, le=70)
    skills: Skills = Field(default_factory=Skills)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)


class SectionsInput(CamelModel):
    projects: list[Project] | None = None
    achievements: list[Achievement] | None = None
    education: list[Education] | None = None
    skills: Skills | None = None


class MultiSectionEnhanceRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    operation: Literal["multi-section-enhance"] = "multi-section-enhance"
    sections: SectionsInput = Field(default_factory=SectionsInput)
    role_applying_for: str | None = Field(default=None, max_length=200)
    is_fresher: bool = False


class ATSScoreRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    operation: Literal["ats-score"] = "ats-score"
    resume_data: ResumeData = Field(default_factory=ResumeData)
    target_role: str | None = Field(default=None, max_length=200)
    job_description: str | None = Field(default=None, max_length=20000)


class ResumeReviewRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    operation: Literal["resume-review"] = "resume-review"
    resume_data: ResumeData = Field(default_factory=ResumeData)
    target_role: str | None = Field(default=None, max_length=200)
    job_description: str | None = Field(default=None, max_length=20000)


GenerationRequest = (
    ResumeContentRequest
    | SectionEnhanceRequest
    | ProfileSummaryRequest
    | MultiSectionEnhanceRequest
    | ATSScoreRequest
    | ResumeReviewRequest
)


# --- payloads ---------------------------------------------------------------


class ResumeContent(CamelModel):
    summary: str
    objective: str | None = None
    education: list[Education] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    projects: list[Project] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list, max_length=3)
    course_summary: str = ""


class SectionEnhancement(CamelModel):
    section: str
    field: str
    enhanced_content: str = Field(min_length=1)


class ProfileSummary(CamelModel):
    summary: str = Field(min_length=1)
    objective: str | None = None


class EnhancedSections(CamelModel):
    projects: list[Project] | None = None
    achievements: list[Achievement] | None = None
    course_summary: str | None = None


class ATSScore(CamelModel):
    score: int = Field(ge=0, le=100)
    summary: str
    keywords_matched: list[str] = Field(default_factory=list)
    keywords_missing: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    computation_method: Provenance
    last_computed_at: datetime


class ResumeReview(CamelModel):
    overall: str = Field(min_length=1)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    ats_tips: list[str] = Field(default_factory=list)
    action_items: list[str] = Field(default_factory=list)


P = TypeVar("P", bound=BaseModel)


class GenerationResult(CamelModel, Generic[P]):
    operation: OperationKind
    provenance: Provenance
    payload: P
    generated_at: datetime
    note: str = ""
