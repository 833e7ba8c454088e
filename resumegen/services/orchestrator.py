"""Per-operation entry points that always return a ``GenerationResult``.

Each operation runs the same pipeline: fingerprint and cache lookup, an
availability check (credential, breaker, daily quota), a bounded retry over
``reserve slot -> breaker-guarded generate -> repair -> parse -> normalize``,
then local synthesis when the remote path produced nothing usable. Whatever
comes out is cached under the fingerprint before it is returned.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import BaseModel

from resumegen.ai.factory import get_text_generator
from resumegen.ai.types import TextGenerator
from resumegen.core.config import Settings, settings as default_settings
from resumegen.resilience import (
    BackoffPolicy,
    CircuitBreaker,
    QuotaGovernor,
    ResponseCache,
    fingerprint,
    with_retry,
)
from resumegen.schemas.generation import (
    ATSScore,
    ATSScoreRequest,
    EnhancedSections,
    GenerationResult,
    MultiSectionEnhanceRequest,
    OperationKind,
    ProfileSummary,
    ProfileSummaryRequest,
    ResumeContent,
    ResumeContentRequest,
    ResumeData,
    ResumeReview,
    ResumeReviewRequest,
    SectionEnhancement,
    SectionEnhanceRequest,
)
from resumegen.services import local_ats, local_synthesis, normalize, prompts
from resumegen.services.errors import ContractError
from resumegen.services.json_repair import parse_repaired

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)

SUPPORTED_SECTIONS = frozenset(
    {"project", "achievement", "experience", "education", "summary", "objective", "skills"}
)


@dataclass(frozen=True)
class OperationPolicy:
    timeout_s: float
    max_attempts: int
    backoff: BackoffPolicy


def build_policies(source: Settings) -> dict[OperationKind, OperationPolicy]:
    fixed = BackoffPolicy("fixed", source.ai_retry_backoff_s, source.ai_retry_backoff_max_s)
    exponential = BackoffPolicy("exponential", source.ai_retry_backoff_s, source.ai_retry_backoff_max_s)
    return {
        "resume-content": OperationPolicy(source.ai_timeout_resume_s, source.ai_max_attempts, fixed),
        "ats-score": OperationPolicy(source.ai_timeout_ats_s, source.ai_max_attempts, fixed),
        "profile-summary": OperationPolicy(source.ai_timeout_summary_s, source.ai_max_attempts, fixed),
        "section-enhance": OperationPolicy(source.ai_timeout_enhance_s, source.ai_enhance_max_attempts, exponential),
        "multi-section-enhance": OperationPolicy(source.ai_timeout_sections_s, source.ai_max_attempts, fixed),
        "resume-review": OperationPolicy(source.ai_timeout_review_s, source.ai_max_attempts, fixed),
    }


def _first_field(education) -> str | None:
    return education[0].field if education else None


def _digest(text: str | None) -> str:
    return hashlib.sha256((text or "").encode("utf-8")).hexdigest()


def _resume_fields(resume: ResumeData) -> dict[str, Any]:
    return {
        "skills": len(resume.skills.technical),
        "experience": len(resume.experience),
        "projects": len(resume.projects),
        "education_field": _first_field(resume.education),
    }


class ContentOrchestrator:
    def __init__(
        self,
        *,
        settings: Settings,
        generator: TextGenerator | None,
        breaker: CircuitBreaker | None = None,
        governor: QuotaGovernor | None = None,
        cache: ResponseCache | None = None,
        rng: random.Random | None = None,
        retry_sleep: Callable[[float], Awaitable[Any]] | None = None,
        now: Callable[[], datetime] | None = None,
    ):
        self._settings = settings
        self._generator = generator
        self._breaker = breaker or CircuitBreaker(
            settings.ai_breaker_failure_threshold, settings.ai_breaker_cooldown_s
        )
        self._governor = governor or QuotaGovernor(
            settings.ai_daily_call_limit, settings.ai_min_call_interval_s
        )
        self._cache = cache if cache is not None else ResponseCache()
        self._rng = rng or random.Random()
        self._retry_sleep = retry_sleep
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._policies = build_policies(settings)

    @property
    def generator(self) -> TextGenerator | None:
        return self._generator

    @generator.setter
    def generator(self, value: TextGenerator | None) -> None:
        self._generator = value

    @property
    def breaker(self) -> CircuitBreaker:
        return self._breaker

    @property
    def governor(self) -> QuotaGovernor:
        return self._governor

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def unavailable_reason(self) -> str | None:
        """Why the remote path would be skipped right now, or None if it is open."""
        if self._generator is None:
            return "no_credential"
        if self._breaker.is_open():
            return "breaker_open"
        if self._governor.is_exhausted():
            return "quota_exhausted"
        return None

    def status(self) -> dict[str, Any]:
        return {
            "provider": self._settings.ai_provider,
            "model": self._settings.ai_model,
            "remote_path_available": self.unavailable_reason() is None,
            "unavailable_reason": self.unavailable_reason(),
            "breaker": self._breaker.snapshot(),
            "quota": self._governor.snapshot(),
            "cache_entries": len(self._cache),
        }

    async def _attempt(
        self,
        prompt: prompts.Prompt,
        policy: OperationPolicy,
        shape: Callable[[Any], P],
    ) -> P:
        await self._governor.reserve_slot()
        generator = self._generator

        async def remote_call() -> P:
            raw = await asyncio.wait_for(generator.generate(prompt.text, prompt.config), timeout=policy.timeout_s)
            return shape(parse_repaired(raw))

        return await self._breaker.call(remote_call)

    async def _execute(
        self,
        operation: OperationKind,
        payload_model: type[P],
        key_fields: dict[str, Any],
        build_prompt: Callable[[], prompts.Prompt],
        shape: Callable[[Any], P],
        local: Callable[[], P],
    ) -> GenerationResult[P]:
        key = fingerprint(operation, **key_fields)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("ai_cache_hit op=%s", operation)
            return cached

        result_type = GenerationResult[payload_model]
        result = None
        note = ""
        reason = self.unavailable_reason()
        if reason is None:
            policy = self._policies[operation]
            prompt = build_prompt()
            outcome = await with_retry(
                lambda: self._attempt(prompt, policy, shape),
                max_attempts=policy.max_attempts,
                backoff=policy.backoff,
                sleep=self._retry_sleep,
            )
            if outcome.ok:
                logger.info("ai_generation_succeeded op=%s attempts=%s", operation, outcome.attempts)
                result = result_type(
                    operation=operation,
                    provenance="ai",
                    payload=outcome.value,
                    generated_at=self._now(),
                )
            else:
                logger.warning(
                    "ai_attempt_failed op=%s attempts=%s falling_back=local: %s",
                    operation,
                    outcome.attempts,
                    outcome.error,
                )
                note = f"remote_failed: {type(outcome.error).__name__}"
        else:
            logger.info("ai_remote_skipped op=%s reason=%s", operation, reason)
            note = reason

        if result is None:
            result = result_type(
                operation=operation,
                provenance="local",
                payload=local(),
                generated_at=self._now(),
                note=note,
            )
        self._cache.put(key, result)
        return result

    async def generate_resume_content(self, request: ResumeContentRequest) -> GenerationResult[ResumeContent]:
        def local() -> ResumeContent:
            content, _ = local_synthesis.enhance_resume_content(
                role=request.role_applying_for,
                is_fresher=request.is_fresher,
                summary=request.personal_info.summary,
                skills=request.skills,
                education=request.education,
                experience=request.experience,
                projects=request.projects,
                achievements=request.achievements,
                years_experience=request.years_experience,
            )
            return content

        return await self._execute(
            "resume-content",
            ResumeContent,
            {"role": request.role_applying_for, "fresher": request.is_fresher, **_resume_fields(request)},
            lambda: prompts.resume_content_prompt(request),
            lambda data: normalize.normalize_resume_content(data, request),
            local,
        )

    async def enhance_section(self, request: SectionEnhanceRequest) -> GenerationResult[SectionEnhancement]:
        section = request.section.strip().lower()
        field = request.field.strip()
        if not section:
            raise ContractError("section is required", field="section")
        if not field:
            raise ContractError("field is required", field="field")
        if section not in SUPPORTED_SECTIONS:
            raise ContractError(f"Unsupported section '{request.section}'", field="section")
        request = request.model_copy(update={"section": section, "field": field})

        return await self._execute(
            "section-enhance",
            SectionEnhancement,
            {
                "section": section,
                "field": field,
                "role": request.target_role,
                "project": request.project_name,
                "achievement": request.achievement_title,
                "technologies": request.technologies,
                "content": _digest(request.content),
            },
            lambda: prompts.section_enhance_prompt(request),
            lambda data: normalize.normalize_section_enhancement(data, request),
            lambda: local_synthesis.enhance_section_text(
                section=section,
                field=field,
                content=request.content,
                target_role=request.target_role,
                project_name=request.project_name,
                technologies=request.technologies,
                achievement_title=request.achievement_title,
            ),
        )

    async def generate_profile_summary(self, request: ProfileSummaryRequest) -> GenerationResult[ProfileSummary]:
        role = request.role_applying_for.strip()
        if not role:
            raise ContractError("roleApplyingFor is required", field="roleApplyingFor")

        return await self._execute(
            "profile-summary",
            ProfileSummary,
            {
                "role": role,
                "fresher": request.is_fresher,
                "skills": len(request.skills.technical),
                "experience": len(request.experience),
                "education_field": _first_field(request.education),
            },
            lambda: prompts.profile_summary_prompt(request),
            lambda data: normalize.normalize_profile_summary(data, request),
            lambda: local_synthesis.profile_summary(
                role=role,
                is_fresher=request.is_fresher,
                skills=request.skills,
                experience=request.experience,
                education=request.education,
                years_experience=request.years_experience,
            ),
        )

    async def enhance_sections(self, request: MultiSectionEnhanceRequest) -> GenerationResult[EnhancedSections]:
        sections = request.sections
        return await self._execute(
            "multi-section-enhance",
            EnhancedSections,
            {
                "role": request.role_applying_for,
                "fresher": request.is_fresher,
                "projects": None if sections.projects is None else [item.name for item in sections.projects],
                "achievements": None if sections.achievements is None else [item.title for item in sections.achievements],
                "content": _digest(sections.model_dump_json()),
                "education_field": None if sections.education is None else _first_field(sections.education),
            },
            lambda: prompts.multi_section_prompt(request),
            lambda data: normalize.normalize_enhanced_sections(data, request),
            lambda: local_synthesis.enhance_sections(
                projects=sections.projects,
                achievements=sections.achievements,
                education=sections.education,
                role=request.role_applying_for,
            ),
        )

    async def compute_ats_score(self, request: ATSScoreRequest) -> GenerationResult[ATSScore]:
        return await self._execute(
            "ats-score",
            ATSScore,
            {
                "role": request.target_role,
                "job_description": bool(request.job_description),
                **_resume_fields(request.resume_data),
            },
            lambda: prompts.ats_score_prompt(request),
            lambda data: normalize.normalize_ats_score(data, request.target_role, now=self._now()),
            lambda: local_ats.compute_ats_score_locally(
                request.resume_data, request.target_role, rng=self._rng, now=self._now()
            ),
        )

    async def review_resume(self, request: ResumeReviewRequest) -> GenerationResult[ResumeReview]:
        resume = request.resume_data

        def local() -> ResumeReview:
            keywords = local_ats.extract_keywords(resume)
            return local_synthesis.review_resume(
                completeness=local_ats.calculate_completeness(resume),
                strengths=local_ats.resume_strengths(resume),
                suggestions=local_ats.local_suggestions(resume, 0, request.target_role),
                missing_keywords=local_ats.missing_keywords(request.target_role, keywords),
                role=request.target_role,
            )

        return await self._execute(
            "resume-review",
            ResumeReview,
            {
                "role": request.target_role,
                "job_description": bool(request.job_description),
                **_resume_fields(resume),
            },
            lambda: prompts.resume_review_prompt(request),
            normalize.normalize_resume_review,
            local,
        )


@lru_cache(maxsize=1)
def get_orchestrator() -> ContentOrchestrator:
    orchestrator = ContentOrchestrator(settings=default_settings, generator=get_text_generator(default_settings))
    logger.info(
        "ai_orchestrator_ready provider=%s remote_path=%s daily_limit=%s breaker_threshold=%s",
        default_settings.ai_provider,
        orchestrator.generator is not None,
        default_settings.ai_daily_call_limit,
        default_settings.ai_breaker_failure_threshold,
    )
    return orchestrator
