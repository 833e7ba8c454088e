"""Turn parsed remote JSON into the payload models shared with local synthesis.

Any shape the payload model cannot accept raises ``MalformedOutputError`` so
that the orchestrator records a failure and falls back.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from resumegen.core.config import get_scoring_value
from resumegen.resilience.errors import MalformedOutputError
from resumegen.schemas.generation import (
    ATSScore,
    EnhancedSections,
    MultiSectionEnhanceRequest,
    ProfileSummary,
    ProfileSummaryRequest,
    ResumeContent,
    ResumeContentRequest,
    ResumeReview,
    SectionEnhancement,
    SectionEnhanceRequest,
)
from resumegen.services.local_synthesis import format_bullets

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _mapping(data: Any, operation: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedOutputError(f"Expected a JSON object for {operation}, got {type(data).__name__}")
    return data


def _validate(model: type[M], data: dict[str, Any], operation: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.info("ai_output_rejected op=%s errors=%s", operation, exc.error_count())
        raise MalformedOutputError(f"AI output for {operation} does not match the expected shape") from exc


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def normalize_resume_content(data: Any, request: ResumeContentRequest) -> ResumeContent:
    body = dict(_mapping(data, "resume-content"))
    personal = body.pop("personalInfo", None)
    if personal is not None and not isinstance(personal, dict):
        raise MalformedOutputError("personalInfo must be an object")
    personal = personal or {}

    summary = _text(personal.get("summary")) or _text(body.get("summary"))
    if summary is None:
        raise MalformedOutputError("AI resume content is missing a summary")
    body["summary"] = summary

    objective = _text(personal.get("objective")) or _text(body.get("objective"))
    body["objective"] = objective if request.is_fresher else None

    improvements = body.get("improvements")
    if isinstance(improvements, list):
        body["improvements"] = improvements[:3]

    content = _validate(ResumeContent, body, "resume-content")
    if request.is_fresher and content.experience:
        content = content.model_copy(update={"experience": []})
    return content


def normalize_section_enhancement(data: Any, request: SectionEnhanceRequest) -> SectionEnhancement:
    if isinstance(data, str):
        raw = data
    else:
        raw = _mapping(data, "section-enhance").get("enhancedContent")
    if isinstance(raw, list):
        raw = "\n".join(str(item) for item in raw)
    if not isinstance(raw, str):
        raise MalformedOutputError("AI section enhancement has no enhancedContent text")
    return _validate(
        SectionEnhancement,
        {"section": request.section, "field": request.field, "enhancedContent": format_bullets(raw.splitlines())},
        "section-enhance",
    )


def normalize_profile_summary(data: Any, request: ProfileSummaryRequest) -> ProfileSummary:
    body = _mapping(data, "profile-summary")
    summary = _text(body.get("summary"))
    objective = _text(body.get("objective")) if request.is_fresher else None
    if summary is None and objective is not None:
        summary = objective
    return _validate(ProfileSummary, {"summary": summary, "objective": objective}, "profile-summary")


def normalize_enhanced_sections(data: Any, request: MultiSectionEnhanceRequest) -> EnhancedSections:
    body = _mapping(data, "multi-section-enhance")
    requested = request.sections
    shaped: dict[str, Any] = {}
    if requested.projects is not None:
        if not isinstance(body.get("projects"), list):
            raise MalformedOutputError("AI output dropped the projects section")
        shaped["projects"] = body["projects"]
    if requested.achievements is not None:
        if not isinstance(body.get("achievements"), list):
            raise MalformedOutputError("AI output dropped the achievements section")
        shaped["achievements"] = body["achievements"]
    if requested.education is not None:
        shaped["courseSummary"] = _text(body.get("courseSummary")) or ""
    return _validate(EnhancedSections, shaped, "multi-section-enhance")


def _score(value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedOutputError("ATS score must be numeric")
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError as exc:
            raise MalformedOutputError("ATS score must be numeric") from exc
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise MalformedOutputError("ATS score must be numeric")
    return int(round(min(max(float(value), 0.0), 100.0)))


def normalize_ats_score(data: Any, target_role: str | None = None, *, now: datetime | None = None) -> ATSScore:
    body = _mapping(data, "ats-score")
    if "score" not in body:
        raise MalformedOutputError("AI ATS output is missing a score")
    score = _score(body["score"])
    keyword_limit = int(get_scoring_value("ats.keyword_limit", 5))
    suggestion_limit = int(get_scoring_value("ats.suggestion_limit", 3))

    def _list(key: str, limit: int) -> list[str]:
        values = body.get(key) or []
        if not isinstance(values, list):
            raise MalformedOutputError(f"{key} must be a list")
        return [str(item) for item in values if str(item).strip()][:limit]

    summary = _text(body.get("summary")) or f"ATS Score: {score}/100 for {target_role or 'this role'}."
    return _validate(
        ATSScore,
        {
            "score": score,
            "summary": summary,
            "keywordsMatched": _list("keywordsMatched", keyword_limit),
            "keywordsMissing": _list("keywordsMissing", keyword_limit),
            "suggestions": _list("suggestions", suggestion_limit),
            "computationMethod": "ai",
            "lastComputedAt": now or datetime.now(timezone.utc),
        },
        "ats-score",
    )


def normalize_resume_review(data: Any) -> ResumeReview:
    return _validate(ResumeReview, _mapping(data, "resume-review"), "resume-review")
