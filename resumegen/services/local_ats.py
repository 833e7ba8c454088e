from __future__ import annotations

import logging
import random
from datetime import datetime, timezone

from resumegen.core.config import get_scoring_value
from resumegen.schemas.generation import ATSScore, ResumeData
from resumegen.services import synthesis_tables as tables

logger = logging.getLogger(__name__)


def _weight(name: str) -> float:
    return float(get_scoring_value(f"ats.weights.{name}", 0.0))


def calculate_completeness(resume: ResumeData) -> float:
    """Weighted fraction of expected sections present; weights sum to 1.0."""
    info = resume.personal_info
    completeness = 0.0
    if info.summary:
        completeness += _weight("summary")
    if info.email:
        completeness += _weight("email")
    if info.phone:
        completeness += _weight("phone")
    if resume.education:
        completeness += _weight("education")
    if resume.experience:
        completeness += _weight("experience")
    if resume.skills.technical:
        completeness += _weight("technical_skills")
    if resume.projects:
        completeness += _weight("projects")
    if resume.achievements:
        completeness += _weight("achievements")
    return round(completeness, 4)


def calculate_resume_length(resume: ResumeData) -> int:
    length = len(resume.personal_info.summary or "") + len(resume.personal_info.objective or "")
    for edu in resume.education:
        length += len(edu.description or "")
        length += len(" ".join(edu.achievements or []))
    for exp in resume.experience:
        length += len(" ".join(exp.description))
        length += len(" ".join(exp.achievements or []))
    for project in resume.projects:
        length += len(project.description or "")
        length += len(" ".join(project.outcomes or []))
    for achievement in resume.achievements:
        length += len(achievement.description or "")
    return length


def length_bonus(resume_length: int) -> float:
    per_point = float(get_scoring_value("ats.length_bonus.chars_per_point", 1000))
    cap = float(get_scoring_value("ats.length_bonus.max_points", 5))
    return min(max(resume_length, 0) / per_point, cap)


def score_from_completeness(ratio: float, resume_length: int, rng: random.Random) -> int:
    """Local scores stay inside a band picked by completeness and never exceed the cap.

    Incomplete resumes land in [35, 50); complete ones in [70, 80] with a
    length bonus folded in before clamping.
    """
    threshold = float(get_scoring_value("ats.completeness_threshold", 0.4))
    if ratio < threshold:
        low = int(get_scoring_value("ats.bands.incomplete.low", 35))
        high = int(get_scoring_value("ats.bands.incomplete.high", 50))
        return rng.randrange(low, high)

    low = int(get_scoring_value("ats.bands.complete.low", 70))
    high = int(get_scoring_value("ats.bands.complete.high", 80))
    base = rng.randint(low, high)
    return int(min(base + length_bonus(resume_length), high))


def extract_keywords(resume: ResumeData) -> list[str]:
    keywords: dict[str, None] = {}
    for word in (resume.personal_info.summary or "").lower().split():
        if len(word) > 3:
            keywords.setdefault(word, None)
    for skill in resume.skills.technical:
        if skill and skill.strip():
            keywords.setdefault(skill.strip().lower(), None)
    return list(keywords)


def missing_keywords(role: str | None, keywords: list[str]) -> list[str]:
    expected = tables.ROLE_KEYWORDS.get(role or "", tables.ROLE_KEYWORDS[tables.DEFAULT_KEYWORD_ROLE])
    present = {keyword.lower() for keyword in keywords}
    return [keyword for keyword in expected if keyword not in present]


def local_suggestions(resume: ResumeData, score: int, role: str | None) -> list[str]:
    suggestions: list[str] = []
    if score < int(get_scoring_value("ats.strong_match_score", 75)):
        suggestions.append(f"Add more {role or 'role'}-specific keywords to improve ATS matching")
    if not resume.personal_info.summary:
        suggestions.append("Add a professional summary to highlight your strengths")
    if resume.skills.technical and len(resume.skills.technical) < 5:
        suggestions.append("Include more technical skills relevant to your target role")
    if resume.experience:
        suggestions.append("Quantify your achievements with specific metrics and numbers")
    if resume.projects:
        suggestions.append("Enhance project descriptions with outcomes and technologies used")
    return suggestions[: int(get_scoring_value("ats.suggestion_limit", 3))]


def compute_ats_score_locally(
    resume: ResumeData,
    target_role: str | None = None,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> ATSScore:
    generator = rng or random.Random()
    completeness = calculate_completeness(resume)
    resume_length = calculate_resume_length(resume)
    score = score_from_completeness(completeness, resume_length, generator)

    threshold = float(get_scoring_value("ats.completeness_threshold", 0.4))
    if completeness < threshold:
        summary = (
            f"ATS Score: {score}/100 - Resume appears incomplete. Please add more sections like "
            "projects, achievements, or certifications to improve your score."
        )
    else:
        verdict = "Strong match!" if score >= int(get_scoring_value("ats.strong_match_score", 75)) else "Good match!"
        summary = (
            f"ATS Score: {score}/100 - {verdict} Your resume shows good potential for "
            f"{target_role or 'this role'}."
        )

    limit = int(get_scoring_value("ats.keyword_limit", 5))
    keywords = extract_keywords(resume)
    logger.debug("local_ats_scored completeness=%s length=%s score=%s", completeness, resume_length, score)
    return ATSScore(
        score=score,
        summary=summary,
        keywords_matched=keywords[:limit],
        keywords_missing=missing_keywords(target_role, keywords)[:limit],
        suggestions=local_suggestions(resume, score, target_role),
        computation_method="local",
        last_computed_at=now or datetime.now(timezone.utc),
    )


def resume_strengths(resume: ResumeData) -> list[str]:
    strengths: list[str] = []
    if resume.personal_info.summary:
        strengths.append("Includes a professional summary")
    if resume.experience:
        strengths.append(f"Lists {len(resume.experience)} work experience entries")
    if len(resume.skills.technical) >= 5:
        strengths.append("Broad technical skill set")
    if resume.projects:
        strengths.append("Showcases hands-on projects")
    if resume.education:
        strengths.append("Education background is documented")
    return strengths
