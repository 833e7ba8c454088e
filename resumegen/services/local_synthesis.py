"""Deterministic, rule-table driven resume synthesis used when the remote model is unavailable.

Every builder returns the same payload model the AI path produces. Enrichment
only fills gaps: fields the caller already populated are passed through.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from resumegen.schemas.generation import (
    Achievement,
    Education,
    EnhancedSections,
    Experience,
    ProfileSummary,
    Project,
    ResumeContent,
    ResumeReview,
    SectionEnhancement,
    Skills,
)
from resumegen.services import synthesis_tables as tables

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[a-z0-9]+")
GENERIC_ROLE = "Professional"


def _tokens(text: str) -> set[str]:
    return set(_TOKEN_RE.findall(text.lower()))


def _matches(text: str, keyword: str) -> bool:
    # Short keywords ("ai", "ml", "ui") must be whole words; "email" is not AI.
    if len(keyword) <= 3:
        return keyword in _tokens(text)
    return keyword in text.lower()


def classify(text: str | None, categories: Iterable[tuple[str, tuple[str, ...]]]) -> str:
    value = text or ""
    for category, keywords in categories:
        if any(_matches(value, keyword) for keyword in keywords):
            return category
    return "General"


def classify_project(name: str | None) -> str:
    return classify(name, tables.PROJECT_CATEGORIES)


def classify_achievement(title: str | None) -> str:
    return classify(title, tables.ACHIEVEMENT_CATEGORIES)


def classify_position(position: str | None) -> str:
    return classify(position, tables.POSITION_CATEGORIES)


def _skill_list(skills: Skills | None, limit: int, joiner: str, default: str) -> str:
    technical = [s for s in (skills.technical if skills else []) if s and s.strip()]
    return joiner.join(technical[:limit]) or default


def _effective_role(role: str | None) -> str:
    return (role or "").strip() or GENERIC_ROLE


def generate_summary(
    existing: str | None,
    skills: Skills | None,
    experience: list[Experience] | None,
    is_fresher: bool,
    role: str | None,
    years_experience: int | None = None,
) -> str:
    role_name = _effective_role(role)
    if role_name == GENERIC_ROLE:
        return existing or tables.GENERIC_SUMMARY

    skill_list = _skill_list(skills, 3, ", ", "programming")
    if is_fresher:
        template = tables.FRESHER_SUMMARIES.get(role_name, tables.FRESHER_SUMMARY_FALLBACK)
        return template.format(skills=skill_list, role=role_name)

    years = years_experience or len(experience or []) or 1
    template = tables.EXPERIENCED_SUMMARIES.get(role_name, tables.EXPERIENCED_SUMMARY_FALLBACK)
    return template.format(skills=skill_list, role=role_name, years=years)


def generate_objective(education: list[Education] | None, skills: Skills | None, role: str | None) -> str:
    first = education[0] if education else None
    return tables.OBJECTIVE_TEMPLATE.format(
        role=_effective_role(role),
        field=(first.field if first and first.field else "Computer Science"),
        skills=_skill_list(skills, 2, " and ", "software development"),
    )


def enhance_project_description(project: Project) -> str:
    if project.description:
        return project.description
    techs = ", ".join(project.technologies[:3]) or "modern tools"
    category = classify_project(project.name)
    return tables.PROJECT_DESCRIPTIONS[category].format(techs=techs, name=project.name or "the project")


def generate_project_outcomes(project: Project) -> list[str]:
    return list(tables.PROJECT_OUTCOMES[classify_project(project.name)])


def enhance_achievement_description(achievement: Achievement) -> str:
    if achievement.description:
        return achievement.description
    category = classify_achievement(achievement.title)
    return tables.ACHIEVEMENT_DESCRIPTIONS[category].format(title=achievement.title or "this recognition")


def generate_experience_achievements(experience: Experience) -> list[str]:
    category = classify_position(experience.position)
    position = experience.position or "assigned"
    return [line.format(position=position) for line in tables.EXPERIENCE_ACHIEVEMENTS[category]]


def generate_education_achievements(education: Education) -> list[str]:
    achievements: list[str] = []
    try:
        gpa = float(education.gpa) if education.gpa else 0.0
    except ValueError:
        gpa = 0.0
    if gpa >= 3.5:
        achievements.append(f"Graduated with GPA: {education.gpa}")

    subject = f"{education.degree or ''} {education.field or ''}".lower()
    if "computer" in subject:
        achievements.append(
            "Completed comprehensive coursework in algorithms, data structures, and software engineering"
        )
    if "business" in subject:
        achievements.append(
            "Completed core business curriculum with focus on strategic management and leadership"
        )
    achievements.append("Successfully completed academic program with strong performance")
    return achievements


def generate_course_summary(education: list[Education] | None, role: str | None) -> str:
    if not education:
        return ""
    first = education[0]
    field = first.field or "General Studies"
    by_role = tables.COURSE_SUMMARIES.get(field, {})
    if role and role in by_role:
        return by_role[role]
    return tables.COURSE_SUMMARY_FALLBACK.format(
        degree=first.degree or "Degree",
        field=field,
        role=role or "professional roles",
    )


def generate_improvements(
    summary: str | None,
    skills: Skills | None,
    experience: list[Experience] | None,
    is_fresher: bool,
) -> list[str]:
    improvements: list[str] = []
    if not summary:
        improvements.append("Add a professional summary to highlight your strengths")
    if skills and skills.technical and len(skills.technical) < 5:
        improvements.append("Consider adding more technical skills to showcase your expertise")
    if is_fresher and not experience:
        improvements.append("Add internships or relevant projects to strengthen your profile")
    improvements.append("Quantify achievements with specific metrics when possible")
    return improvements[:3]


def enrich_projects(projects: list[Project]) -> list[Project]:
    return [
        project.model_copy(
            update={
                "description": enhance_project_description(project),
                "outcomes": project.outcomes or generate_project_outcomes(project),
            }
        )
        for project in projects
    ]


def enrich_achievements(achievements: list[Achievement]) -> list[Achievement]:
    return [
        achievement.model_copy(update={"description": enhance_achievement_description(achievement)})
        for achievement in achievements
    ]


def enhance_resume_content(
    *,
    role: str | None,
    is_fresher: bool,
    summary: str | None,
    skills: Skills,
    education: list[Education],
    experience: list[Experience],
    projects: list[Project],
    achievements: list[Achievement],
    years_experience: int | None = None,
) -> tuple[ResumeContent, list[str]]:
    """Build a full resume-content payload and the list of enhancements applied."""
    role_name = _effective_role(role)
    course_summary = generate_course_summary(education, role_name)

    content = ResumeContent(
        summary=summary
        or generate_summary(summary, skills, experience, is_fresher, role_name, years_experience),
        objective=generate_objective(education, skills, role_name) if is_fresher else None,
        education=[
            edu.model_copy(
                update={
                    "achievements": edu.achievements or generate_education_achievements(edu),
                    "description": edu.description or course_summary,
                }
            )
            for edu in education
        ],
        # Freshers never get a synthesized work history.
        experience=[]
        if is_fresher
        else [
            exp.model_copy(
                update={"achievements": exp.achievements or generate_experience_achievements(exp)}
            )
            for exp in experience
        ],
        skills=Skills(technical=list(skills.technical), languages=list(skills.languages)),
        projects=enrich_projects(projects),
        achievements=enrich_achievements(achievements),
        certifications=[],
        improvements=generate_improvements(summary, skills, experience, is_fresher),
        course_summary=course_summary,
    )

    enhancements: list[str] = []
    if not summary:
        enhancements.append("Generated professional summary")
    if is_fresher:
        enhancements.append("Created career objective")
    if projects:
        enhancements.append("Enhanced project descriptions")
    if achievements:
        enhancements.append("Improved achievement descriptions")
    if education:
        enhancements.append("Added education details")
    if enhancements:
        logger.info("local_enhancement_completed role=%s applied=%s", role_name, ", ".join(enhancements))
    return content, enhancements


def profile_summary(
    *,
    role: str,
    is_fresher: bool,
    skills: Skills,
    experience: list[Experience],
    education: list[Education],
    years_experience: int | None = None,
) -> ProfileSummary:
    summary = generate_summary(None, skills, experience, is_fresher, role, years_experience)
    objective = generate_objective(education, skills, role) if is_fresher else None
    return ProfileSummary(summary=summary, objective=objective)


def enhance_sections(
    *,
    projects: list[Project] | None,
    achievements: list[Achievement] | None,
    education: list[Education] | None,
    role: str | None,
) -> EnhancedSections:
    return EnhancedSections(
        projects=enrich_projects(projects) if projects is not None else None,
        achievements=enrich_achievements(achievements) if achievements is not None else None,
        course_summary=generate_course_summary(education, role) if education is not None else None,
    )


def format_bullets(lines: Iterable[str]) -> str:
    cleaned = [line.strip() for line in lines if line and line.strip()]
    return "\n".join(line if line.startswith("•") else f"• {line}" for line in cleaned)


def _sentences(text: str) -> list[str]:
    parts = re.split(r"(?<=[.!?])\s+|\n+", text or "")
    return [part.strip().rstrip(".") for part in parts if part.strip()]


def enhance_section_text(
    *,
    section: str,
    field: str,
    content: str,
    target_role: str | None = None,
    project_name: str | None = None,
    technologies: str | None = None,
    achievement_title: str | None = None,
) -> SectionEnhancement:
    """Bullet-formatted enhancement of a single section field."""
    body = content.strip()
    if section == "project":
        tech_list = [item.strip() for item in (technologies or "").split(",") if item.strip()]
        project = Project(name=project_name or "", technologies=tech_list)
        category = classify_project(project.name or body)
        if field == "outcomes":
            lines = list(tables.PROJECT_OUTCOMES[category])
        elif body:
            lines = [*_sentences(body), tables.PROJECT_OUTCOMES[category][0]]
        else:
            lines = _sentences(enhance_project_description(project))
    elif section == "achievement":
        achievement = Achievement(title=achievement_title or body[:80])
        generated = _sentences(enhance_achievement_description(achievement))
        lines = [*_sentences(body), *generated][:3] if body else generated[:3]
    elif section == "experience":
        generated = generate_experience_achievements(Experience(position=target_role))
        lines = [*_sentences(body), *generated][:4]
    else:
        lines = _sentences(body) or ["Quantify achievements with specific metrics when possible"]
    return SectionEnhancement(section=section, field=field, enhanced_content=format_bullets(lines))


def review_resume(
    *,
    completeness: float,
    strengths: list[str],
    suggestions: list[str],
    missing_keywords: list[str],
    role: str | None,
) -> ResumeReview:
    role_name = _effective_role(role)
    if completeness >= 0.8:
        overall = f"Well-structured resume for a {role_name} position with most key sections in place."
    elif completeness >= 0.4:
        overall = f"Solid base for a {role_name} application; a few sections need more detail."
    else:
        overall = f"The resume is missing several core sections expected for a {role_name} position."

    ats_tips = ["Use standard section headings such as Experience, Education and Skills"]
    if missing_keywords:
        ats_tips.append(f"Work in relevant keywords such as {', '.join(missing_keywords[:3])}")
    return ResumeReview(
        overall=overall,
        strengths=strengths or ["Clear intent for the target role"],
        improvements=suggestions,
        ats_tips=ats_tips,
        action_items=[*suggestions[:2], "Tailor the summary to each job description"],
    )
