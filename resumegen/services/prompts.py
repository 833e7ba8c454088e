"""Prompt text and response schemas for every remote generation operation.

Each builder returns a ``Prompt``; the schema is passed to the provider so
that JSON mode can be enforced where the provider supports it. Field names in
the schemas are the camelCase wire names of the payload models.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from resumegen.ai.types import GenerationConfig
from resumegen.schemas.generation import (
    ATSScoreRequest,
    MultiSectionEnhanceRequest,
    ProfileSummaryRequest,
    ResumeContentRequest,
    ResumeData,
    ResumeReviewRequest,
    SectionEnhanceRequest,
)

RESUME_JOB_DESCRIPTION_CHARS = 200
ATS_JOB_DESCRIPTION_CHARS = 300
REVIEW_JOB_DESCRIPTION_CHARS = 1500

JSON_ONLY = (
    "IMPORTANT: Generate ONLY valid JSON. Do not include any text before or after the JSON. "
    "Ensure all strings are properly quoted and escaped."
)

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": _STRING}


@dataclass(frozen=True)
class Prompt:
    text: str
    config: GenerationConfig


def _object(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


PROJECT_SCHEMA = _object(
    {
        "name": _STRING,
        "description": _STRING,
        "technologies": _STRING_LIST,
        "outcomes": _STRING_LIST,
    },
    ["name"],
)
ACHIEVEMENT_SCHEMA = _object({"title": _STRING, "date": _STRING, "description": _STRING}, ["title"])

RESUME_CONTENT_SCHEMA = _object(
    {
        "personalInfo": _object({"summary": _STRING, "objective": _STRING}, ["summary"]),
        "education": {
            "type": "array",
            "items": _object(
                {
                    "institution": _STRING,
                    "degree": _STRING,
                    "field": _STRING,
                    "startDate": _STRING,
                    "endDate": _STRING,
                    "gpa": _STRING,
                    "achievements": _STRING_LIST,
                },
                ["institution", "degree", "field"],
            ),
        },
        "experience": {
            "type": "array",
            "items": _object(
                {
                    "company": _STRING,
                    "position": _STRING,
                    "startDate": _STRING,
                    "endDate": _STRING,
                    "achievements": _STRING_LIST,
                },
                ["company", "position"],
            ),
        },
        "skills": _object({"technical": _STRING_LIST, "languages": _STRING_LIST}),
        "projects": {"type": "array", "items": PROJECT_SCHEMA},
        "achievements": {"type": "array", "items": ACHIEVEMENT_SCHEMA},
        "certifications": {
            "type": "array",
            "items": _object({"name": _STRING, "issuer": _STRING, "date": _STRING}, ["name"]),
        },
        "improvements": {"type": "array", "items": _STRING, "maxItems": 3},
    },
    ["personalInfo"],
)

SECTION_ENHANCE_SCHEMA = _object({"enhancedContent": _STRING}, ["enhancedContent"])

PROFILE_SUMMARY_SCHEMA = _object({"summary": _STRING, "objective": _STRING}, ["summary"])

MULTI_SECTION_SCHEMA = _object(
    {
        "projects": {"type": "array", "items": PROJECT_SCHEMA},
        "achievements": {"type": "array", "items": ACHIEVEMENT_SCHEMA},
        "courseSummary": _STRING,
    }
)

ATS_SCORE_SCHEMA = _object(
    {
        "score": {"type": "number"},
        "summary": _STRING,
        "keywordsMatched": _STRING_LIST,
        "keywordsMissing": _STRING_LIST,
        "suggestions": _STRING_LIST,
    },
    ["score", "summary"],
)

RESUME_REVIEW_SCHEMA = _object(
    {
        "overall": _STRING,
        "strengths": _STRING_LIST,
        "improvements": _STRING_LIST,
        "atsTips": _STRING_LIST,
        "actionItems": _STRING_LIST,
    },
    ["overall"],
)


def _truncate(text: str | None, limit: int) -> str:
    return (text or "").strip()[:limit]


def _role(role: str | None) -> str:
    return (role or "").strip() or "Professional"


def resume_content_prompt(request: ResumeContentRequest) -> Prompt:
    role = _role(request.role_applying_for)
    context: list[str] = []
    if request.personal_info.summary:
        context.append(f"Professional Summary: {request.personal_info.summary}")
    if request.education:
        context.append("Education:")
        for edu in request.education:
            context.append(f"- {edu.degree or ''} in {edu.field or ''} from {edu.institution or ''}")
    if request.experience:
        context.append("Work Experience:")
        for exp in request.experience:
            context.append(f"- {exp.position or ''} at {exp.company or ''}")
            if exp.description:
                context.append(f"  {' '.join(exp.description)}")
    if request.skills.technical:
        context.append(f"Technical Skills: {', '.join(request.skills.technical)}")

    if request.is_fresher:
        focus = "FRESHER CANDIDATE - Focus on education, projects, skills. NO EXPERIENCE NEEDED."
        experience_rule = "- DO NOT ADD WORK EXPERIENCE - Focus on academic projects and education"
        closing = "CRITICAL: Set experience array to empty [] for fresher candidates."
    else:
        focus = "EXPERIENCED CANDIDATE - Focus on work experience and achievements."
        experience_rule = "- Focus on actual work experience and achievements"
        closing = "Include actual work experience if provided."

    job = _truncate(request.job_description, RESUME_JOB_DESCRIPTION_CHARS)
    lines = [
        f"Enhance user's resume content. Target: {role}.",
        focus,
        "",
        "User Data:",
        *context[:5],
        "",
        f"Job: {job}" if job else "",
        "",
        "CRITICAL RULES:",
        "- Generate role-based summary/objective even if none exists",
        "- No fake content or invented experience",
        "- Keep descriptions concise (1-2 sentences)",
        experience_rule,
        "- For freshers: objective based on actual education/projects",
        "- For experienced: summary based on actual experience",
        "",
        f"Template: {request.template or 'modern'}",
        "",
        JSON_ONLY,
        "",
        closing,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.7, max_output_tokens=2000, response_schema=RESUME_CONTENT_SCHEMA),
    )


def section_enhance_prompt(request: SectionEnhanceRequest) -> Prompt:
    header = [f"Enhance the following {request.section} section for a resume."]
    if request.target_role:
        header.append(f"Target role: {request.target_role}")
    if request.job_description:
        header.append(f"Job description: {_truncate(request.job_description, RESUME_JOB_DESCRIPTION_CHARS)}")

    if request.section == "project" and request.field == "outcomes":
        body = [
            "Generate 3-5 bullet points of key achievements/outcomes for this project. Each point should "
            "start with a strong action verb and include metrics where possible.",
            f"Project Name: {request.project_name or 'N/A'}",
            f"Technologies: {request.technologies or 'N/A'}",
            f"Project: {request.content}",
        ]
    elif request.section == "project":
        body = [
            "Enhance the project description to be more compelling and achievement-focused. Include "
            "specific details about the role, technologies used, and impact. Use 2-3 clear, concise sentences.",
            f"Project Name: {request.project_name or 'N/A'}",
            f"Technologies: {request.technologies or 'N/A'}",
            f"Current description: {request.content}",
        ]
    elif request.section == "achievement":
        body = [
            "Generate 2-3 bullet points describing this achievement in more detail. Each point should "
            "start with a strong action verb and include metrics where possible.",
            f"Achievement Title: {request.achievement_title or 'N/A'}",
            f"Date: {request.date or 'N/A'}",
            f"Achievement: {request.content}",
        ]
    else:
        body = [f"Current {request.field}:", request.content]

    lines = [
        *header,
        "",
        *body,
        "",
        'Return JSON of the form {"enhancedContent": "..."} where each point is on its own line '
        'starting with "• ".',
        JSON_ONLY,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.7, max_output_tokens=1000, response_schema=SECTION_ENHANCE_SCHEMA),
    )


def profile_summary_prompt(request: ProfileSummaryRequest) -> Prompt:
    kind = "objective" if request.is_fresher else "summary"
    role = request.role_applying_for.strip()
    education = request.education[0].field if request.education and request.education[0].field else "General"
    focus = (
        "Focus on education, skills, and career objectives"
        if request.is_fresher
        else "Focus on experience, achievements, and expertise"
    )
    lines = [
        f"Generate a professional {kind} for a {role} position.",
        "",
        "Candidate Profile:",
        f"- Role: {role}",
        f"- Experience Level: {'Fresher' if request.is_fresher else 'Experienced'}",
        f"- Skills: {', '.join(request.skills.technical[:5])}",
        f"- Experience: {len(request.experience)} positions",
        f"- Education: {education}",
        "",
        "Requirements:",
        f"- {focus}",
        "- Keep it concise (2-3 sentences)",
        "- Include relevant keywords for ATS",
        f"- Tailor it specifically for {role}",
        "",
        'Return JSON of the form {"summary": "...", "objective": "..."}; '
        + ("fill both fields." if request.is_fresher else "omit the objective."),
        JSON_ONLY,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.7, max_output_tokens=500, response_schema=PROFILE_SUMMARY_SCHEMA),
    )


def multi_section_prompt(request: MultiSectionEnhanceRequest) -> Prompt:
    sections = request.sections.model_dump(by_alias=True, exclude_none=True, exclude={"skills"})
    skills = request.sections.skills.technical if request.sections.skills else []
    lines = [
        f"Enhance these resume sections for a {_role(request.role_applying_for)} application.",
        f"Candidate level: {'Fresher' if request.is_fresher else 'Experienced'}",
        f"Technical skills: {', '.join(skills[:10]) or 'N/A'}",
        "",
        f"Sections: {json.dumps(sections, indent=1)}",
        "",
        "Rules:",
        "- Keep every project and achievement that was provided, in the same order",
        "- Fill missing project descriptions and outcomes, and missing achievement descriptions",
        "- Never invent new projects or achievements",
        "- When education is provided, add a one-sentence courseSummary",
        "",
        JSON_ONLY,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.6, max_output_tokens=1500, response_schema=MULTI_SECTION_SCHEMA),
    )


def _resume_digest(resume: ResumeData) -> dict[str, Any]:
    return {
        "summary": resume.personal_info.summary or "",
        "skills": resume.skills.technical[:10],
        "experience": [
            {"position": exp.position, "company": exp.company, "description": exp.description[:3]}
            for exp in resume.experience[:3]
        ],
        "education": [edu.model_dump(by_alias=True, exclude_none=True) for edu in resume.education[:2]],
        "projects": [
            {"name": project.name, "technologies": project.technologies[:5], "description": project.description}
            for project in resume.projects[:2]
        ],
        "achievements": [item.model_dump(by_alias=True, exclude_none=True) for item in resume.achievements[:3]],
    }


def ats_score_prompt(request: ATSScoreRequest) -> Prompt:
    job = _truncate(request.job_description, ATS_JOB_DESCRIPTION_CHARS)
    lines = [
        f"ATS analysis for {request.target_role or 'general'}.",
        f"Resume: {json.dumps(_resume_digest(request.resume_data), indent=1)}",
        f"Job: {job}" if job else "",
        "",
        "Evaluate:",
        "1. Keyword match (0-100)",
        "2. Format clarity (0-100)",
        "3. Content relevance (0-100)",
        "4. Missing keywords",
        "5. Top 3 improvements",
        "",
        "Return JSON with score (0-100 overall), summary, keywordsMatched, keywordsMissing and suggestions.",
        JSON_ONLY,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.3, max_output_tokens=800, response_schema=ATS_SCORE_SCHEMA),
    )


def resume_review_prompt(request: ResumeReviewRequest) -> Prompt:
    job = _truncate(request.job_description, REVIEW_JOB_DESCRIPTION_CHARS)
    lines = [
        "Please review the following resume and provide detailed feedback:",
        "",
        f"Resume: {json.dumps(request.resume_data.model_dump(by_alias=True, exclude_none=True), indent=1)}",
        f"Target role: {_role(request.target_role)}",
        f"Target Job Description: {job}" if job else "",
        "",
        "Provide feedback on:",
        "1. Overall structure and formatting (overall)",
        "2. Content quality and relevance (strengths, improvements)",
        "3. ATS optimization (atsTips)",
        "4. Suggested action items (actionItems)",
        "",
        JSON_ONLY,
    ]
    return Prompt(
        text="\n".join(lines),
        config=GenerationConfig(temperature=0.5, max_output_tokens=1500, response_schema=RESUME_REVIEW_SCHEMA),
    )
