from .generation import (
    Achievement,
    ATSScore,
    ATSScoreRequest,
    CamelModel,
    Certification,
    Education,
    EnhancedSections,
    Experience,
    GenerationRequest,
    GenerationResult,
    MultiSectionEnhanceRequest,
    OperationKind,
    PersonalInfo,
    ProfileSummary,
    ProfileSummaryRequest,
    Project,
    Provenance,
    ResumeContent,
    ResumeContentRequest,
    ResumeData,
    ResumeReview,
    ResumeReviewRequest,
    SectionEnhancement,
    SectionEnhanceRequest,
    SectionsInput,
    Skills,
)

__all__ = [
    "Achievement",
    "ATSScore",
    "ATSScoreRequest",
    "CamelModel",
    "Certification",
    "Education",
    "EnhancedSections",
    "Experience",
    "GenerationRequest",
    "GenerationResult",
    "MultiSectionEnhanceRequest",
    "OperationKind",
    "PersonalInfo",
    "ProfileSummary",
    "ProfileSummaryRequest",
    "Project",
    "Provenance",
    "ResumeContent",
    "ResumeContentRequest",
    "ResumeData",
    "ResumeReview",
    "ResumeReviewRequest",
    "SectionEnhancement",
    "SectionEnhanceRequest",
    "SectionsInput",
    "Skills",
]
