from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from resumegen.core.rate_limit import rate_limit
from resumegen.core.security import check_api_key
from resumegen.schemas.generation import (
    ATSScore,
    ATSScoreRequest,
    EnhancedSections,
    GenerationResult,
    MultiSectionEnhanceRequest,
    ProfileSummary,
    ProfileSummaryRequest,
    ResumeContent,
    ResumeContentRequest,
    ResumeReview,
    ResumeReviewRequest,
    SectionEnhancement,
    SectionEnhanceRequest,
)
from resumegen.services.errors import ContractError
from resumegen.services.orchestrator import ContentOrchestrator, get_orchestrator

router = APIRouter(prefix="/ai")


def _bad_request(exc: ContractError) -> HTTPException:
    detail = {"error": str(exc)}
    if exc.field:
        detail["field"] = exc.field
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.post("/generate-resume", response_model=GenerationResult[ResumeContent])
@rate_limit()
async def generate_resume(
    request: Request,
    payload: ResumeContentRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    return await orchestrator.generate_resume_content(payload)


@router.post("/enhance", response_model=GenerationResult[SectionEnhancement])
@rate_limit()
async def enhance_section(
    request: Request,
    payload: SectionEnhanceRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    try:
        return await orchestrator.enhance_section(payload)
    except ContractError as exc:
        raise _bad_request(exc) from exc


@router.post("/generate-profile-summary", response_model=GenerationResult[ProfileSummary])
@rate_limit()
async def generate_profile_summary(
    request: Request,
    payload: ProfileSummaryRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    try:
        return await orchestrator.generate_profile_summary(payload)
    except ContractError as exc:
        raise _bad_request(exc) from exc


@router.post("/enhance-sections", response_model=GenerationResult[EnhancedSections])
@rate_limit()
async def enhance_sections(
    request: Request,
    payload: MultiSectionEnhanceRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    return await orchestrator.enhance_sections(payload)


@router.post("/ats-score", response_model=GenerationResult[ATSScore])
@rate_limit()
async def ats_score(
    request: Request,
    payload: ATSScoreRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    return await orchestrator.compute_ats_score(payload)


@router.post("/review-resume", response_model=GenerationResult[ResumeReview])
@rate_limit()
async def review_resume(
    request: Request,
    payload: ResumeReviewRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator),
):
    _ = request
    check_api_key(x_api_key)
    return await orchestrator.review_resume(payload)


@router.get("/status", summary="AI Status", description="Breaker, quota and cache state of the remote path.")
async def ai_status(orchestrator: ContentOrchestrator = Depends(get_orchestrator)):
    return orchestrator.status()
