from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_ai_service, get_catalog
from config import settings
from models.requests import (
    CareerAnalysisRequest,
    CompanyRecommendationRequest,
    ResumeAnalysisRequest,
    TalentRecommendationRequest,
    UnifiedRecommendationRequest,
)
from models.responses import CompanyRecommendationResponse, ResumeAnalysisResponse
from models.schemas.ai_analysis import AIJobMatch, AIProfileAnalysis
from models.schemas.match_result import UnifiedRecommendation
from services.ai_service import AIService
from services.catalog import Catalog
from services.matching.company_scorer import match_user_to_companies
from services.profile_extractor import extract_profile
from services.recommendation_engine import get_unified_recommendations
from services.sector_classifier import rank_sectors
from services.vocabulary import SECTORS

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

MAX_CHOSEN_SECTORS = 2


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.get("/sectors")
async def sectors():
    return list(SECTORS)


@router.post("/resume-analysis", response_model=ResumeAnalysisResponse)
@limiter.limit("10/minute")
async def resume_analysis(request: Request, body: ResumeAnalysisRequest):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is required")

    return ResumeAnalysisResponse(
        profile=extract_profile(body.resume_text),
        sector_guess=rank_sectors(body.resume_text, 2),
        sectors=list(SECTORS),
    )


@router.post("/unified-recommendations", response_model=UnifiedRecommendation)
@limiter.limit("10/minute")
async def unified_recommendations(
    request: Request,
    body: UnifiedRecommendationRequest,
    catalog: Catalog = Depends(get_catalog),
):
    if not body.resume_text.strip():
        raise HTTPException(status_code=400, detail="Resume text is required")
    if not body.chosen_sectors or len(body.chosen_sectors) > MAX_CHOSEN_SECTORS:
        raise HTTPException(status_code=400, detail="Choose 1-2 sectors")
    unknown = [s for s in body.chosen_sectors if s not in SECTORS]
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown sectors: {', '.join(unknown)}")

    return get_unified_recommendations(body.resume_text, body.chosen_sectors, catalog)


@router.post("/company-recommendations", response_model=CompanyRecommendationResponse)
@limiter.limit("10/minute")
async def company_recommendations(request: Request, body: CompanyRecommendationRequest):
    if not body.categories:
        raise HTTPException(status_code=400, detail="No job categories selected")

    return CompanyRecommendationResponse(
        recommendations=match_user_to_companies(body.profile, body.categories, body.companies),
        user_categories=body.categories,
        total_companies=len(body.companies),
    )


@router.post("/ai/career-analysis", response_model=AIProfileAnalysis)
@limiter.limit("10/minute")
async def career_analysis(
    request: Request,
    body: CareerAnalysisRequest,
    ai: AIService = Depends(get_ai_service),
):
    if not body.career_text.strip():
        raise HTTPException(status_code=400, detail="Career text is required")
    return await ai.analyze_career_profile(body.career_text, body.resume_text)


@router.post("/ai/talent-recommendations", response_model=list[AIJobMatch])
@limiter.limit("10/minute")
async def talent_recommendations(
    request: Request,
    body: TalentRecommendationRequest,
    ai: AIService = Depends(get_ai_service),
):
    return await ai.generate_talent_recommendations(body.job_posting, body.candidates)
