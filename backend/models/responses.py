from models.schemas.base import CamelModel
from models.schemas.catalog import JobCategory
from models.schemas.match_result import MatchedCompany
from models.schemas.profile import SectorScore, UserProfile


class ResumeAnalysisResponse(CamelModel):
    profile: UserProfile
    sector_guess: list[SectorScore] = []
    sectors: list[str] = []


class CompanyRecommendationResponse(CamelModel):
    recommendations: list[MatchedCompany] = []
    user_categories: list[JobCategory] = []
    total_companies: int = 0
