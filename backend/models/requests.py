from pydantic import Field

from models.schemas.ai_analysis import CandidateProfile, TalentJobPosting
from models.schemas.base import CamelModel
from models.schemas.catalog import Company, JobCategory
from models.schemas.individual_profile import IndividualProfile


class ResumeAnalysisRequest(CamelModel):
    resume_text: str = Field(..., max_length=50000, description="Free-form resume text (Korean)")


class UnifiedRecommendationRequest(CamelModel):
    resume_text: str = Field(..., max_length=50000, description="Free-form resume text (Korean)")
    chosen_sectors: list[str] = Field(default_factory=list, description="1-2 sector names")


class CompanyRecommendationRequest(CamelModel):
    profile: IndividualProfile
    categories: list[JobCategory] = []
    companies: list[Company] = []


class CareerAnalysisRequest(CamelModel):
    career_text: str = Field(..., max_length=50000)
    resume_text: str | None = Field(None, max_length=50000)


class TalentRecommendationRequest(CamelModel):
    job_posting: TalentJobPosting
    candidates: list[CandidateProfile] = Field(default_factory=list, max_length=50)
