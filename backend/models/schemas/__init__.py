"""Pydantic contracts shared by the extractor, scorers and AI service."""

from models.schemas.ai_analysis import (
    AIJobMatch,
    AIProfileAnalysis,
    CandidateProfile,
    JobRequirements,
    TalentJobPosting,
)
from models.schemas.catalog import (
    Company,
    EducationProgram,
    JobCategory,
    JobPosting,
    Occupation,
    ScorableItem,
    ScorableView,
)
from models.schemas.individual_profile import ExperienceEntry, IndividualProfile
from models.schemas.match_result import (
    MatchedCompany,
    MatchingDetails,
    ScoredJob,
    ScoredOccupation,
    ScoredProgram,
    SectorMatchBreakdown,
    UnifiedRecommendation,
)
from models.schemas.profile import SectorScore, UserProfile

__all__ = [
    "AIJobMatch",
    "AIProfileAnalysis",
    "CandidateProfile",
    "Company",
    "EducationProgram",
    "ExperienceEntry",
    "IndividualProfile",
    "JobCategory",
    "JobPosting",
    "JobRequirements",
    "MatchedCompany",
    "MatchingDetails",
    "Occupation",
    "ScorableItem",
    "ScorableView",
    "ScoredJob",
    "ScoredOccupation",
    "ScoredProgram",
    "SectorMatchBreakdown",
    "SectorScore",
    "TalentJobPosting",
    "UnifiedRecommendation",
    "UserProfile",
]
