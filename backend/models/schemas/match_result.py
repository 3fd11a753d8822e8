"""Scorer outputs: per-item scores, breakdowns and the unified recommendation."""

from models.schemas.base import CamelModel
from models.schemas.catalog import Company, EducationProgram, JobPosting, Occupation
from models.schemas.profile import UserProfile


class SectorMatchBreakdown(CamelModel):
    """Factor values of the simple sector scorer, each 0.0-1.0."""
    domain: float = 0.0
    skills: float = 0.0
    years: float = 0.0
    education: float = 0.0
    employment_type: float = 0.0


class ScoredOccupation(Occupation):
    score: float = 0.0


class ScoredJob(JobPosting):
    score: float = 0.0


class ScoredProgram(EducationProgram):
    cover: int = 0  # program skills the user is missing
    relevance: int = 0  # program skills in a chosen sector's vocabulary


class UnifiedRecommendation(CamelModel):
    profile: UserProfile
    occupations: list[ScoredOccupation] = []
    jobs: list[ScoredJob] = []
    programs: list[ScoredProgram] = []
    # True when no program matched a gap or chosen sector and the list is the plain catalog
    programs_fallback: bool = False


class MatchingDetails(CamelModel):
    """Factor scores of the detailed company scorer (0-100 each, bonus 0-50)."""
    field_match: float = 0.0
    experience_match: float = 0.0
    education_match: float = 0.0
    employment_type_match: float = 0.0
    certification_bonus: float = 0.0
    total_score: float = 0.0


class MatchedCompany(Company):
    matching_score: int = 0
    matching_details: MatchingDetails = MatchingDetails()
