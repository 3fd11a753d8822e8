"""Contracts for the AI text-analysis collaborator."""

from typing import Literal

from models.schemas.base import CamelModel
from models.schemas.individual_profile import ExperienceEntry


class AIProfileAnalysis(CamelModel):
    """Structured career analysis returned by the LLM (or the fixed fallback)."""
    summary: str = ""
    key_strengths: list[str] = []
    recommended_job_types: list[str] = []
    skills_extracted: list[str] = []
    experience_level: Literal["entry", "mid", "senior", "expert"] = "senior"
    career_highlights: list[str] = []


class CandidateProfile(CamelModel):
    id: str
    summary: str = ""
    experience: list[ExperienceEntry] = []
    skills: list[str] = []
    work_time_flexibility: bool = False


class TalentJobPosting(CamelModel):
    """A company's job posting used when ranking candidates with the LLM."""
    id: str = ""
    title: str
    description: str = ""
    location: str = ""
    work_schedule: str = ""
    prefers_seniors: bool = False


class AIJobMatch(CamelModel):
    candidate_id: str = ""
    matching_score: int = 50  # 0-100
    reasoning: str = ""
    key_strengths: list[str] = []
    improvement_suggestions: list[str] = []


class JobRequirements(CamelModel):
    requirements: list[str] = []
    skills: list[str] = []
    benefits: list[str] = []
