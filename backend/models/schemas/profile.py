"""Normalized user profile derived from free-form resume text."""

from typing import Literal

from pydantic import ConfigDict

from models.schemas.base import CamelModel

EducationLevel = Literal["무관", "학사", "석사", "박사"]

# Ordinal rank: unknown strings fall back to 0 (same as "무관")
EDUCATION_RANK: dict[str, int] = {"무관": 0, "학사": 1, "석사": 2, "박사": 3}


def education_rank(level: str | None) -> int:
    return EDUCATION_RANK.get(level or "무관", 0)


class UserProfile(CamelModel):
    """Output of the profile extractor. Immutable for the duration of a scoring call."""
    model_config = ConfigDict(frozen=True)

    years_of_experience: int = 0  # 0-40
    education_level: EducationLevel = "무관"
    skills: tuple[str, ...] = ()  # canonical tokens, vocabulary order, no duplicates


class SectorScore(CamelModel):
    """Keyword-hit tally for one industry sector."""
    sector: str
    score: int = 0
