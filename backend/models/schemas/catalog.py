"""Read-only catalog records and their scorable projection.

Each concrete record type exposes ``scorable()``, an explicit adapter onto the
four fields the scorers care about (sector, required years, required
education, required skills). Display fields ride along untouched.
"""

import re
from typing import Literal

from pydantic import ConfigDict

from models.schemas.base import CamelModel

_REQUIRED_YEARS_RE = re.compile(r"(\d+)년")
_SKILL_SPLIT_RE = re.compile(r"[,/·\s]+")


def education_from_requirement(text: str) -> str:
    """Map free-text education requirements onto the 4-level scale."""
    if "박사" in text:
        return "박사"
    if "석사" in text:
        return "석사"
    if "학사" in text or "대졸" in text:
        return "학사"
    return "무관"


class ScorableView(CamelModel):
    """The projection every scorable item shares."""
    model_config = ConfigDict(frozen=True)

    sector: str | None = None
    required_years: int = 0
    required_education: str = "무관"
    required_skills: tuple[str, ...] = ()


class Occupation(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    sector: str
    title: str
    min_years: int = 0
    req_edu: str = "무관"
    skills: tuple[str, ...] = ()
    description: str = ""

    def scorable(self) -> ScorableView:
        return ScorableView(
            sector=self.sector,
            required_years=self.min_years,
            required_education=self.req_edu,
            required_skills=self.skills,
        )


class JobPosting(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    sector: str
    title: str
    company: str = ""
    min_years: int = 0
    req_edu: str = "무관"
    skills: tuple[str, ...] = ()
    location: str = ""
    salary: str = ""
    url: str = ""
    # Extra listing fields carried from imported job boards
    field: str = ""
    experience: str = ""
    deadline: str = ""
    employment_type: str = ""
    company_size: str = ""

    def scorable(self) -> ScorableView:
        return ScorableView(
            sector=self.sector,
            required_years=self.min_years,
            required_education=self.req_edu,
            required_skills=self.skills,
        )


class EducationProgram(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    skills: tuple[str, ...] = ()
    sector: str | None = None
    duration: str = ""
    provider: str = ""
    type: Literal["online", "offline"] = "offline"
    description: str = ""

    def scorable(self) -> ScorableView:
        # Programs have no entry bar
        return ScorableView(sector=self.sector, required_skills=self.skills)


class Company(CamelModel):
    """A hiring company as seen by the company matcher.

    ``experience``, ``education`` and ``skills`` are the raw requirement texts
    from the listing (e.g. "경력 3년 이상", "대졸 이상", "AutoCAD, 도면").
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str = ""
    experience: str = ""
    education: str = ""
    employment_type: str = ""
    skills: str = ""
    location: str = ""
    description: str = ""

    def scorable(self) -> ScorableView:
        years_match = _REQUIRED_YEARS_RE.search(self.experience)
        return ScorableView(
            sector=self.category,
            required_years=int(years_match.group(1)) if years_match else 0,
            required_education=education_from_requirement(self.education),
            required_skills=tuple(s for s in _SKILL_SPLIT_RE.split(self.skills) if s),
        )


class JobCategory(CamelModel):
    """A job category chosen by the user (internal name + Korean label)."""
    id: str = ""
    name: str
    display_name: str = ""


ScorableItem = Occupation | JobPosting | EducationProgram | Company
