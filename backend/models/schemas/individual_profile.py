"""Stored individual profile consumed by the company matcher."""

from models.schemas.base import CamelModel


class ExperienceEntry(CamelModel):
    """A single past job. ``duration`` is free text such as "5년" or "3년 6개월"."""
    company: str = ""
    position: str = ""
    duration: str = ""


class IndividualProfile(CamelModel):
    id: str = ""
    summary: str = ""
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: str | None = None  # from AI analysis, e.g. "대졸", "석사"
