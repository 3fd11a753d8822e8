"""Lexical profile extraction: years, education level and skills from resume text."""

import logging
import re

from models.schemas.profile import UserProfile
from services.vocabulary import SKILL_VOCAB

logger = logging.getLogger(__name__)

# "10년", "3 년" -- first hit wins
YEARS_RE = re.compile(r"(\d{1,2})\s*년")
MAX_YEARS = 40

# Highest rank first; the first pattern that hits decides the level
_EDUCATION_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"박사"), "박사"),
    (re.compile(r"석사"), "석사"),
    (re.compile(r"학사|대졸"), "학사"),
]


def extract_years(text: str) -> int:
    match = YEARS_RE.search(text)
    if not match:
        return 0
    return max(0, min(MAX_YEARS, int(match.group(1))))


def extract_education_level(text: str) -> str:
    for pattern, level in _EDUCATION_PATTERNS:
        if pattern.search(text):
            return level
    return "무관"


def extract_skills(text: str) -> tuple[str, ...]:
    """Vocabulary tokens whose lower-cased form appears in ``text`` (already lower-cased)."""
    found: list[str] = []
    for skill in SKILL_VOCAB:
        if skill.lower() in text and skill not in found:
            found.append(skill)
    return tuple(found)


def extract_profile(resume_text: str | None) -> UserProfile:
    """Derive a normalized profile from free-form resume text.

    Never raises: missing signals yield defaults (0 years, "무관", no skills).
    """
    text = (resume_text or "").lower()
    profile = UserProfile(
        years_of_experience=extract_years(text),
        education_level=extract_education_level(text),
        skills=extract_skills(text),
    )
    logger.debug("Extracted profile: %s", profile)
    return profile
