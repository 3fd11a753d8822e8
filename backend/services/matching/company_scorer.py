"""Detailed company scorer: field/experience/education/employment breakdown plus bonus.

Each factor is scored on a 0-100 scale and combined by percentage weight:

    total = (field*40 + experience*30 + education*20 + employment*10) / 100
            + certification_bonus

The bonus is additive and capped at 50, so totals range over [0, 150].
Field matching is three-tier (exact category / semantic keyword / none) and
education uses a 5-level scale with a graduated penalty.
"""

import logging
import math
import re
from typing import Any

from models.schemas.catalog import Company, JobCategory
from models.schemas.individual_profile import ExperienceEntry, IndividualProfile
from models.schemas.match_result import MatchedCompany, MatchingDetails
from services.matching.base import BaseScorer
from services.vocabulary import CATEGORY_KEYWORDS, INFORMATION_TECHNOLOGY, IT_CERTIFICATIONS

logger = logging.getLogger(__name__)

# Percentage weights (field > experience > education > employment type)
WEIGHTS: dict[str, int] = {
    "field": 40,
    "experience": 30,
    "education": 20,
    "employment": 10,
}

EXACT_FIELD_SCORE = 100
SEMANTIC_FIELD_SCORE = 75

# Education levels; first name found in a requirement string decides its level
EDUCATION_LEVELS: dict[str, int] = {
    "고졸": 1,
    "초대졸": 2,
    "전문대졸": 2,
    "대졸": 3,
    "학사": 3,
    "석사": 4,
    "박사": 5,
}
DEFAULT_EDUCATION_LEVEL = EDUCATION_LEVELS["대졸"]

FLEXIBLE_EMPLOYMENT_TYPES = frozenset({"정규직", "계약직", "인턴", "훈련생"})

CERTIFICATION_BONUS = 15
SKILL_BONUS = 10
MAX_BONUS = 50

MIN_RECOMMENDATION_SCORE = 30
MAX_RECOMMENDATIONS = 10
MIN_RECOMMENDATIONS = 4

_FIRST_INT_RE = re.compile(r"\d+")
_REQUIRED_YEARS_RE = re.compile(r"(\d+)년")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_field_match(user_categories: list[JobCategory], company_category: str) -> float:
    for category in user_categories:
        if category.name == company_category:
            return EXACT_FIELD_SCORE

    for category in user_categories:
        for keyword in CATEGORY_KEYWORDS.get(category.name, ()):
            if keyword in company_category:
                return SEMANTIC_FIELD_SCORE

    return 0


def total_experience_years(entries: list[ExperienceEntry]) -> int:
    """Sum of the leading integer in each entry's duration (0 when absent)."""
    total = 0
    for entry in entries:
        match = _FIRST_INT_RE.search(entry.duration or "")
        total += int(match.group()) if match else 0
    return total


def calculate_experience_match(entries: list[ExperienceEntry], required_experience: str) -> float:
    if not entries:
        if "신입" in required_experience or "무관" in required_experience:
            return 80
        return 20

    total_years = total_experience_years(entries)
    match = _REQUIRED_YEARS_RE.search(required_experience)
    required_years = int(match.group(1)) if match else 0

    if required_years == 0:
        return 90

    if total_years >= required_years:
        # +2 per extra year
        return min(100, 80 + (total_years - required_years) * 2)
    return max(20, (total_years / required_years) * 70)


def education_level_value(text: str | None) -> int:
    """5-level value of the first known level name in ``text``; 대졸 when none."""
    if not text:
        return DEFAULT_EDUCATION_LEVEL
    for name, value in EDUCATION_LEVELS.items():
        if name in text:
            return value
    return DEFAULT_EDUCATION_LEVEL


def calculate_education_match(user_education: str | None, required_education: str) -> float:
    if not required_education or required_education == "무관":
        return 90

    user_level = education_level_value(user_education)
    required_level = education_level_value(required_education)

    if user_level >= required_level:
        return 100
    return max(30, (user_level / required_level) * 70)


def calculate_employment_type_match(employment_type: str) -> float:
    # Every type is acceptable; the common flexible ones score higher
    if not employment_type or employment_type in FLEXIBLE_EMPLOYMENT_TYPES:
        return 90
    return 70


def calculate_certification_bonus(
    user_skills: list[str],
    user_categories: list[JobCategory],
    company_skills: str,
) -> float:
    bonus = 0

    if any(c.name == INFORMATION_TECHNOLOGY for c in user_categories):
        for skill in user_skills:
            if any(cert in skill for cert in IT_CERTIFICATIONS):
                bonus += CERTIFICATION_BONUS

    if company_skills:
        for skill in user_skills:
            if skill and skill in company_skills:
                bonus += SKILL_BONUS

    return min(bonus, MAX_BONUS)


class DetailedCompanyScorer(BaseScorer):
    name = "detailed_company"

    def breakdown(self, **kwargs: Any) -> MatchingDetails:
        company: Company = kwargs["company"]
        profile: IndividualProfile = kwargs["profile"]
        user_categories: list[JobCategory] = kwargs.get("user_categories") or []

        details = MatchingDetails(
            field_match=calculate_field_match(user_categories, company.category),
            experience_match=calculate_experience_match(profile.experience, company.experience),
            education_match=calculate_education_match(profile.education, company.education),
            employment_type_match=calculate_employment_type_match(company.employment_type),
            certification_bonus=calculate_certification_bonus(
                profile.skills, user_categories, company.skills
            ),
        )
        details.total_score = self.combine(details)
        return details

    def combine(self, breakdown: MatchingDetails) -> float:
        weighted = (
            breakdown.field_match * WEIGHTS["field"]
            + breakdown.experience_match * WEIGHTS["experience"]
            + breakdown.education_match * WEIGHTS["education"]
            + breakdown.employment_type_match * WEIGHTS["employment"]
        ) / 100
        return weighted + breakdown.certification_bonus


_scorer = DetailedCompanyScorer()


def score_company(
    company: Company,
    profile: IndividualProfile,
    user_categories: list[JobCategory],
) -> MatchedCompany:
    details = _scorer.breakdown(company=company, profile=profile, user_categories=user_categories)
    return MatchedCompany(
        **company.model_dump(),
        matching_score=_round_half_up(details.total_score),
        matching_details=details,
    )


def match_user_to_companies(
    profile: IndividualProfile,
    user_categories: list[JobCategory],
    companies: list[Company],
) -> list[MatchedCompany]:
    """Rank companies for a user: scores above 30, top 10.

    When the threshold leaves fewer than 4 and at least 4 companies were
    scored, the unfiltered top 4 is returned instead.
    """
    matched = [score_company(c, profile, user_categories) for c in companies]
    ranked = sorted(matched, key=lambda m: m.matching_score, reverse=True)

    selected = [m for m in ranked if m.matching_score > MIN_RECOMMENDATION_SCORE]
    selected = selected[:MAX_RECOMMENDATIONS]

    if len(selected) < MIN_RECOMMENDATIONS and len(ranked) >= MIN_RECOMMENDATIONS:
        logger.info(
            "Only %d companies above %d, returning top %d unfiltered",
            len(selected), MIN_RECOMMENDATION_SCORE, MIN_RECOMMENDATIONS,
        )
        return ranked[:MIN_RECOMMENDATIONS]

    return selected
