"""Simple sector scorer: weighted 5-factor match between a profile and a catalog item.

Factors (each 0.0-1.0):
    domain           item sector is one of the chosen sectors (binary)
    skills           share of the item's required skills the profile has
    years            profile years / required years, capped at 1
    education        profile education rank meets the requirement (binary)
    employment_type  neutral 0.5, no signal modeled at this layer

The final score is the dot product with WEIGHTS and always lies in [0, 1].
"""

import logging
from typing import Any, Iterable

import numpy as np

from models.schemas.catalog import ScorableItem, ScorableView
from models.schemas.match_result import SectorMatchBreakdown
from models.schemas.profile import UserProfile, education_rank
from services.matching.base import BaseScorer

logger = logging.getLogger(__name__)

WEIGHTS: dict[str, float] = {
    "domain": 0.40,
    "skills": 0.25,
    "years": 0.20,
    "education": 0.10,
    "employment_type": 0.05,
}

FACTOR_NAMES = list(WEIGHTS)
_WEIGHT_VECTOR = np.array([WEIGHTS[name] for name in FACTOR_NAMES])

NEUTRAL_EMPLOYMENT_TYPE = 0.5


def _as_view(item: ScorableItem | ScorableView) -> ScorableView:
    return item if isinstance(item, ScorableView) else item.scorable()


def skill_coverage(required: Iterable[str], profile_skills: Iterable[str]) -> float:
    """Share of required tokens present in the profile (as-is or lower-cased).

    No requirements means no credit: returns 0.0.
    """
    required = list(required)
    if not required:
        return 0.0
    owned = set(profile_skills)
    matched = [s for s in required if s in owned or s.lower() in owned]
    return len(matched) / len(required)


def years_ratio(years: int, required_years: int) -> float:
    """Meeting the bar gives full credit; no requirement also gives full credit."""
    if required_years <= 0:
        return 1.0
    return min(1.0, years / required_years)


class SimpleSectorScorer(BaseScorer):
    name = "simple_sector"

    def breakdown(self, **kwargs: Any) -> SectorMatchBreakdown:
        item = _as_view(kwargs["item"])
        profile: UserProfile = kwargs["profile"]
        chosen_sectors = kwargs.get("chosen_sectors") or []

        return SectorMatchBreakdown(
            domain=1.0 if item.sector in chosen_sectors else 0.0,
            skills=skill_coverage(item.required_skills, profile.skills),
            years=years_ratio(profile.years_of_experience, item.required_years),
            education=(
                1.0
                if education_rank(profile.education_level) >= education_rank(item.required_education)
                else 0.0
            ),
            employment_type=NEUTRAL_EMPLOYMENT_TYPE,
        )

    def combine(self, breakdown: SectorMatchBreakdown) -> float:
        factors = np.array([getattr(breakdown, name) for name in FACTOR_NAMES])
        return float(min(1.0, max(0.0, np.dot(_WEIGHT_VECTOR, factors))))


_scorer = SimpleSectorScorer()


def score_breakdown(
    item: ScorableItem | ScorableView,
    profile: UserProfile,
    chosen_sectors: list[str],
) -> SectorMatchBreakdown:
    return _scorer.breakdown(item=item, profile=profile, chosen_sectors=chosen_sectors)


def score_item(
    item: ScorableItem | ScorableView,
    profile: UserProfile,
    chosen_sectors: list[str],
) -> float:
    """Match score in [0, 1]. Pure: depends only on the three arguments."""
    return _scorer.score(item=item, profile=profile, chosen_sectors=chosen_sectors)
