"""Recommendation aggregator: ranks occupations, jobs and training programs.

Flow:
    resume_text
      └─ extract_profile()                        → UserProfile
              ↓
      ├─ recommend_occupations(catalog.occupations) → top 10 by score
      ├─ recommend_jobs(catalog.jobs)               → 5..10 by score
      └─ recommend_programs(catalog.programs)       → 3..6 by skill-gap cover + relevance
              ↓
         UnifiedRecommendation

Occupations and jobs always surface the best available items. Programs are
only useful when they teach something the user lacks or that belongs to a
chosen sector; when nothing qualifies the full catalog is returned and the
result is flagged with ``programs_fallback``.
"""

import logging

from models.schemas.catalog import EducationProgram, JobPosting, Occupation
from models.schemas.match_result import (
    ScoredJob,
    ScoredOccupation,
    ScoredProgram,
    UnifiedRecommendation,
)
from models.schemas.profile import UserProfile
from services.catalog import Catalog
from services.matching.scorer_registry import SIMPLE_SECTOR, get_scorer
from services.profile_extractor import extract_profile
from services.vocabulary import SECTOR_VOCAB

logger = logging.getLogger(__name__)

MAX_OCCUPATIONS = 10
MIN_JOBS, MAX_JOBS = 5, 10
MIN_PROGRAMS, MAX_PROGRAMS = 3, 6


def _result_size(k_min: int, k_max: int, available: int) -> int:
    return min(k_max, max(k_min, available))


def recommend_occupations(
    occupations: tuple[Occupation, ...] | list[Occupation],
    profile: UserProfile,
    chosen_sectors: list[str],
    k: int = MAX_OCCUPATIONS,
) -> list[ScoredOccupation]:
    scorer = get_scorer(SIMPLE_SECTOR)
    scored = [
        ScoredOccupation(
            **o.model_dump(),
            score=scorer.score(item=o, profile=profile, chosen_sectors=chosen_sectors),
        )
        for o in occupations
    ]
    scored.sort(key=lambda o: o.score, reverse=True)
    return scored[:k]


def recommend_jobs(
    jobs: tuple[JobPosting, ...] | list[JobPosting],
    profile: UserProfile,
    chosen_sectors: list[str],
    k_min: int = MIN_JOBS,
    k_max: int = MAX_JOBS,
) -> list[ScoredJob]:
    scorer = get_scorer(SIMPLE_SECTOR)
    ranked = [
        ScoredJob(
            **j.model_dump(),
            score=scorer.score(item=j, profile=profile, chosen_sectors=chosen_sectors),
        )
        for j in jobs
    ]
    ranked.sort(key=lambda j: j.score, reverse=True)

    count = _result_size(k_min, k_max, len(ranked))
    logger.debug("Jobs: %d scored, returning %d", len(ranked), min(count, len(ranked)))
    return ranked[:count]


def missing_skills(chosen_sectors: list[str], profile: UserProfile) -> list[str]:
    """Chosen sectors' vocabulary the profile does not cover, in vocabulary order."""
    needed = dict.fromkeys(kw for s in chosen_sectors for kw in SECTOR_VOCAB.get(s, ()))
    owned = set(profile.skills)
    return [kw for kw in needed if kw not in owned and kw.lower() not in owned]


def recommend_programs(
    programs: tuple[EducationProgram, ...] | list[EducationProgram],
    profile: UserProfile,
    chosen_sectors: list[str],
    k_min: int = MIN_PROGRAMS,
    k_max: int = MAX_PROGRAMS,
) -> tuple[list[ScoredProgram], bool]:
    """Rank programs by how much of the user's gap they cover plus sector relevance.

    Returns ``(programs, fallback)``; ``fallback`` is True when no program had
    ``cover > 0`` or ``relevance > 0`` and the unfiltered catalog was used.
    """
    missing = set(missing_skills(chosen_sectors, profile))
    sector_terms = {kw for s in chosen_sectors for kw in SECTOR_VOCAB.get(s, ())}

    scored = [
        ScoredProgram(
            **p.model_dump(),
            cover=sum(1 for s in p.skills if s in missing),
            relevance=sum(1 for s in p.skills if s in sector_terms),
        )
        for p in programs
    ]

    ranked = [p for p in scored if p.cover > 0 or p.relevance > 0]
    ranked.sort(key=lambda p: p.cover + p.relevance, reverse=True)

    fallback = not ranked
    if fallback:
        logger.info("No program addresses a skill gap for %s, using full catalog", chosen_sectors)
        ranked = scored

    count = _result_size(k_min, k_max, len(ranked))
    return ranked[:count], fallback


def get_unified_recommendations(
    resume_text: str,
    chosen_sectors: list[str],
    catalog: Catalog,
) -> UnifiedRecommendation:
    """Profile the resume once, then rank every catalog for the chosen sectors."""
    profile = extract_profile(resume_text)

    occupations = recommend_occupations(catalog.occupations, profile, chosen_sectors)
    jobs = recommend_jobs(catalog.jobs, profile, chosen_sectors)
    programs, programs_fallback = recommend_programs(catalog.programs, profile, chosen_sectors)

    logger.info(
        "Recommendations for %s: %d occupations, %d jobs, %d programs%s",
        chosen_sectors, len(occupations), len(jobs), len(programs),
        " (fallback)" if programs_fallback else "",
    )

    return UnifiedRecommendation(
        profile=profile,
        occupations=occupations,
        jobs=jobs,
        programs=programs,
        programs_fallback=programs_fallback,
    )
