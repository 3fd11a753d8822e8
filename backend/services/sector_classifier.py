"""Keyword-tally sector classification over the fixed 9-sector vocabulary."""

import logging

from models.schemas.profile import SectorScore
from services.vocabulary import SECTOR_VOCAB, SECTORS

logger = logging.getLogger(__name__)


def count_keyword_hits(text: str, keywords: tuple[str, ...] | list[str]) -> int:
    """Number of distinct keywords present in ``text`` (presence test, not occurrences)."""
    return sum(1 for kw in set(keywords) if kw.lower() in text)


def score_sectors(resume_text: str | None) -> list[SectorScore]:
    """Score every sector, in declaration order."""
    text = (resume_text or "").lower()
    return [
        SectorScore(sector=sector, score=count_keyword_hits(text, SECTOR_VOCAB.get(sector, ())))
        for sector in SECTORS
    ]


def rank_sectors(resume_text: str | None, top_k: int = 2) -> list[SectorScore]:
    """Top-``top_k`` sectors by keyword hits.

    Ties keep declaration order (stable sort). An all-zero ranking is returned
    as-is; callers should read it as "no strong signal".
    """
    ranked = sorted(score_sectors(resume_text), key=lambda s: s.score, reverse=True)
    result = ranked[: max(0, top_k)]
    logger.debug("Sector ranking (top %d): %s", top_k, [(s.sector, s.score) for s in result])
    return result
