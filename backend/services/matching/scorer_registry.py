"""Lazy registry of the named scoring strategies.

Same pattern as a model registry: one shared instance per name, created on
first use. Scorers are stateless.
"""

import logging

from services.matching.base import BaseScorer

logger = logging.getLogger(__name__)

SIMPLE_SECTOR = "simple_sector"
DETAILED_COMPANY = "detailed_company"

_registry: dict[str, BaseScorer] = {}


def _create_scorer(name: str) -> BaseScorer:
    """Factory: create a scorer by name with deferred imports."""
    if name == SIMPLE_SECTOR:
        from services.matching.sector_scorer import SimpleSectorScorer
        return SimpleSectorScorer()
    elif name == DETAILED_COMPANY:
        from services.matching.company_scorer import DetailedCompanyScorer
        return DetailedCompanyScorer()
    else:
        raise ValueError(f"Unknown scorer: {name}")


def get_scorer(name: str) -> BaseScorer:
    """Get a scorer by name, creating it on first access."""
    if name not in _registry:
        logger.debug("Creating scorer: %s", name)
        _registry[name] = _create_scorer(name)
    return _registry[name]


def available() -> list[str]:
    return [SIMPLE_SECTOR, DETAILED_COMPANY]


def clear() -> None:
    """Drop all cached scorers. Useful for testing."""
    _registry.clear()
