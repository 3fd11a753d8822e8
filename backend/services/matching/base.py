"""Abstract base class for match scoring strategies."""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseScorer(ABC):
    """Base class for named scoring strategies.

    Subclasses must implement:
        - name: identifier used in scorer_registry
        - breakdown(**kwargs): compute the per-factor sub-scores
        - combine(breakdown): fold a breakdown into the final score

    ``score`` is always ``combine(breakdown(...))`` so that any final score can
    be reproduced from its breakdown alone. Scorers hold no per-call state.
    """

    name: str = ""

    @abstractmethod
    def breakdown(self, **kwargs: Any) -> Any:
        """Return the per-factor sub-scores as a typed schema."""

    @abstractmethod
    def combine(self, breakdown: Any) -> float:
        """Return the final score for a breakdown."""

    def score(self, **kwargs: Any) -> float:
        return self.combine(self.breakdown(**kwargs))
