from __future__ import annotations

from collections.abc import Mapping

from .models import Candidate
from .strategies import CategoryRankingStrategy


class FeaturedPromotionRule:
    """Decide which featured listings float to the top of the results.

    A featured candidate is promoted when the user picked none of the
    category's primary criteria, or when it satisfies at least one of the
    criteria they did pick. A featured listing that does not match what was
    asked for competes on score like everyone else.
    """

    def __init__(self, strategy: CategoryRankingStrategy) -> None:
        self.strategy = strategy

    def is_boost_eligible(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        if not candidate.featured:
            return False
        if not self.strategy.has_criteria(answers):
            return True
        return self.strategy.matches_criteria(candidate, answers)
