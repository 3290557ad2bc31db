"""
Ranking engine.

``rank`` is a pure function of its arguments: it holds no state between
calls, performs no I/O and never raises on odd input. Unknown categories
fall back to ``GenericStrategy``; unknown answer keys are ignored.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .featured import FeaturedPromotionRule
from .models import Candidate
from .strategies import CategoryRankingStrategy, GenericStrategy, default_strategies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: Candidate
    score: int
    boosted: bool

    def sort_key(self) -> tuple:
        c = self.candidate
        return (
            not self.boosted,
            -self.score,
            -(c.rating or 0.0),
            c.name.lower(),
            c.id,
        )


@dataclass(frozen=True)
class RankingResult:
    strategy: str
    ranked: list[Candidate]
    excluded_count: int


def _clean_answers(answers: Mapping[str, str] | None) -> dict[str, str]:
    if not answers:
        return {}
    return {
        str(key): value
        for key, value in answers.items()
        if isinstance(value, str) and value.strip()
    }


class RankingEngine:
    def __init__(
        self,
        strategies: Mapping[str, CategoryRankingStrategy] | None = None,
        fallback: CategoryRankingStrategy | None = None,
    ) -> None:
        self._strategies = MappingProxyType(
            dict(strategies) if strategies is not None else default_strategies()
        )
        self._fallback = fallback or GenericStrategy()

    @property
    def strategies(self) -> Mapping[str, CategoryRankingStrategy]:
        return self._strategies

    def strategy_for(self, category: str | None) -> CategoryRankingStrategy:
        strategy = self._strategies.get(category or "", self._fallback)
        logger.debug("Category %r resolved to %s", category, strategy.name)
        return strategy

    def rank_with_details(
        self,
        category: str | None,
        candidates: Iterable[Candidate],
        answers: Mapping[str, str] | None,
    ) -> RankingResult:
        strategy = self.strategy_for(category)
        cleaned = _clean_answers(answers)
        promotion = FeaturedPromotionRule(strategy)

        pool = list(candidates)
        kept = [c for c in pool if not strategy.exclude(c, cleaned)]
        excluded = len(pool) - len(kept)
        if excluded:
            logger.debug("%s excluded %d of %d candidates", strategy.name, excluded, len(pool))

        scored = [
            ScoredCandidate(
                candidate=c,
                score=strategy.score(c, cleaned),
                boosted=promotion.is_boost_eligible(c, cleaned),
            )
            for c in kept
        ]
        scored.sort(key=ScoredCandidate.sort_key)

        return RankingResult(
            strategy=strategy.name,
            ranked=[s.candidate for s in scored],
            excluded_count=excluded,
        )

    def rank(
        self,
        category: str | None,
        candidates: Iterable[Candidate],
        answers: Mapping[str, str] | None,
    ) -> list[Candidate]:
        """Return *candidates* for *category* ordered best match first."""
        return self.rank_with_details(category, candidates, answers).ranked


DEFAULT_ENGINE = RankingEngine()


def rank(
    category: str | None,
    candidates: Iterable[Candidate],
    answers: Mapping[str, str] | None,
) -> list[Candidate]:
    return DEFAULT_ENGINE.rank(category, candidates, answers)
