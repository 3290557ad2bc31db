"""
Category ranking strategies.

Every category scores candidates its own way. A strategy answers four
questions about a (candidate, answers) pair:

* ``exclude``  - should the candidate be dropped before scoring at all?
* ``score``    - how relevant is it? (integer, higher is better)
* ``has_criteria`` / ``matches_criteria`` - did the user pick any of the
  category's primary criteria, and does this candidate satisfy one? These
  two drive the featured promotion rule.

Answers are a flat ``question_id -> value`` map. A multi-select question is
sent as several entries keyed ``"<question_id>:<n>"``; each entry counts as
a criterion of its own.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from . import matching
from .models import Candidate
from .synonyms import SynonymTable, get_table

MULTI_SELECT_SEPARATOR = ":"


def answer_values(answers: Mapping[str, str], question_id: str) -> list[str]:
    """All non-empty values submitted for *question_id*, multi-select entries included."""
    prefix = question_id + MULTI_SELECT_SEPARATOR
    values: list[str] = []
    for key, value in answers.items():
        if key != question_id and not key.startswith(prefix):
            continue
        if isinstance(value, str) and value.strip():
            values.append(value.strip())
    return values


def _first_present(answers: Mapping[str, str], question_ids: Iterable[str]) -> list[str]:
    """Values of the first question id in *question_ids* that has any."""
    for question_id in question_ids:
        values = answer_values(answers, question_id)
        if values:
            return values
    return []


class CategoryRankingStrategy(ABC):
    category: str = ""
    question_ids: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    def exclude(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        return False

    @abstractmethod
    def score(self, candidate: Candidate, answers: Mapping[str, str]) -> int:
        ...

    @abstractmethod
    def has_criteria(self, answers: Mapping[str, str]) -> bool:
        ...

    @abstractmethod
    def matches_criteria(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        ...

    def synonym_tables(self) -> dict[str, SynonymTable]:
        return {}


# ---------------------------------------------------------------------------
# Synonym-weighted service categories
# ---------------------------------------------------------------------------


class SynonymWeightedStrategy(CategoryRankingStrategy):
    """Shared shape of the health-wellness and home-services rankers.

    ``type`` (weight 5) and the goal question (weight 3) are matched through
    the category's synonym table; the keyword questions (weight 1 each) use
    plain substring containment. With none of these answered every
    candidate scores a flat 1.
    """

    TYPE_WEIGHT = 5
    GOAL_WEIGHT = 3
    KEYWORD_WEIGHT = 1
    BASE_SCORE = 1

    type_ids: tuple[str, ...] = ("type",)
    goal_ids: tuple[str, ...] = ("goal",)
    keyword_ids: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._type_table = get_table(self.category, "type")
        self._goal_table = get_table(self.category, "goal")

    @property
    def question_ids(self) -> tuple[str, ...]:  # type: ignore[override]
        return tuple(dict.fromkeys(self.type_ids + self.goal_ids + self.keyword_ids))

    def _types(self, answers: Mapping[str, str]) -> list[str]:
        return _first_present(answers, self.type_ids)

    def _goals(self, answers: Mapping[str, str]) -> list[str]:
        return _first_present(answers, self.goal_ids)

    def score(self, candidate: Candidate, answers: Mapping[str, str]) -> int:
        if not any(answer_values(answers, q) for q in self.question_ids):
            return self.BASE_SCORE

        tags = candidate.tags
        score = 0
        for value in self._types(answers):
            if matching.matches_any(tags, self._type_table.expand(value)):
                score += self.TYPE_WEIGHT
        for value in self._goals(answers):
            if matching.matches_any(tags, self._goal_table.expand(value)):
                score += self.GOAL_WEIGHT
        for question_id in self.keyword_ids:
            for value in answer_values(answers, question_id):
                if matching.contains_keyword(tags, value):
                    score += self.KEYWORD_WEIGHT
        return score

    def has_criteria(self, answers: Mapping[str, str]) -> bool:
        return bool(self._types(answers) or self._goals(answers))

    def matches_criteria(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        tags = candidate.tags
        return any(
            matching.matches_any(tags, self._type_table.expand(v)) for v in self._types(answers)
        ) or any(
            matching.matches_any(tags, self._goal_table.expand(v)) for v in self._goals(answers)
        )

    def synonym_tables(self) -> dict[str, SynonymTable]:
        return {"type": self._type_table, "goal": self._goal_table}


class HealthWellnessStrategy(SynonymWeightedStrategy):
    category = "health-wellness"
    goal_ids = ("goal", "salon_kind")
    keyword_ids = ("when", "payment")


class HomeServicesStrategy(SynonymWeightedStrategy):
    category = "home-services"
    goal_ids = ("goal", "urgency")
    keyword_ids = ("urgency", "budget")


# ---------------------------------------------------------------------------
# Real estate
# ---------------------------------------------------------------------------


class RealEstateStrategy(CategoryRankingStrategy):
    """Exact tag membership only; stagers are hidden unless staging is asked for."""

    category = "real-estate"
    question_ids = (
        "need", "property_type", "property-type", "timeline", "move_when",
        "budget", "beds", "staging",
    )

    STRONG_WEIGHT = 2
    MODERATE_WEIGHT = 1
    STAGER_TAGS = frozenset({"stager", "staging"})
    _MODERATE_IDS = ("timeline", "move_when", "budget", "beds")

    @staticmethod
    def wants_staging(answers: Mapping[str, str]) -> bool:
        return answers.get("staging") == "yes"

    def _is_stager(self, candidate: Candidate) -> bool:
        return any(tag.lower() in self.STAGER_TAGS for tag in candidate.tags)

    def _strong_values(self, answers: Mapping[str, str]) -> list[str]:
        return answer_values(answers, "need") + _first_present(
            answers, ("property_type", "property-type")
        )

    def exclude(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        return self._is_stager(candidate) and not self.wants_staging(answers)

    def score(self, candidate: Candidate, answers: Mapping[str, str]) -> int:
        tags = candidate.tags
        score = 0
        for value in self._strong_values(answers):
            if matching.has_tag(tags, value):
                score += self.STRONG_WEIGHT
        for question_id in self._MODERATE_IDS:
            for value in answer_values(answers, question_id):
                if matching.has_tag(tags, value):
                    score += self.MODERATE_WEIGHT
        if self.wants_staging(answers) and self._is_stager(candidate):
            score += self.MODERATE_WEIGHT
        return score

    def has_criteria(self, answers: Mapping[str, str]) -> bool:
        return bool(self._strong_values(answers))

    def matches_criteria(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        return any(matching.has_tag(candidate.tags, v) for v in self._strong_values(answers))


# ---------------------------------------------------------------------------
# Restaurants & cafes
# ---------------------------------------------------------------------------


class RestaurantStrategy(CategoryRankingStrategy):
    """Two-tier cuisine match, flat exact matches, plus a broad overlap bonus.

    Besides the per-question weights, each candidate tag equal to *any*
    submitted answer value adds one point, whatever question it came from.
    Only cuisine counts as a criterion for featured promotion.
    """

    category = "restaurants-cafes"
    question_ids = ("cuisine", "occasion", "price-range", "price", "service", "dietary")

    CUISINE_EXACT_WEIGHT = 4
    CUISINE_SYNONYM_WEIGHT = 3
    FLAT_WEIGHT = 2
    DIETARY_EXACT_WEIGHT = 2
    DIETARY_SYNONYM_WEIGHT = 1
    OVERLAP_WEIGHT = 1

    def __init__(self) -> None:
        self._cuisine_table = get_table(self.category, "cuisine")
        self._dietary_table = get_table(self.category, "dietary")

    def _cuisine_tier(self, candidate: Candidate, cuisine: str) -> int:
        if matching.has_tag(candidate.tags, cuisine):
            return self.CUISINE_EXACT_WEIGHT
        if matching.matches_any(candidate.tags, self._cuisine_table.expand(cuisine)):
            return self.CUISINE_SYNONYM_WEIGHT
        return 0

    def _dietary_tier(self, candidate: Candidate, dietary: str) -> int:
        if dietary.lower() == "none":
            return 0
        if matching.has_tag(candidate.tags, dietary):
            return self.DIETARY_EXACT_WEIGHT
        if matching.matches_any(candidate.tags, self._dietary_table.expand(dietary)):
            return self.DIETARY_SYNONYM_WEIGHT
        return 0

    def score(self, candidate: Candidate, answers: Mapping[str, str]) -> int:
        tags = candidate.tags
        score = 0
        for cuisine in answer_values(answers, "cuisine"):
            score += self._cuisine_tier(candidate, cuisine)

        flat_values = (
            answer_values(answers, "occasion")
            + _first_present(answers, ("price-range", "price"))
            + answer_values(answers, "service")
        )
        for value in flat_values:
            if matching.has_tag(tags, value):
                score += self.FLAT_WEIGHT

        for dietary in answer_values(answers, "dietary"):
            score += self._dietary_tier(candidate, dietary)

        submitted = {
            value.strip().lower()
            for value in answers.values()
            if isinstance(value, str) and value.strip()
        }
        score += self.OVERLAP_WEIGHT * matching.count_tags_in(tags, submitted)
        return score

    def has_criteria(self, answers: Mapping[str, str]) -> bool:
        return bool(answer_values(answers, "cuisine"))

    def matches_criteria(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        return any(
            self._cuisine_tier(candidate, cuisine) > 0
            for cuisine in answer_values(answers, "cuisine")
        )

    def synonym_tables(self) -> dict[str, SynonymTable]:
        return {"cuisine": self._cuisine_table, "dietary": self._dietary_table}


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------


class GenericStrategy(CategoryRankingStrategy):
    """Counts tags that literally equal a submitted answer value."""

    category = "generic"

    @staticmethod
    def _values(answers: Mapping[str, str]) -> set[str]:
        return {
            value.strip().lower()
            for value in answers.values()
            if isinstance(value, str) and value.strip()
        }

    def score(self, candidate: Candidate, answers: Mapping[str, str]) -> int:
        return matching.count_tags_in(candidate.tags, self._values(answers))

    def has_criteria(self, answers: Mapping[str, str]) -> bool:
        return bool(self._values(answers))

    def matches_criteria(self, candidate: Candidate, answers: Mapping[str, str]) -> bool:
        return matching.count_tags_in(candidate.tags, self._values(answers)) > 0


def default_strategies() -> dict[str, CategoryRankingStrategy]:
    strategies: list[CategoryRankingStrategy] = [
        HealthWellnessStrategy(),
        RealEstateStrategy(),
        RestaurantStrategy(),
        HomeServicesStrategy(),
    ]
    return {s.category: s for s in strategies}
