from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Candidate(BaseModel):
    """Read-only projection of a business listing, as the ranker sees it."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    tags: tuple[str, ...] = ()
    rating: float | None = None
    featured: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("tags must be a list of strings")

        seen: set[str] = set()
        tags: list[str] = []
        for raw in value:
            if raw is None:
                continue
            tag = str(raw).strip()
            if not tag or tag.lower() in seen:
                continue
            seen.add(tag.lower())
            tags.append(tag)
        return tuple(tags)

    @field_validator("rating", mode="before")
    @classmethod
    def _drop_nan_rating(cls, value: Any) -> Any:
        if isinstance(value, float) and math.isnan(value):
            return None
        return value


class RankRequest(BaseModel):
    category: str = Field(..., description="Category key, e.g. restaurants-cafes")
    candidates: list[Candidate] = Field(default_factory=list)
    answers: dict[str, str] = Field(default_factory=dict)


class RankResponse(BaseModel):
    category: str
    strategy: str
    results: list[Candidate]


class ProviderRankRequest(BaseModel):
    answers: dict[str, str] = Field(default_factory=dict)
    top_n: int | None = Field(
        default=None,
        ge=1,
        le=50,
        description="How many results count as top matches; defaults to config",
    )


class ProviderRankResponse(BaseModel):
    category: str
    strategy: str
    top_matches: list[Candidate]
    other_providers: list[Candidate]
    total_candidates: int
    excluded_count: int
    snapshot_version: str
