"""
Snapshot ranking service.

Responsibilities:
- Look up the candidate snapshot for a category.
- Rank it with the engine, reusing a cached ordering when the snapshot
  and answers are unchanged.
- Split the ordering into top matches and other providers.
- Record an analytics event for every request.
"""
from __future__ import annotations

import time

from ..analytics.store import record_event
from .cache import cache_get, cache_set, make_key
from .config import DEFAULT_RANKING_CONFIG, RankingConfig
from .data_store import get_candidates, get_snapshot_version
from .engine import DEFAULT_ENGINE, RankingEngine
from .models import ProviderRankRequest, ProviderRankResponse


def _record(
    category: str,
    request: ProviderRankRequest,
    response: ProviderRankResponse,
    start_time: float,
    cache_hit: bool,
) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("rank", {
        "category": category,
        "strategy": response.strategy,
        "answers": dict(request.answers),
        "total_candidates": response.total_candidates,
        "excluded_count": response.excluded_count,
        "top_matches_returned": len(response.top_matches),
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def get_ranked_providers(
    category: str,
    request: ProviderRankRequest,
    engine: RankingEngine = DEFAULT_ENGINE,
    config: RankingConfig = DEFAULT_RANKING_CONFIG,
) -> ProviderRankResponse:
    start_time = time.time()
    top_n = request.top_n or config.top_matches
    snapshot_version = get_snapshot_version()

    # --- Cache check ---
    key = make_key(category, snapshot_version, dict(request.answers), top_n)
    cached = cache_get(key, ttl=config.cache_ttl_seconds)
    if cached is not None:
        _record(category, request, cached, start_time, cache_hit=True)
        return cached

    # --- Ranking ---
    result = engine.rank_with_details(category, get_candidates(category), request.answers)

    response = ProviderRankResponse(
        category=category,
        strategy=result.strategy,
        top_matches=result.ranked[:top_n],
        other_providers=result.ranked[top_n:],
        total_candidates=len(result.ranked),
        excluded_count=result.excluded_count,
        snapshot_version=snapshot_version,
    )

    cache_set(key, response, ttl=config.cache_ttl_seconds)
    _record(category, request, response, start_time, cache_hit=False)
    return response
