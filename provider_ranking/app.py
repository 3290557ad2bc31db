from __future__ import annotations

import logging

from fastapi import FastAPI

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .ranking.cache import clear_cache, get_cache_stats
from .ranking.config import DEFAULT_RANKING_CONFIG
from .ranking.data_store import get_categories, get_snapshot_version, reload
from .ranking.engine import DEFAULT_ENGINE
from .ranking.models import (
    ProviderRankRequest,
    ProviderRankResponse,
    RankRequest,
    RankResponse,
)
from .ranking.retrieval import get_ranked_providers

logging.getLogger("provider_ranking").setLevel(DEFAULT_RANKING_CONFIG.log_level.upper())

app = FastAPI(title="Provider Ranking API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    strategies = {}
    for category, strategy in DEFAULT_ENGINE.strategies.items():
        strategies[category] = {
            "strategy": strategy.name,
            "question_ids": list(strategy.question_ids),
            "synonyms": {
                field: table.canonical_values()
                for field, table in strategy.synonym_tables().items()
            },
        }
    return {
        "categories": get_categories(),
        "strategies": strategies,
        "snapshot_version": get_snapshot_version(),
    }


# ── Ranking endpoints ────────────────────────────────────────────────────


@app.post("/rank", response_model=RankResponse)
def rank(body: RankRequest) -> RankResponse:
    result = DEFAULT_ENGINE.rank_with_details(body.category, body.candidates, body.answers)
    record_event("rank_adhoc", {
        "category": body.category,
        "strategy": result.strategy,
        "candidates": len(body.candidates),
        "excluded_count": result.excluded_count,
    })
    return RankResponse(category=body.category, strategy=result.strategy, results=result.ranked)


@app.post("/providers/{category}/rank", response_model=ProviderRankResponse)
def rank_providers(category: str, body: ProviderRankRequest) -> ProviderRankResponse:
    return get_ranked_providers(category, body)


# ── Operations endpoints ─────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()


@app.post("/snapshot/reload")
def snapshot_reload() -> dict:
    version = reload()
    clear_cache()
    return {"status": "reloaded", "snapshot_version": version, "categories": get_categories()}
