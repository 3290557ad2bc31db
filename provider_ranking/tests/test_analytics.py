from __future__ import annotations

from fastapi.testclient import TestClient

from provider_ranking.analytics.aggregator import compute_analytics
from provider_ranking.analytics.store import clear_events, get_events, record_event
from provider_ranking.app import app
from provider_ranking.ranking.cache import clear_cache

client = TestClient(app)


def test_analytics_returns_empty_initially():
    clear_events()
    resp = client.get("/analytics")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_rankings"] == 0
    assert body["avg_response_time_ms"] == 0.0


def test_analytics_tracks_rankings():
    clear_events()
    clear_cache()
    client.post("/providers/restaurants-cafes/rank", json={"answers": {"cuisine": "mexican"}})
    client.post("/providers/restaurants-cafes/rank", json={"answers": {"cuisine": "mexican"}})
    client.post("/providers/real-estate/rank", json={"answers": {}})
    body = client.get("/analytics").json()
    assert body["total_rankings"] == 3
    assert body["top_categories"][0] == {"name": "restaurants-cafes", "count": 2}
    assert {"name": "cuisine=mexican", "count": 2} in body["top_answers"]
    assert body["cache_stats"]["hits"] == 1
    assert body["strategy_usage"]["RestaurantStrategy"] == 2


def test_adhoc_rank_is_recorded_separately():
    clear_events()
    client.post("/rank", json={"category": "x", "candidates": [], "answers": {}})
    assert len(get_events("rank_adhoc")) == 1
    assert client.get("/analytics").json()["total_rankings"] == 0


def test_compute_analytics_rates():
    events = [
        {"type": "rank", "category": "a", "answers": {}, "total_candidates": 0,
         "response_time_ms": 2.0, "strategy": "GenericStrategy", "cache_hit": False},
        {"type": "rank", "category": "a", "answers": {"q": "v"}, "total_candidates": 3,
         "response_time_ms": 4.0, "strategy": "GenericStrategy", "cache_hit": True},
        {"type": "other"},
    ]
    result = compute_analytics(events)
    assert result["total_rankings"] == 2
    assert result["avg_response_time_ms"] == 3.0
    assert result["unfiltered_rate"] == 50.0
    assert result["empty_result_rate"] == 50.0
    assert result["cache_stats"]["hit_rate"] == 50.0


def test_event_store_filters_by_type():
    clear_events()
    record_event("rank", {"category": "a"})
    record_event("other", {})
    assert len(get_events()) == 2
    assert [e["category"] for e in get_events("rank")] == ["a"]
