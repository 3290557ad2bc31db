from __future__ import annotations

from fastapi.testclient import TestClient

from provider_ranking.app import app
from provider_ranking.ranking.cache import (
    cache_get,
    cache_set,
    clear_cache,
    get_cache_stats,
    make_key,
)

client = TestClient(app)


def test_key_ignores_answer_order():
    a = make_key("real-estate", "v1", {"need": "buy", "beds": "3"}, 8)
    b = make_key("real-estate", "v1", {"beds": "3", "need": "buy"}, 8)
    assert a == b


def test_key_changes_with_snapshot_version():
    assert make_key("x", "v1", {}, 8) != make_key("x", "v2", {}, 8)


def test_expired_entry_is_a_miss():
    clear_cache()
    key = make_key("x", "v1", {}, 8)
    cache_set(key, "value")
    assert cache_get(key, ttl=0) is None
    assert get_cache_stats()["size"] == 0


def test_set_evicts_expired_entries_for_other_keys():
    clear_cache()
    stale = make_key("x", "v1", {"q": "a"}, 8)
    cache_set(stale, "old")
    fresh = make_key("x", "v1", {"q": "b"}, 8)
    cache_set(fresh, "new", ttl=0)
    assert get_cache_stats()["size"] == 1
    assert cache_get(fresh, ttl=60) == "new"
    assert cache_get(stale, ttl=60) is None


def test_set_keeps_live_entries():
    clear_cache()
    cache_set(make_key("x", "v1", {"q": "a"}, 8), "a")
    cache_set(make_key("x", "v1", {"q": "b"}, 8), "b")
    assert get_cache_stats()["size"] == 2


def test_cache_miss_then_hit():
    clear_cache()
    resp1 = client.post("/providers/home-services/rank", json={"answers": {"type": "solar"}})
    assert resp1.status_code == 200
    assert get_cache_stats()["misses"] >= 1

    resp2 = client.post("/providers/home-services/rank", json={"answers": {"type": "solar"}})
    assert resp2.status_code == 200
    assert get_cache_stats()["hits"] >= 1
    assert resp1.json() == resp2.json()


def test_cache_different_queries_miss():
    clear_cache()
    client.post("/providers/home-services/rank", json={"answers": {"type": "solar"}})
    client.post("/providers/home-services/rank", json={"answers": {"type": "plumbing"}})
    stats = get_cache_stats()
    assert stats["misses"] >= 2
    assert stats["hits"] == 0


def test_cache_stats_endpoint():
    clear_cache()
    client.post("/providers/health-wellness/rank", json={"answers": {}})
    client.post("/providers/health-wellness/rank", json={"answers": {}})
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["hits"] >= 1
    assert "hit_rate" in body


def test_snapshot_reload_clears_cache():
    client.post("/providers/health-wellness/rank", json={"answers": {}})
    resp = client.post("/snapshot/reload")
    assert resp.status_code == 200
    assert resp.json()["status"] == "reloaded"
    assert get_cache_stats()["size"] == 0
