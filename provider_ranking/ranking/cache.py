"""
Result cache for snapshot rankings.

Keys cover everything a ranking depends on - category, snapshot version,
answers and the top-N cut - so a reloaded snapshot never serves stale
orderings.
"""
from __future__ import annotations

import hashlib
import json
import time
from typing import Any

from .config import DEFAULT_RANKING_CONFIG

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def make_key(
    category: str,
    snapshot_version: str,
    answers: dict[str, str],
    top_n: int,
) -> str:
    normalized = json.dumps(
        {
            "category": category,
            "snapshot_version": snapshot_version,
            "answers": answers,
            "top_n": top_n,
        },
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(key: str, ttl: float = DEFAULT_RANKING_CONFIG.cache_ttl_seconds) -> Any | None:
    global _hits, _misses
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < ttl:
        _hits += 1
        return entry["value"]
    if entry:
        del _cache[key]
    _misses += 1
    return None


def cache_set(
    key: str,
    value: Any,
    ttl: float = DEFAULT_RANKING_CONFIG.cache_ttl_seconds,
) -> None:
    """Store *value*, first evicting every entry already older than *ttl*."""
    now = time.time()
    expired = [k for k, entry in _cache.items() if now - entry["created_at"] >= ttl]
    for k in expired:
        del _cache[k]
    _cache[key] = {"value": value, "created_at": now}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
