from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    rankings = [e for e in events if e["type"] == "rank"]
    total = len(rankings)

    # Average response time
    times = [r["response_time_ms"] for r in rankings if "response_time_ms" in r]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top categories
    category_counter: Counter[str] = Counter()
    for r in rankings:
        category_counter[r.get("category", "unknown")] += 1
    top_categories = [{"name": n, "count": c} for n, c in category_counter.most_common(10)]

    # Top answers, as "question=value"
    answer_counter: Counter[str] = Counter()
    for r in rankings:
        for question, value in (r.get("answers") or {}).items():
            answer_counter[f"{question}={value}"] += 1
    top_answers = [{"name": n, "count": c} for n, c in answer_counter.most_common(10)]

    # Share of requests that applied no filters at all
    unfiltered = sum(1 for r in rankings if not r.get("answers"))

    # Requests where nothing was left to show
    empty_results = sum(1 for r in rankings if r.get("total_candidates", 0) == 0)

    # Strategy usage
    strategy_usage = dict(Counter(r.get("strategy", "unknown") for r in rankings))

    # Cache stats
    cache_hits = sum(1 for r in rankings if r.get("cache_hit"))
    cache_misses = total - cache_hits

    return {
        "total_rankings": total,
        "avg_response_time_ms": avg_time,
        "top_categories": top_categories,
        "top_answers": top_answers,
        "strategy_usage": strategy_usage,
        "unfiltered_rate": round(unfiltered / total * 100, 1) if total else 0.0,
        "empty_result_rate": round(empty_results / total * 100, 1) if total else 0.0,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
    }
