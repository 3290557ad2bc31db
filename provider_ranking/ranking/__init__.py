"""
Provider ranking engine.

Responsibilities:
- Expand funnel answers through per-category synonym tables.
- Score each candidate listing with its category's strategy.
- Promote featured listings only when they match what was asked for.
- Return candidates in a deterministic, total order.
"""
from .engine import DEFAULT_ENGINE, RankingEngine, rank
from .models import Candidate

__all__ = ["Candidate", "DEFAULT_ENGINE", "RankingEngine", "rank"]
