from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_SNAPSHOT = Path(__file__).resolve().parent.parent / "data" / "processed" / "providers.csv"


@dataclass(frozen=True)
class RankingConfig:
    snapshot_path: Path = Path(os.getenv("PROVIDER_SNAPSHOT_PATH", str(_DEFAULT_SNAPSHOT)))
    top_matches: int = int(os.getenv("TOP_MATCHES", "8"))
    cache_ttl_seconds: int = int(os.getenv("RANK_CACHE_TTL", "300"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


DEFAULT_RANKING_CONFIG = RankingConfig()
