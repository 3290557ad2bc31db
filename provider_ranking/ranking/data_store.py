from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import pandas as pd

from ..data_ingestion.ingest import is_true
from .config import DEFAULT_RANKING_CONFIG
from .models import Candidate

logger = logging.getLogger(__name__)

_snapshot: dict[str, tuple[Candidate, ...]] | None = None
_version: str = ""


def _split_tags(raw: object) -> list[str]:
    if not isinstance(raw, str):
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]


def _row_to_candidate(row: pd.Series) -> Candidate:
    rating = row.get("rating")
    return Candidate(
        id=str(row["id"]),
        name=str(row["name"]),
        tags=_split_tags(row.get("tags")),
        rating=float(rating) if pd.notna(rating) else None,
        featured=is_true(row.get("featured")),
    )


def _load(path: Path) -> tuple[dict[str, tuple[Candidate, ...]], str]:
    if not path.is_file():
        logger.warning("Provider snapshot %s not found, serving an empty snapshot", path)
        return {}, "empty"

    version = hashlib.sha256(path.read_bytes()).hexdigest()[:16]
    df = pd.read_csv(path, dtype={"id": str, "tags": str, "category_key": str})
    df["category_key"] = df["category_key"].fillna("").str.strip()

    grouped: dict[str, list[Candidate]] = {}
    for _, row in df.iterrows():
        grouped.setdefault(row["category_key"], []).append(_row_to_candidate(row))

    logger.info(
        "Loaded %d providers across %d categories from %s (version %s)",
        len(df), len(grouped), path, version,
    )
    return {k: tuple(v) for k, v in grouped.items()}, version


def reload(path: Path | None = None) -> str:
    """Re-read the snapshot file and return its new version."""
    global _snapshot, _version
    _snapshot, _version = _load(path or DEFAULT_RANKING_CONFIG.snapshot_path)
    return _version


def _ensure_loaded() -> dict[str, tuple[Candidate, ...]]:
    if _snapshot is None:
        reload()
    return _snapshot or {}


def get_candidates(category: str) -> tuple[Candidate, ...]:
    """Return the snapshot's candidates for *category*, loading it on first call."""
    return _ensure_loaded().get(category, ())


def get_categories() -> list[str]:
    return sorted(k for k in _ensure_loaded() if k)


def get_snapshot_version() -> str:
    _ensure_loaded()
    return _version
