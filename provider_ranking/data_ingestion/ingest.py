from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


CANONICAL_COLUMNS: List[str] = [
    "id",
    "name",
    "category_key",
    "tags",
    "rating",
    "featured",
]


def _parse_tag_list(raw: object) -> list[str]:
    """Accept JSON arrays, Postgres array literals or plain comma lists."""
    if raw is None or (not isinstance(raw, (list, tuple)) and pd.isna(raw)):
        return []
    if isinstance(raw, (list, tuple)):
        items = [str(x) for x in raw]
    else:
        text = str(raw).strip()
        if text.startswith("["):
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError:
                parsed = text.strip("[]").split(",")
            items = [str(x) for x in parsed] if isinstance(parsed, list) else [str(parsed)]
        elif text.startswith("{") and text.endswith("}"):
            items = text[1:-1].split(",")
        else:
            items = text.split(",")
    return [i.strip().strip('"').strip() for i in items if i and i.strip().strip('"').strip()]


def _merge_tags(tags: object, badges: object) -> str:
    """Union of tags and badges, first spelling wins, serialised comma-separated."""
    merged: dict[str, str] = {}
    for tag in _parse_tag_list(tags) + _parse_tag_list(badges):
        merged.setdefault(tag.lower(), tag.replace(",", " "))
    return ",".join(merged.values())


def is_true(value: object) -> bool:
    """Truthiness of a boolean-ish listing flag: a bool, or "true"/"t" in any case."""
    if pd.api.types.is_bool(value):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in ("true", "t")
    return False


def _is_false(value: object) -> bool:
    """Explicitly false only; a missing value is not a 'no'."""
    if pd.api.types.is_bool(value):
        return not bool(value)
    if isinstance(value, str):
        return value.strip().lower() in ("false", "f")
    return False


def _normalize_rating(rating: float | int | str | None) -> float | None:
    if rating is None:
        return None
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if value != value:  # NaN
        return None

    # Clamp to [0, 5]
    return max(0.0, min(5.0, value))


def normalize_listings(df: pd.DataFrame) -> pd.DataFrame:
    """
    Map a raw listings export onto the canonical candidate columns.

    - ``tags`` and ``badges`` are merged into one tag list.
    - ``featured`` is ``is_featured OR is_member``.
    - Rows explicitly marked unpublished are dropped.
    """

    def _first_present(columns: List[str]) -> str | None:
        for col in columns:
            if col in df.columns:
                return col
        return None

    col_id = _first_present(["id", "provider_id", "uuid"])
    col_name = _first_present(["name", "business_name", "provider_name"])
    if not col_id or not col_name:
        raise ValueError("Raw listings export needs an id and a name column")

    col_category = _first_present(["category_key", "category"])
    col_tags = _first_present(["tags"])
    col_badges = _first_present(["badges"])
    col_rating = _first_present(["rating", "avg_rating"])
    col_featured = _first_present(["is_featured", "featured"])
    col_member = _first_present(["is_member", "member"])
    col_published = _first_present(["published", "is_published"])

    if col_published:
        df = df[~df[col_published].apply(_is_false)]

    canonical = pd.DataFrame(index=df.index)
    canonical["id"] = df[col_id].astype(str)
    canonical["name"] = df[col_name].fillna("").astype(str).str.strip()
    canonical["category_key"] = (
        df[col_category].fillna("").astype(str).str.strip() if col_category else ""
    )

    tags = df[col_tags] if col_tags else pd.Series([None] * len(df), index=df.index)
    badges = df[col_badges] if col_badges else pd.Series([None] * len(df), index=df.index)
    canonical["tags"] = [_merge_tags(t, b) for t, b in zip(tags, badges)]

    if col_rating:
        canonical["rating"] = df[col_rating].apply(_normalize_rating)
    else:
        canonical["rating"] = pd.NA

    featured = pd.Series(False, index=df.index)
    if col_featured:
        featured = featured | df[col_featured].apply(is_true)
    if col_member:
        featured = featured | df[col_member].apply(is_true)
    canonical["featured"] = featured.astype(bool)

    canonical = canonical[canonical["name"] != ""]
    return canonical[CANONICAL_COLUMNS].reset_index(drop=True)


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Turn a raw listings export into the candidate snapshot.

    Steps:
    - Read the raw CSV export.
    - Normalise it into canonical candidate columns.
    - Persist the snapshot as CSV for the ranking service.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    raw = pd.read_csv(config.raw_path, dtype={"id": str})
    canonical = normalize_listings(raw)

    output_path = config.processed_path
    canonical.to_csv(output_path, index=False)
    logger.info("Wrote %d candidates to %s", len(canonical), output_path)
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Processed snapshot saved to: {path}")
