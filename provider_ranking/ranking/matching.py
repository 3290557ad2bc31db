"""
Tag matching predicates.

Tags carry no structure of their own; a tag "means" a cuisine, a service
type or a price tier only because it matches one of the synonyms for that
value. All comparisons are case-insensitive.

Synonym matching is bidirectional substring containment: the tag may
contain the synonym ("mexican restaurant" vs "mexican") or the synonym may
contain the tag ("tex-mex" vs "mex"). Short tags can therefore match
unrelated long synonyms (a "pt" tag matches "physical therapy" but also
"pt" inside any longer word); that behaviour is kept as-is.
"""
from __future__ import annotations

from collections.abc import Iterable


def matches(tag: str, synonyms: Iterable[str]) -> bool:
    """Return True if *tag* and any synonym contain one another."""
    tag_lower = tag.strip().lower()
    if not tag_lower:
        return False
    for synonym in synonyms:
        synonym_lower = synonym.lower()
        if synonym_lower in tag_lower or tag_lower in synonym_lower:
            return True
    return False


def matches_any(tags: Iterable[str], synonyms: Iterable[str]) -> bool:
    """Return True if any of the candidate's *tags* matches a synonym."""
    synonyms = tuple(synonyms)
    return any(matches(tag, synonyms) for tag in tags)


def contains_keyword(tags: Iterable[str], keyword: str) -> bool:
    """Plain one-way containment of *keyword* in any tag, no synonyms."""
    keyword_lower = keyword.lower()
    if not keyword_lower:
        return False
    return any(keyword_lower in tag.lower() for tag in tags)


def has_tag(tags: Iterable[str], value: str) -> bool:
    """Case-insensitive exact membership."""
    value_lower = value.lower()
    return any(tag.lower() == value_lower for tag in tags)


def count_tags_in(tags: Iterable[str], values: set[str]) -> int:
    """Count the tags whose lowercase form is one of *values* (already lowercased)."""
    return sum(1 for tag in tags if tag.lower() in values)
