"""
Listing ingestion.

Responsibilities:
- Read a raw export of the listings table.
- Normalise it into the canonical candidate schema (merged tags, featured flag).
- Persist the candidate snapshot locally for the ranking service.
"""
