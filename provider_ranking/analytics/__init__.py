"""
In-memory request analytics.

Responsibilities:
- Keep a bounded log of ranking requests.
- Summarise usage: categories, answers, latency and cache behaviour.
"""
