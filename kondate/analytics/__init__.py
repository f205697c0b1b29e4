"""
Suggestion analytics.

Responsibilities:
- Keep an in-memory log of suggestion outcomes.
- Aggregate the log into usage statistics for the admin endpoint.
"""
