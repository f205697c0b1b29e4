"""
Meal plan suggestion core.

Responsibilities:
- Normalize the free-text ingredient list into a set of query tokens.
- Score genre-filtered recipes against the query tokens.
- Pick the best recipe per course (main dish, side dish, soup).
"""
