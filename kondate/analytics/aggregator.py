from __future__ import annotations

from collections import Counter
from typing import Any

from ..meals.models import Category


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    suggestions = [e for e in events if e["type"] == "suggest"]
    failures = [e for e in events if e["type"] == "suggest_failed"]
    total = len(suggestions)

    # Average response time over successful suggestions
    times = [s["response_time_ms"] for s in suggestions if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    genre_counter: Counter[str] = Counter(s.get("genre", "unknown") for s in suggestions)
    top_genres = [{"name": n, "count": c} for n, c in genre_counter.most_common()]

    ingredient_counter: Counter[str] = Counter()
    for s in suggestions:
        for token in s.get("ingredients", []) or []:
            ingredient_counter[token] += 1
    top_ingredients = [{"name": n, "count": c} for n, c in ingredient_counter.most_common(10)]

    # Share of suggestions that produced a recipe for each course
    slot_counts = {c.value: 0 for c in Category}
    for s in suggestions:
        for slot in s.get("filled_slots", []) or []:
            if slot in slot_counts:
                slot_counts[slot] += 1
    slot_fill_rate = {
        k: round(v / total * 100, 1) if total else 0.0
        for k, v in slot_counts.items()
    }

    failure_counts = dict(Counter(f.get("reason", "unknown") for f in failures))

    return {
        "total_suggestions": total,
        "total_failures": len(failures),
        "failures_by_reason": failure_counts,
        "avg_response_time_ms": avg_time,
        "top_genres": top_genres,
        "top_ingredients": top_ingredients,
        "slot_fill_rate": slot_fill_rate,
    }
