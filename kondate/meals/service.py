from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..store.base import RecipeStore
from .errors import EmptyQueryError, EmptyRecipePoolError, StoreFailureError
from .matcher import match_score, matched_ingredients, select_meal_plan
from .models import Category, Genre, MealPlanResponse, Recipe, SuggestedRecipe
from .normalizer import normalize

logger = logging.getLogger(__name__)


def _elapsed_ms(start_time: float) -> float:
    return round((time.time() - start_time) * 1000, 1)


def _record_failure(reason: str, genre: Genre, start_time: float) -> None:
    record_event("suggest_failed", {
        "reason": reason,
        "genre": genre.value,
        "response_time_ms": _elapsed_ms(start_time),
    })


def _suggested(recipe: Recipe | None, query: set[str]) -> SuggestedRecipe | None:
    if recipe is None:
        return None
    return SuggestedRecipe(
        recipe=recipe,
        score=match_score(recipe, query),
        matched_ingredients=matched_ingredients(recipe, query),
    )


def suggest_meal_plan(
    raw_ingredients: str,
    genre: Genre,
    store: RecipeStore,
) -> MealPlanResponse:
    """
    Run one suggestion request end to end.

    Steps:
    - Normalize the ingredient text (``EmptyQueryError`` stops before any fetch).
    - Fetch the genre's recipes (``StoreFailureError`` is passed through, no retry).
    - Reject an empty pool with ``EmptyRecipePoolError``.
    - Select one recipe per course and attach scores for display.
    """
    start_time = time.time()

    try:
        query = normalize(raw_ingredients)
    except EmptyQueryError:
        _record_failure("empty_query", genre, start_time)
        raise

    try:
        pool = store.fetch_recipes_by_genre(genre)
    except StoreFailureError:
        logger.warning("Recipe store fetch failed for genre %s", genre.value, exc_info=True)
        _record_failure("store_failure", genre, start_time)
        raise
    except Exception as exc:
        logger.warning("Recipe store raised unexpectedly for genre %s", genre.value, exc_info=True)
        _record_failure("store_failure", genre, start_time)
        raise StoreFailureError(f"Recipe store failed for genre {genre.value!r}") from exc

    if not pool:
        _record_failure("empty_pool", genre, start_time)
        raise EmptyRecipePoolError(genre)

    plan = select_meal_plan(pool, query)

    response = MealPlanResponse(
        main_dish=_suggested(plan.main_dish, query),
        side_dish=_suggested(plan.side_dish, query),
        soup=_suggested(plan.soup, query),
        genre=genre,
        ingredients=sorted(query),
        total_candidates=len(pool),
    )

    record_event("suggest", {
        "genre": genre.value,
        "ingredients": sorted(query),
        "filled_slots": [c.value for c in Category if plan.slot(c) is not None],
        "total_candidates": len(pool),
        "response_time_ms": _elapsed_ms(start_time),
    })

    return response
