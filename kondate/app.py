from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .meals.errors import EmptyQueryError, EmptyRecipePoolError, StoreFailureError
from .meals.models import Category, Genre, MealPlanRequest, MealPlanResponse
from .meals.service import suggest_meal_plan
from .store.base import RecipeStore
from .store.cache import CachedRecipeStore
from .store.factory import build_store

logger = logging.getLogger(__name__)

app = FastAPI(title="Meal Plan Suggestion API", version="1.0.0")

_store: RecipeStore | None = None


def get_recipe_store() -> RecipeStore:
    """Return the process-wide recipe store, building it on first use."""
    global _store
    if _store is None:
        try:
            _store = build_store()
        except (StoreFailureError, ValueError) as exc:
            logger.warning("Recipe store could not be configured", exc_info=True)
            raise HTTPException(status_code=502, detail=StoreFailureError.user_message) from exc
    return _store


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "genres": [g.value for g in Genre],
        "categories": [c.value for c in Category],
    }


@app.post("/meal-plan", response_model=MealPlanResponse)
def meal_plan(
    body: MealPlanRequest,
    store: RecipeStore = Depends(get_recipe_store),
) -> MealPlanResponse:
    try:
        return suggest_meal_plan(body.ingredients, body.genre, store)
    except EmptyQueryError as exc:
        raise HTTPException(status_code=422, detail=exc.user_message) from exc
    except EmptyRecipePoolError as exc:
        raise HTTPException(status_code=404, detail=exc.user_message) from exc
    except StoreFailureError as exc:
        raise HTTPException(status_code=502, detail=exc.user_message) from exc


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats(store: RecipeStore = Depends(get_recipe_store)) -> dict:
    if isinstance(store, CachedRecipeStore):
        return store.stats()
    return {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
