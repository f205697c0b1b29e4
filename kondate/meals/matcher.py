"""
Recipe matcher.

Every course is chosen independently: the recipes of one category are scored
against the query tokens and the highest score wins. Ties go to the recipe the
store returned first. There is no minimum score, so a lone candidate with no
overlap is still picked.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Category, MealPlan, Recipe


def _ingredient_matches(ingredient: str, query: Iterable[str]) -> bool:
    text = ingredient.lower()
    return any(token in text for token in query)


def match_score(recipe: Recipe, query: Iterable[str]) -> int:
    """Count the recipe's ingredient entries that contain at least one query token."""
    query = tuple(query)
    return sum(1 for ingredient in recipe.ingredients if _ingredient_matches(ingredient, query))


def matched_ingredients(recipe: Recipe, query: Iterable[str]) -> list[str]:
    query = tuple(query)
    return [ingredient for ingredient in recipe.ingredients if _ingredient_matches(ingredient, query)]


def best_match(
    pool: Sequence[Recipe],
    category: Category,
    query: Iterable[str],
) -> Recipe | None:
    """Return the first highest-scoring recipe of ``category`` in pool order."""
    query = tuple(query)
    best: Recipe | None = None
    best_score = -1
    for recipe in pool:
        if recipe.category != category:
            continue
        score = match_score(recipe, query)
        if score > best_score:
            best, best_score = recipe, score
    return best


def select_meal_plan(pool: Sequence[Recipe], query: Iterable[str]) -> MealPlan:
    """
    Pick one recipe per course from a genre-filtered pool.

    The pool is expected to hold recipes of a single genre already; no genre
    filtering happens here. Courses without candidates stay empty.
    """
    query = tuple(query)
    return MealPlan(
        **{category.name: best_match(pool, category, query) for category in Category}
    )
