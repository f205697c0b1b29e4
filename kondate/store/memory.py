from __future__ import annotations

from collections.abc import Iterable

from ..meals.models import Genre, Recipe


class InMemoryRecipeStore:
    """Recipe store over a fixed list, keeping insertion order."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: list[Recipe] = list(recipes)

    def fetch_recipes_by_genre(self, genre: Genre) -> list[Recipe]:
        return [recipe for recipe in self._recipes if recipe.genre == genre]
