from __future__ import annotations

from typing import Protocol

from ..meals.models import Genre, Recipe


class RecipeStore(Protocol):
    def fetch_recipes_by_genre(self, genre: Genre) -> list[Recipe]:
        """
        Return all recipes tagged with ``genre``.

        The order must be stable within a call since it decides ties in the
        matcher. An empty list means no recipes; failures raise
        ``StoreFailureError``.
        """
        ...
