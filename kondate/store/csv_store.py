from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..meals.errors import StoreFailureError
from ..meals.models import Genre, Recipe
from .config import DEFAULT_STORE_CONFIG

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "genre",
    "category",
    "ingredients",
    "steps",
    "created_at",
]
INGREDIENT_SEPARATOR = "|"


def split_ingredients(cell: str) -> list[str]:
    return [item.strip() for item in cell.split(INGREDIENT_SEPARATOR) if item.strip()]


class CsvRecipeStore:
    """
    Recipe store backed by the canonical catalog CSV.

    The file is read once on first use; recipes keep the file's row order.
    """

    def __init__(self, path: Path = DEFAULT_STORE_CONFIG.catalog_path) -> None:
        self.path = Path(path)
        self._recipes: list[Recipe] | None = None

    def _load(self) -> list[Recipe]:
        try:
            df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
            missing = [col for col in CATALOG_COLUMNS if col not in df.columns]
            if missing:
                raise KeyError(f"catalog is missing columns {missing}")
            recipes = [
                Recipe(
                    id=row["id"],
                    name=row["name"],
                    genre=row["genre"],
                    category=row["category"],
                    ingredients=split_ingredients(row["ingredients"]),
                    steps=row["steps"],
                    created_at=row["created_at"] or None,
                )
                for row in df.to_dict(orient="records")
            ]
        except (OSError, KeyError, ValueError) as exc:
            raise StoreFailureError(f"Cannot load recipe catalog {self.path}") from exc

        logger.info("Loaded %d recipes from %s", len(recipes), self.path)
        return recipes

    def get_recipes(self) -> list[Recipe]:
        """Return every catalog recipe, loading the file on first call."""
        if self._recipes is None:
            self._recipes = self._load()
        return self._recipes

    def fetch_recipes_by_genre(self, genre: Genre) -> list[Recipe]:
        return [recipe for recipe in self.get_recipes() if recipe.genre == genre]
