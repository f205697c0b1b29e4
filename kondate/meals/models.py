from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _lookup_by_name(enum_cls: type[Enum], value: Any) -> Enum | None:
    if isinstance(value, str):
        return enum_cls.__members__.get(value.strip().lower())
    return None


class Genre(str, Enum):
    japanese = "和食"
    western = "洋食"
    chinese = "中華"

    @classmethod
    def _missing_(cls, value: object) -> Genre | None:
        return _lookup_by_name(cls, value)


class Category(str, Enum):
    main_dish = "主菜"
    side_dish = "副菜"
    soup = "汁物"

    @classmethod
    def _missing_(cls, value: object) -> Category | None:
        return _lookup_by_name(cls, value)


class Recipe(BaseModel):
    """Read-only snapshot of one dish as returned by a recipe store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    genre: Genre
    category: Category
    ingredients: list[str] = Field(default_factory=list)
    steps: str = ""
    created_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Some backends hand out integer or UUID primary keys.
        return value if isinstance(value, str) else str(value)


class MealPlan(BaseModel):
    main_dish: Recipe | None = None
    side_dish: Recipe | None = None
    soup: Recipe | None = None

    def slot(self, category: Category) -> Recipe | None:
        return getattr(self, category.name)


# ── HTTP payloads ────────────────────────────────────────────────────────


class MealPlanRequest(BaseModel):
    ingredients: str = Field(
        ...,
        max_length=1000,
        description="Comma-separated list of available ingredients, e.g. 豚肉,じゃがいも",
    )
    genre: Genre = Genre.japanese


class SuggestedRecipe(BaseModel):
    recipe: Recipe
    score: int
    matched_ingredients: list[str] = Field(default_factory=list)


class MealPlanResponse(BaseModel):
    main_dish: SuggestedRecipe | None = None
    side_dish: SuggestedRecipe | None = None
    soup: SuggestedRecipe | None = None
    genre: Genre
    ingredients: list[str]
    total_candidates: int
