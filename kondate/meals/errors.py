from __future__ import annotations

from typing import Any


class MealPlanError(Exception):
    """Base class for conditions the caller must surface to the user."""

    user_message = "エラーが発生しました"


class EmptyQueryError(MealPlanError):
    """The ingredient text contained no usable tokens."""

    user_message = "食材を入力してください"

    def __init__(self, raw: str = "") -> None:
        super().__init__(f"No ingredient tokens in {raw!r}")
        self.raw = raw


class EmptyRecipePoolError(MealPlanError):
    """The recipe store returned nothing for the requested genre."""

    user_message = "該当するレシピが見つかりませんでした"

    def __init__(self, genre: Any) -> None:
        super().__init__(f"No recipes for genre {getattr(genre, 'value', genre)!r}")
        self.genre = genre


class StoreFailureError(MealPlanError):
    """Transport, query or decoding failure inside a recipe store."""
