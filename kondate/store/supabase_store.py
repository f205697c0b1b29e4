from __future__ import annotations

import logging

from supabase import Client, create_client

from ..meals.errors import StoreFailureError
from ..meals.models import Genre, Recipe
from .config import DEFAULT_STORE_CONFIG, StoreConfig

logger = logging.getLogger(__name__)


def get_supabase_client(config: StoreConfig = DEFAULT_STORE_CONFIG) -> Client:
    """Create a Supabase client from the configured URL and anon key."""
    if not config.supabase_url or not config.supabase_key:
        raise StoreFailureError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
    return create_client(config.supabase_url, config.supabase_key)


class SupabaseRecipeStore:
    """Recipe store reading the ``recipes`` table of a Supabase project."""

    def __init__(self, client: Client, table: str = "recipes") -> None:
        self.client = client
        self.table = table

    def fetch_recipes_by_genre(self, genre: Genre) -> list[Recipe]:
        try:
            res = (
                self.client.table(self.table)
                .select("*")
                .eq("genre", genre.value)
                .order("created_at")
                .order("id")
                .execute()
            )
            rows = res.data or []
            recipes = [Recipe.model_validate(row) for row in rows]
        except Exception as exc:
            raise StoreFailureError(
                f"Supabase query on {self.table!r} failed for genre {genre.value!r}"
            ) from exc

        logger.info("Fetched %d %s recipes from Supabase", len(recipes), genre.value)
        return recipes
