from __future__ import annotations

from .base import RecipeStore
from .cache import CachedRecipeStore
from .config import DEFAULT_STORE_CONFIG, StoreConfig
from .csv_store import CsvRecipeStore
from .supabase_store import SupabaseRecipeStore, get_supabase_client


def build_store(config: StoreConfig = DEFAULT_STORE_CONFIG) -> RecipeStore:
    """Build the configured recipe store, wrapped in a cache when ``cache_ttl > 0``."""
    backend = config.backend.strip().lower()
    store: RecipeStore
    if backend == "csv":
        store = CsvRecipeStore(config.catalog_path)
    elif backend == "supabase":
        store = SupabaseRecipeStore(get_supabase_client(config), config.recipes_table)
    else:
        raise ValueError(f"Unknown recipe store backend: {config.backend!r}")

    if config.cache_ttl > 0:
        return CachedRecipeStore(store, ttl_seconds=config.cache_ttl)
    return store
