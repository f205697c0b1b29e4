"""
Recipe store configuration.

Values come from the environment; a ``.env`` file at the project root is
loaded first so local setups do not need exported variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "recipes.csv"


@dataclass(frozen=True)
class StoreConfig:
    backend: str = os.getenv("KONDATE_STORE", "csv")
    catalog_path: Path = Path(os.getenv("KONDATE_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_ANON_KEY", "")
    recipes_table: str = os.getenv("KONDATE_RECIPES_TABLE", "recipes")
    cache_ttl: float = float(os.getenv("KONDATE_CACHE_TTL", "300"))


DEFAULT_STORE_CONFIG = StoreConfig()
