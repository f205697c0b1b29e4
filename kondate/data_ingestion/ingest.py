from __future__ import annotations

import json
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any, List

import pandas as pd

from ..meals.models import Category, Genre
from ..store.csv_store import CATALOG_COLUMNS, INGREDIENT_SEPARATOR
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

_TEXT_LIST_SPLIT = re.compile(r"[|、,\n]")


def _parse_ingredients(cell: Any) -> List[str]:
    """
    Accept the ingredient formats seen in exports:
    JSON arrays, Postgres array literals ``{a,b}`` and delimited text.
    """
    if isinstance(cell, (list, tuple)):
        items = [str(i) for i in cell]
    elif cell is None or (isinstance(cell, float) and pd.isna(cell)):
        return []
    else:
        raw = str(cell).strip()
        items = []
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                items = [str(i) for i in parsed]
            else:
                items = _TEXT_LIST_SPLIT.split(raw.strip("[]"))
        elif raw.startswith("{") and raw.endswith("}"):
            items = [i.strip('"') for i in raw[1:-1].split(",")]
        else:
            items = _TEXT_LIST_SPLIT.split(raw)

    return [i.strip() for i in items if i and i.strip()]


def _parse_label(value: Any, enum_cls: type[Enum]) -> str | None:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    try:
        return enum_cls(str(value).strip()).value
    except ValueError:
        return None


def _normalize_timestamp(value: Any) -> str:
    """Rewrite export timestamps (e.g. Postgres `2024-04-01 09:00:00.123+00`) as ISO 8601."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    ts = pd.to_datetime(str(value).strip(), utc=True, errors="coerce")
    if pd.isna(ts):
        return ""
    return ts.isoformat()


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Build the canonical recipe catalog from a raw export.

    Steps:
    - Read the raw CSV.
    - Map raw fields onto the catalog columns.
    - Drop rows whose genre or category is not a known label.
    - Persist the catalog as CSV for the CSV recipe store.
    """

    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(config.raw_path, dtype=str)

    # Exports name their columns differently depending on the tool used.
    def _first_present(columns: List[str]) -> str | None:
        for col in columns:
            if col in df.columns:
                return col
        return None

    col_id = _first_present(["id", "recipe_id", "uuid"])
    col_name = _first_present(["name", "title", "recipe_name"])
    col_genre = _first_present(["genre", "cuisine", "ジャンル"])
    col_category = _first_present(["category", "course", "カテゴリ"])
    col_ingredients = _first_present(["ingredients", "ingredient_list", "材料"])
    col_steps = _first_present(["steps", "instructions", "作り方"])
    col_created_at = _first_present(["created_at", "createdAt", "created"])

    if not col_name or not col_genre or not col_category:
        raise ValueError(
            f"{config.raw_path} needs name, genre and category columns, got {list(df.columns)}"
        )

    canonical = pd.DataFrame()
    row_ids = pd.Series([f"row-{i}" for i in range(len(df))], index=df.index)
    if col_id:
        ids = df[col_id].astype("string").str.strip()
        canonical["id"] = ids.where(ids.notna() & (ids != ""), row_ids).astype(str)
    else:
        canonical["id"] = row_ids
    canonical["name"] = df[col_name].fillna("").astype(str).str.strip()
    canonical["genre"] = df[col_genre].apply(lambda v: _parse_label(v, Genre))
    canonical["category"] = df[col_category].apply(lambda v: _parse_label(v, Category))

    if col_ingredients:
        canonical["ingredients"] = df[col_ingredients].apply(
            lambda v: INGREDIENT_SEPARATOR.join(_parse_ingredients(v))
        )
    else:
        canonical["ingredients"] = ""

    canonical["steps"] = df[col_steps].fillna("").astype(str) if col_steps else ""
    canonical["created_at"] = (
        df[col_created_at].apply(_normalize_timestamp) if col_created_at else ""
    )

    valid = canonical["genre"].notna() & canonical["category"].notna() & (canonical["name"] != "")
    dropped = int((~valid).sum())
    if dropped:
        logger.warning("Dropping %d rows with unknown genre/category or no name", dropped)

    canonical = canonical.loc[valid, CATALOG_COLUMNS]

    output_path = config.processed_path
    canonical.to_csv(output_path, index=False)
    logger.info("Wrote %d recipes to %s", len(canonical), output_path)
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Catalog saved to: {path}")
