#!/usr/bin/env python3
"""
Load the food composition table from CSV into the food_ingredient table.

Rows are upserted by code, so the script is safe to run multiple times.

Usage:
    python scripts/seed_food_ingredients.py [--csv data/food_ingredients_sample.csv]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Any

import pandas as pd
from sqlalchemy.orm import Session
from tqdm import tqdm

# Add parent directory to path to import from project
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.schemas.food_ingredient_schemas import FoodIngredientBase
from repositories import FoodIngredientRepository

logger = logging.getLogger("nutriscan.seed.food_ingredients")

DEFAULT_CSV = Path(__file__).parent.parent / "data" / "food_ingredients_sample.csv"

TEXT_COLUMNS = ("code", "name", "preparation_state", "food_group")


def read_food_ingredient_csv(path: Path, progress: bool = False) -> List[Dict[str, Any]]:
    """
    Read and validate dataset rows.

    Empty cells become None for optional nutrients; required nutrients fall
    back to the model defaults. Rows failing validation are skipped and logged.
    """
    df = pd.read_csv(path, dtype={c: str for c in TEXT_COLUMNS})
    known = set(FoodIngredientBase.model_fields)
    unknown = [c for c in df.columns if c not in known]
    if unknown:
        logger.warning("Ignoring unknown columns: %s", ", ".join(unknown))
        df = df.drop(columns=unknown)

    rows = []
    for index, row in tqdm(df.iterrows(), total=len(df), disable=not progress):
        # numpy scalars -> python values, NaN -> None
        raw = {
            k: (None if pd.isna(v) else (v.item() if hasattr(v, "item") else v))
            for k, v in row.items()
        }
        raw = {k: v for k, v in raw.items() if v is not None or not _has_fallback(k)}
        try:
            rows.append(FoodIngredientBase(**raw).model_dump())
        except ValueError as e:
            logger.warning("Skipping row %d: %s", index + 2, e)
    return rows


def _has_fallback(field: str) -> bool:
    """Fields that must not be passed as None (required, or with a non-null default)"""
    info = FoodIngredientBase.model_fields[field]
    return info.is_required() or info.default is not None


def load_food_ingredients(
    db: Session, path: Path = DEFAULT_CSV, progress: bool = False
) -> Dict[str, int]:
    """Upsert every valid CSV row; returns counts of created and updated records"""
    repo = FoodIngredientRepository(db)
    stats = {"created": 0, "updated": 0}
    for values in read_food_ingredient_csv(path, progress):
        if repo.get_by_code(values["code"]):
            stats["updated"] += 1
        else:
            stats["created"] += 1
        repo.upsert_by_code(values, commit=False)
        db.flush()
    db.commit()
    logger.info("Food ingredient load complete: %s", stats)
    return stats


def main(argv=None) -> int:
    from domain.models import SessionLocal, init_database

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--csv", type=Path, default=DEFAULT_CSV, help="CSV file to load")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    init_database()
    with SessionLocal() as db:
        load_food_ingredients(db, args.csv, progress=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
