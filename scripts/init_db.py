#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the schema and optionally seeds default subscription plans and the
food composition table.

Usage:
    python scripts/init_db.py [--seed] [--csv path/to/food_ingredients.csv]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

from sqlalchemy import inspect
from sqlalchemy.orm import Session

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.mappers import dump_features
from domain.models import SubscriptionPlan, SessionLocal, engine, init_database
from repositories import SubscriptionPlanRepository
from scripts.seed_food_ingredients import DEFAULT_CSV, load_food_ingredients

logger = logging.getLogger("nutriscan.init_db")

DEFAULT_PLANS = [
    {
        "name": "Free",
        "price": 0,
        "description": "Basic food logging with a handful of AI scans",
        "ai_scan_limit": 5,
        "validity_days": 30,
        "features": {"ai_scan": True, "meal_plan": False, "export_report": False},
    },
    {
        "name": "Premium Monthly",
        "price": 49000,
        "description": "Unlimited logging, meal plans and more AI scans",
        "ai_scan_limit": 100,
        "validity_days": 30,
        "features": {"ai_scan": True, "meal_plan": True, "export_report": True},
    },
    {
        "name": "Premium Yearly",
        "price": 499000,
        "description": "Premium Monthly billed once a year",
        "ai_scan_limit": 1500,
        "validity_days": 365,
        "features": {"ai_scan": True, "meal_plan": True, "export_report": True},
    },
]


def seed_subscription_plans(db: Session) -> Dict[str, int]:
    """Insert the default plans that do not exist yet (matched by name)"""
    repo = SubscriptionPlanRepository(db)
    stats = {"created": 0, "existing": 0}
    for plan in DEFAULT_PLANS:
        if repo.get_by_name(plan["name"]):
            stats["existing"] += 1
            continue
        values = dict(plan, features=dump_features(plan["features"]))
        repo.create(SubscriptionPlan(**values))
        stats["created"] += 1
    logger.info("Subscription plans seeded: %s", stats)
    return stats


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the NutriScan database")
    parser.add_argument("--seed", action="store_true", help="Seed plans and food data")
    parser.add_argument("--csv", type=Path, default=DEFAULT_CSV, help="Food composition CSV")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info("Created %d tables: %s", len(tables), ", ".join(tables))

        if args.seed:
            with SessionLocal() as db:
                seed_subscription_plans(db)
                load_food_ingredients(db, args.csv, progress=True)
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
