"""
Tests for the data loading scripts (food composition CSV and default plans).
"""

from pathlib import Path

from sqlalchemy.orm import Session

from test_fixtures import db_session
from domain.models import FoodIngredient, SubscriptionPlan
from domain.mappers import parse_features
from scripts.seed_food_ingredients import (
    DEFAULT_CSV,
    read_food_ingredient_csv,
    load_food_ingredients,
)
from scripts.init_db import DEFAULT_PLANS, seed_subscription_plans

HEADER = "code,name,energy_kcal,fiber_g,edible_portion_percent,preparation_state,food_group"


def _write_csv(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "foods.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_bundled_dataset():
    rows = read_food_ingredient_csv(DEFAULT_CSV)
    assert len(rows) == 7
    by_code = {r["code"]: r for r in rows}
    assert by_code["AR001"]["energy_kcal"] == 357
    assert by_code["AR001"]["preparation_state"] == "raw"
    # Empty optional cells become None
    assert by_code["BP001"]["fiber_g"] is None
    assert by_code["DR001"]["food_group"] == "Daging dan olahannya"


def test_read_csv_defaults_and_skips_invalid_rows(tmp_path: Path):
    path = _write_csv(
        tmp_path,
        HEADER,
        "FX001,Singkong,,1.5,,raw,Umbi",
        "FX002,,120,,,raw,Umbi",
        "FX003,Tape singkong,173,,80,fermented,Umbi",
    )

    rows = read_food_ingredient_csv(path)
    assert [r["code"] for r in rows] == ["FX001", "FX003"]
    # Empty required nutrients and portions fall back to model defaults
    assert rows[0]["energy_kcal"] == 0.0
    assert rows[0]["edible_portion_percent"] == 100.0
    assert rows[0]["fiber_g"] == 1.5
    assert rows[1]["edible_portion_percent"] == 80


def test_read_csv_ignores_unknown_columns(tmp_path: Path):
    path = _write_csv(
        tmp_path,
        HEADER + ",source",
        "FX001,Singkong,146,0.9,75,raw,Umbi,TKPI 2017",
    )

    rows = read_food_ingredient_csv(path)
    assert len(rows) == 1
    assert "source" not in rows[0]


def test_read_csv_keeps_leading_zero_codes(tmp_path: Path):
    path = _write_csv(tmp_path, HEADER, "00123,Sagu,355,,100,raw,Umbi")
    assert read_food_ingredient_csv(path)[0]["code"] == "00123"


def test_load_food_ingredients_is_idempotent(db_session: Session):
    first = load_food_ingredients(db_session, DEFAULT_CSV)
    assert first == {"created": 7, "updated": 0}

    second = load_food_ingredients(db_session, DEFAULT_CSV)
    assert second == {"created": 0, "updated": 7}
    assert db_session.query(FoodIngredient).count() == 7


def test_load_food_ingredients_updates_changed_values(db_session: Session, tmp_path: Path):
    load_food_ingredients(db_session, DEFAULT_CSV)
    path = _write_csv(tmp_path, HEADER, "AR001,Beras giling mentah,360,0.3,100,raw,Serealia")

    stats = load_food_ingredients(db_session, path)
    assert stats == {"created": 0, "updated": 1}
    rice = db_session.query(FoodIngredient).filter(FoodIngredient.code == "AR001").one()
    assert rice.energy_kcal == 360


def test_seed_subscription_plans(db_session: Session):
    assert seed_subscription_plans(db_session) == {"created": 3, "existing": 0}
    assert seed_subscription_plans(db_session) == {"created": 0, "existing": 3}

    plans = db_session.query(SubscriptionPlan).order_by(SubscriptionPlan.price).all()
    assert [p.name for p in plans] == [p["name"] for p in DEFAULT_PLANS]
    assert parse_features(plans[0].features) == DEFAULT_PLANS[0]["features"]
