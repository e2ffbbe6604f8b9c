"""
Tests for the admin subscription plan endpoints.

This test suite covers:
- Plan listing with subscriber counts, optionally with subscribers
- Plan details with decoded feature flags and formatted prices
- Malformed feature flags reported as server errors
- Partial plan updates and name conflicts
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import (
    client,
    db_session,
    create_user,
    create_plan,
    create_subscription,
)

BASE = "/admin/subscription-plans"


# =============================================================================
# LISTING
# =============================================================================


def test_list_plans_ordered_by_price_with_counts(db_session: Session):
    free = create_plan(db_session, "free", name="Free")
    yearly = create_plan(db_session, "yearly", name="Premium Yearly")
    monthly = create_plan(db_session, "monthly", name="Premium Monthly")

    siti = create_user(db_session, "default")
    budi = create_user(db_session, "athlete")
    create_subscription(db_session, user=siti, plan=monthly)
    create_subscription(db_session, user=budi, plan=monthly)
    create_subscription(db_session, user=siti, plan=yearly)

    r = client.get(BASE)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "All subscription plans retrieved successfully"
    plans = body["data"]
    assert [p["name"] for p in plans] == ["Free", "Premium Monthly", "Premium Yearly"]
    assert [p["user_count"] for p in plans] == [0, 2, 1]
    # Subscribers are only listed on request
    assert all(p["users"] == [] for p in plans)
    assert plans[0]["id"] == str(free.id)
    assert plans[1]["price_formatted"] == "Rp 49000"


def test_list_plans_with_users(db_session: Session):
    plan = create_plan(db_session, "monthly", name="Premium Monthly")
    user = create_user(db_session, "athlete")
    sub = create_subscription(db_session, user=user, plan=plan)

    r = client.get(BASE, params={"with_users": "true"})
    assert r.status_code == 200
    users = r.json()["data"][0]["users"]
    assert len(users) == 1
    assert users[0]["user_id"] == str(user.user_id)
    assert users[0]["full_name"] == "Budi Santoso"
    assert users[0]["email"] == user.email
    assert users[0]["subscription_id"] == str(sub.id)
    assert users[0]["status"] == "active"


def test_user_count_counts_distinct_users(db_session: Session):
    plan = create_plan(db_session)
    user = create_user(db_session)
    create_subscription(db_session, user=user, plan=plan)
    create_subscription(db_session, user=user, plan=plan)

    data = client.get(BASE, params={"with_users": True}).json()["data"][0]
    assert data["user_count"] == 1
    assert len(data["users"]) == 2


def test_list_plans_empty(db_session: Session):
    r = client.get(BASE)
    assert r.status_code == 200
    assert r.json()["data"] == []


# =============================================================================
# DETAILS
# =============================================================================


def test_get_plan_details(db_session: Session):
    plan = create_plan(
        db_session,
        "monthly",
        name="Premium Monthly",
        features={"ai_scan": True, "meal_plan": True, "export_report": False},
    )

    r = client.get(f"{BASE}/{plan.id}")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Subscription plan details retrieved successfully"
    data = body["data"]
    assert data["name"] == "Premium Monthly"
    assert data["price"] == 49000
    assert data["price_formatted"] == "Rp 49000"
    assert data["ai_scan_limit"] == 100
    assert data["validity_days"] == 30
    assert data["is_active"] is True
    assert data["features"] == {"ai_scan": True, "meal_plan": True, "export_report": False}


def test_get_free_plan_formats_zero_price(db_session: Session):
    plan = create_plan(db_session, "free", features="")

    data = client.get(f"{BASE}/{plan.id}").json()["data"]
    assert data["price_formatted"] == "Rp 0"
    assert data["features"] == {}


@pytest.mark.parametrize(
    "raw", ["{not json", "[1, 2]", '{"ai_scan": "no"}', '{"meal_plan": 0}']
)
def test_get_plan_with_malformed_features(db_session: Session, raw):
    plan = create_plan(db_session, features=raw)

    r = client.get(f"{BASE}/{plan.id}")
    assert r.status_code == 500
    body = r.json()
    assert body["status"] == "error"
    assert body["code"] == 500
    assert body["message"] == "Error parsing plan features"


def test_get_plan_with_null_features(db_session: Session):
    plan = create_plan(db_session, features="null")

    r = client.get(f"{BASE}/{plan.id}")
    assert r.status_code == 200
    assert r.json()["data"]["features"] == {}


def test_list_plans_with_malformed_features(db_session: Session):
    create_plan(db_session, features="{not json")

    r = client.get(BASE)
    assert r.status_code == 500
    assert r.json()["message"] == "Error parsing plan features"


def test_get_plan_not_found(db_session: Session):
    r = client.get(f"{BASE}/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["message"] == "Subscription plan not found"


def test_get_plan_invalid_id():
    r = client.get(f"{BASE}/premium")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid plan ID format"


@pytest.mark.parametrize("body", [{"price": 1000}, {"price": -1}, {}])
def test_update_plan_invalid_id_reported_before_body(body):
    r = client.patch(f"{BASE}/premium", json=body)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid plan ID format"


# =============================================================================
# UPDATE
# =============================================================================


def test_update_plan_partial(db_session: Session):
    plan = create_plan(db_session, "monthly", name="Premium Monthly")

    r = client.patch(
        f"{BASE}/{plan.id}",
        json={"price": 59000, "features": {"ai_scan": True, "coach_chat": True}},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Subscription plan updated successfully"
    data = body["data"]
    assert data["price"] == 59000
    assert data["price_formatted"] == "Rp 59000"
    assert data["features"] == {"ai_scan": True, "coach_chat": True}
    # Untouched fields keep their values
    assert data["name"] == "Premium Monthly"
    assert data["validity_days"] == 30


def test_update_plan_deactivate_and_rename(db_session: Session):
    plan = create_plan(db_session, name="Premium Monthly")

    r = client.patch(f"{BASE}/{plan.id}", json={"name": "Premium Lite", "is_active": False})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["name"] == "Premium Lite"
    assert data["is_active"] is False


def test_update_plan_keeping_own_name(db_session: Session):
    plan = create_plan(db_session, name="Premium Monthly")

    r = client.patch(f"{BASE}/{plan.id}", json={"name": "Premium Monthly", "price": 45000})
    assert r.status_code == 200


def test_update_plan_name_conflict(db_session: Session):
    create_plan(db_session, "free", name="Free")
    plan = create_plan(db_session, name="Premium Monthly")

    r = client.patch(f"{BASE}/{plan.id}", json={"name": "Free"})
    assert r.status_code == 409
    assert r.json()["message"] == "Subscription plan 'Free' already exists"


def test_update_plan_empty_body(db_session: Session):
    plan = create_plan(db_session)

    r = client.patch(f"{BASE}/{plan.id}", json={})
    assert r.status_code == 400
    assert r.json()["message"] == "No fields to update"


def test_update_plan_null_price(db_session: Session):
    plan = create_plan(db_session)

    r = client.patch(f"{BASE}/{plan.id}", json={"price": None})
    assert r.status_code == 400
    assert r.json()["message"] == "Fields cannot be null: price"


@pytest.mark.parametrize(
    "body", [{"price": -1}, {"validity_days": 0}, {"name": ""}, {"features": ["ai_scan"]}]
)
def test_update_plan_invalid_body(db_session: Session, body):
    plan = create_plan(db_session)

    r = client.patch(f"{BASE}/{plan.id}", json=body)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request body"


def test_update_plan_not_found(db_session: Session):
    r = client.patch(f"{BASE}/{uuid.uuid4()}", json={"price": 1000})
    assert r.status_code == 404
