"""
Tests for the admin payment transaction log endpoints.
"""

import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from test_fixtures import (
    client,
    db_session,
    create_user,
    create_plan,
    create_subscription,
    create_transaction,
)
from domain.enums import TransactionStatus

BASE = "/admin/transactions"


def test_list_transactions_uses_data_key(db_session: Session):
    sub = create_subscription(db_session)
    for day in range(1, 4):
        create_transaction(db_session, sub, created_at=datetime(2026, 3, day))

    r = client.get(BASE, params={"page": 1, "limit": 2})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    assert body["message"] == "All transaction logs retrieved successfully"
    assert "results" not in body
    assert len(body["data"]) == 2
    assert body["totalResults"] == 3
    assert body["totalPages"] == 2
    assert body["data"][0]["created_at"].startswith("2026-03-03")


def test_list_transactions_second_page(db_session: Session):
    sub = create_subscription(db_session)
    for day in range(1, 4):
        create_transaction(db_session, sub, created_at=datetime(2026, 3, day))

    body = client.get(BASE, params={"page": 2, "limit": 2}).json()
    assert len(body["data"]) == 1
    assert body["data"][0]["created_at"].startswith("2026-03-01")


def test_list_transactions_empty(db_session: Session):
    body = client.get(BASE).json()
    assert body["data"] == []
    assert body["totalResults"] == 0
    assert body["totalPages"] == 1


def test_get_transaction_details(db_session: Session):
    user = create_user(db_session, "casual")
    plan = create_plan(db_session, "yearly", name="Premium Yearly")
    sub = create_subscription(db_session, user=user, plan=plan, payment_method="e_wallet")
    txn = create_transaction(db_session, sub, status=TransactionStatus.FAILED)

    r = client.get(f"{BASE}/{txn.id}")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Transaction details retrieved successfully"
    data = body["data"]
    assert data["id"] == str(txn.id)
    assert data["subscription_id"] == str(sub.id)
    assert data["user_id"] == str(user.user_id)
    assert data["user_name"] == "Dewi Lestari"
    assert data["plan_name"] == "Premium Yearly"
    assert data["amount"] == 499000
    assert data["amount_formatted"] == "Rp 499000"
    assert data["payment_method"] == "e_wallet"
    assert data["status"] == "failed"
    assert data["reference"].startswith("INV-")


def test_get_transaction_not_found(db_session: Session):
    r = client.get(f"{BASE}/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["message"] == "Transaction not found"


def test_get_transaction_invalid_id():
    r = client.get(f"{BASE}/txn-42")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid transaction ID format"
