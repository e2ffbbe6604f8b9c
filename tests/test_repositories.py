"""
Tests for the repository layer against an in-memory database.
"""

import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from test_fixtures import (
    db_session,
    create_plan,
    create_subscription,
    create_transaction,
    create_food_ingredient,
    FOOD_ROWS,
)
from repositories import (
    SubscriptionRepository,
    SubscriptionPlanRepository,
    TransactionRepository,
    FoodIngredientRepository,
)
from domain.enums import SubscriptionStatus
from domain.models import FoodIngredient


# =============================================================================
# SUBSCRIPTION REPOSITORY
# =============================================================================


def test_subscription_paginate_and_filter(db_session: Session):
    plan = create_plan(db_session)
    for day in range(1, 6):
        status = SubscriptionStatus.EXPIRED if day % 2 else SubscriptionStatus.ACTIVE
        create_subscription(
            db_session, plan=plan, status=status, created_at=datetime(2026, 4, day)
        )
    repo = SubscriptionRepository(db_session)

    items, total = repo.list_paginated(page=1, limit=2)
    assert total == 5
    assert [s.created_at.day for s in items] == [5, 4]

    items, total = repo.list_paginated(page=3, limit=2)
    assert total == 5
    assert [s.created_at.day for s in items] == [1]

    items, total = repo.list_paginated(page=1, limit=10, status=SubscriptionStatus.ACTIVE)
    assert total == 2
    assert all(s.status == SubscriptionStatus.ACTIVE for s in items)


def test_subscription_page_past_the_end(db_session: Session):
    create_subscription(db_session)
    items, total = SubscriptionRepository(db_session).list_paginated(page=5, limit=10)
    assert items == []
    assert total == 1


def test_subscription_get_by_id_loads_relations(db_session: Session):
    sub = create_subscription(db_session)
    found = SubscriptionRepository(db_session).get_by_id(sub.id)
    assert found.user.full_name == "Siti Rahmawati"
    assert found.plan.price == 49000
    assert SubscriptionRepository(db_session).get_by_id(uuid.uuid4()) is None


# =============================================================================
# PLAN REPOSITORY
# =============================================================================


def test_plan_get_by_name(db_session: Session):
    plan = create_plan(db_session, name="Premium Monthly")
    repo = SubscriptionPlanRepository(db_session)
    assert repo.get_by_name("Premium Monthly").id == plan.id
    assert repo.get_by_name("premium monthly") is None


def test_plans_with_subscriptions_ordered_by_price(db_session: Session):
    yearly = create_plan(db_session, "yearly", name="Yearly")
    create_plan(db_session, "free", name="Free")
    create_subscription(db_session, plan=yearly)

    plans = SubscriptionPlanRepository(db_session).get_all_with_subscriptions()
    assert [p.name for p in plans] == ["Free", "Yearly"]
    assert len(plans[1].subscriptions) == 1
    assert plans[1].subscriptions[0].user is not None


# =============================================================================
# TRANSACTION REPOSITORY
# =============================================================================


def test_transactions_by_subscription(db_session: Session):
    sub = create_subscription(db_session)
    first = create_transaction(db_session, sub, created_at=datetime(2026, 1, 1))
    second = create_transaction(db_session, sub, created_at=datetime(2026, 1, 2))

    found = TransactionRepository(db_session).get_by_subscription_id(sub.id)
    assert [t.id for t in found] == [second.id, first.id]
    assert found[0].subscription.plan is not None


def test_transactions_paginated(db_session: Session):
    sub = create_subscription(db_session)
    for _ in range(3):
        create_transaction(db_session, sub)

    items, total = TransactionRepository(db_session).list_paginated(page=1, limit=2)
    assert total == 3
    assert len(items) == 2


# =============================================================================
# FOOD INGREDIENT REPOSITORY
# =============================================================================


def test_food_ingredient_lookups(db_session: Session):
    for key in FOOD_ROWS:
        create_food_ingredient(db_session, key)
    repo = FoodIngredientRepository(db_session)

    assert repo.get_by_code(" ap001 ").name == "Nasi putih"
    assert repo.get_by_code("XX000") is None
    assert [f.code for f in repo.get_by_preparation_state("Raw")] == ["AR001", "BR001"]
    assert [f.code for f in repo.get_by_food_group("SAYURAN")] == ["BR001"]
    assert len(repo.list_all()) == 3


def test_food_ingredient_upsert_by_code(db_session: Session):
    repo = FoodIngredientRepository(db_session)

    created = repo.upsert_by_code(dict(FOOD_ROWS["rice"]))
    assert created.id is not None

    updated = repo.upsert_by_code(dict(FOOD_ROWS["rice"], energy_kcal=360))
    assert updated.id == created.id
    assert updated.energy_kcal == 360
    assert db_session.query(FoodIngredient).count() == 1
