"""
Subscription Repository - Data access layer for user subscriptions,
subscription plans and payment transactions
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.models import SubscriptionPlan, UserSubscription, Transaction
from domain.enums import SubscriptionStatus


class SubscriptionRepository(BaseRepository[UserSubscription]):
    """Repository for user subscription data access"""

    def __init__(self, db: Session):
        super().__init__(db, UserSubscription)

    def _query(self):
        return self.db.query(UserSubscription).options(
            joinedload(UserSubscription.user), joinedload(UserSubscription.plan)
        )

    def get_by_id(self, subscription_id: UUID) -> Optional[UserSubscription]:
        """Get subscription by ID with user and plan loaded"""
        return self._query().filter(UserSubscription.id == subscription_id).first()

    def list_paginated(
        self, page: int, limit: int, status: Optional[SubscriptionStatus] = None
    ) -> Tuple[List[UserSubscription], int]:
        """List subscriptions, newest first, optionally filtered by status"""
        query = self._query()
        if status is not None:
            query = query.filter(UserSubscription.status == status)
        query = query.order_by(
            UserSubscription.created_at.desc(), UserSubscription.id
        )
        return self.paginate(query, page, limit)


class SubscriptionPlanRepository(BaseRepository[SubscriptionPlan]):
    """Repository for subscription plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, SubscriptionPlan)

    def get_by_name(self, name: str) -> Optional[SubscriptionPlan]:
        return (
            self.db.query(SubscriptionPlan)
            .filter(SubscriptionPlan.name == name)
            .first()
        )

    def get_all_with_subscriptions(self) -> List[SubscriptionPlan]:
        """All plans ordered by price, with subscriptions and their users eager-loaded"""
        return (
            self.db.query(SubscriptionPlan)
            .options(
                selectinload(SubscriptionPlan.subscriptions).joinedload(
                    UserSubscription.user
                )
            )
            .order_by(SubscriptionPlan.price, SubscriptionPlan.name)
            .all()
        )


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for payment transaction data access"""

    def __init__(self, db: Session):
        super().__init__(db, Transaction)

    def _query(self):
        return self.db.query(Transaction).options(
            joinedload(Transaction.user),
            joinedload(Transaction.subscription).joinedload(UserSubscription.plan),
        )

    def get_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Get transaction by ID"""
        return self._query().filter(Transaction.id == transaction_id).first()

    def get_by_subscription_id(self, subscription_id: UUID) -> List[Transaction]:
        """All transactions of a subscription, newest first"""
        return (
            self._query()
            .filter(Transaction.subscription_id == subscription_id)
            .order_by(Transaction.created_at.desc(), Transaction.id)
            .all()
        )

    def list_paginated(self, page: int, limit: int) -> Tuple[List[Transaction], int]:
        query = self._query().order_by(Transaction.created_at.desc(), Transaction.id)
        return self.paginate(query, page, limit)
