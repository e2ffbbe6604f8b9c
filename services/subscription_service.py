"""Subscription service - admin management of subscriptions, plans and transactions."""

from typing import List, Optional, Tuple
from datetime import datetime, timedelta, timezone
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from domain.models import SubscriptionPlan, UserSubscription, Transaction
from domain.enums import SubscriptionStatus, PaymentStatus
from domain.mappers import SubscriptionMapper, dump_features
from domain.schemas.subscription_schemas import (
    UpdateSubscriptionRequest,
    UpdateSubscriptionPlanRequest,
    SubscriptionPlanWithUsersResponse,
)
from repositories import (
    SubscriptionRepository,
    SubscriptionPlanRepository,
    TransactionRepository,
)
from app.exceptions import NotFoundError, ServiceValidationError, ConflictError

logger = logging.getLogger("nutriscan.subscription")

# Columns that may be omitted from a PATCH body but never set to null
_NON_NULLABLE_SUBSCRIPTION_FIELDS = {"plan_id", "status", "payment_status", "is_auto_renew"}
_NON_NULLABLE_PLAN_FIELDS = {
    "name",
    "price",
    "ai_scan_limit",
    "validity_days",
    "features",
    "is_active",
}


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (as returned by SQLite) as UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _reject_nulls(fields: dict, non_nullable: set) -> None:
    nulls = sorted(k for k in non_nullable if k in fields and fields[k] is None)
    if nulls:
        raise ServiceValidationError(
            "Fields cannot be null: " + ", ".join(nulls), details={"fields": nulls}
        )


class SubscriptionService:
    """Business logic for subscription administration."""

    # ------------------------------------------------------------------
    # User subscriptions
    # ------------------------------------------------------------------

    @staticmethod
    def get_all_user_subscriptions(
        db: Session,
        page: int = 1,
        limit: int = 10,
        status: Optional[SubscriptionStatus] = None,
    ) -> Tuple[List[UserSubscription], int]:
        """
        Page through all user subscriptions, newest first.

        Returns:
            (subscriptions on the page, total matching subscriptions)
        """
        if page < 1 or limit < 1:
            raise ServiceValidationError("page and limit must be positive integers")
        return SubscriptionRepository(db).list_paginated(page, limit, status)

    @staticmethod
    def get_user_subscription_by_id(db: Session, subscription_id: UUID) -> UserSubscription:
        subscription = SubscriptionRepository(db).get_by_id(subscription_id)
        if not subscription:
            raise NotFoundError("Subscription not found")
        return subscription

    @staticmethod
    def update_user_subscription(
        db: Session, subscription_id: UUID, update: UpdateSubscriptionRequest
    ) -> UserSubscription:
        """
        Apply a partial update to a subscription.

        Moving to another plan without an explicit end_date recomputes the
        validity window from the new plan's validity_days.

        Raises:
            NotFoundError: if the subscription or the target plan does not exist
            ServiceValidationError: empty update, null for a required field,
                or end_date before start_date
        """
        repo = SubscriptionRepository(db)
        subscription = repo.get_by_id(subscription_id)
        if not subscription:
            raise NotFoundError("Subscription not found")

        fields = update.model_dump(exclude_unset=True)
        if not fields:
            raise ServiceValidationError("No fields to update")
        _reject_nulls(fields, _NON_NULLABLE_SUBSCRIPTION_FIELDS)

        if "plan_id" in fields and fields["plan_id"] != subscription.plan_id:
            plan = SubscriptionPlanRepository(db).get_by_id(fields["plan_id"])
            if not plan:
                raise NotFoundError("Subscription plan not found")
            if "end_date" not in fields:
                start = (
                    fields.get("start_date")
                    or subscription.start_date
                    or datetime.now(timezone.utc)
                )
                fields["start_date"] = start
                fields["end_date"] = _as_utc(start) + timedelta(days=plan.validity_days)

        start = _as_utc(fields.get("start_date", subscription.start_date))
        end = _as_utc(fields.get("end_date", subscription.end_date))
        if start and end and end < start:
            raise ServiceValidationError("end_date must not be before start_date")

        for field, value in fields.items():
            setattr(subscription, field, value)
        repo.update(subscription)

        logger.info(
            "Updated subscription %s fields=%s", subscription_id, sorted(fields)
        )
        return repo.get_by_id(subscription_id)

    @staticmethod
    def delete_user_subscription(db: Session, subscription_id: UUID) -> None:
        """Delete a subscription together with its transaction logs."""
        repo = SubscriptionRepository(db)
        subscription = repo.get_by_id(subscription_id)
        if not subscription:
            raise NotFoundError("Subscription not found")
        repo.delete(subscription)
        logger.info("Deleted subscription %s", subscription_id)

    @staticmethod
    def update_payment_status(
        db: Session, subscription_id: UUID, status: PaymentStatus
    ) -> UserSubscription:
        """Change only the payment status of a subscription."""
        repo = SubscriptionRepository(db)
        subscription = repo.get_by_id(subscription_id)
        if not subscription:
            raise NotFoundError("Subscription not found")
        previous = subscription.payment_status
        subscription.payment_status = status
        repo.update(subscription)
        logger.info(
            "Payment status of subscription %s changed %s -> %s",
            subscription_id,
            getattr(previous, "value", previous),
            status.value,
        )
        return subscription

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @staticmethod
    def get_transactions_by_subscription_id(
        db: Session, subscription_id: UUID
    ) -> List[Transaction]:
        if not SubscriptionRepository(db).exists(subscription_id):
            raise NotFoundError("Subscription not found")
        return TransactionRepository(db).get_by_subscription_id(subscription_id)

    @staticmethod
    def get_all_transactions(
        db: Session, page: int = 1, limit: int = 10
    ) -> Tuple[List[Transaction], int]:
        if page < 1 or limit < 1:
            raise ServiceValidationError("page and limit must be positive integers")
        return TransactionRepository(db).list_paginated(page, limit)

    @staticmethod
    def get_transaction_by_id(db: Session, transaction_id: UUID) -> Transaction:
        transaction = TransactionRepository(db).get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction not found")
        return transaction

    # ------------------------------------------------------------------
    # Subscription plans
    # ------------------------------------------------------------------

    @staticmethod
    def get_all_subscription_plans_with_users(
        db: Session, with_users: bool = False
    ) -> List[SubscriptionPlanWithUsersResponse]:
        plans = SubscriptionPlanRepository(db).get_all_with_subscriptions()
        return [
            SubscriptionMapper.plan_with_users_to_response(p, with_users) for p in plans
        ]

    @staticmethod
    def get_subscription_plan_by_id(db: Session, plan_id: UUID) -> SubscriptionPlan:
        plan = SubscriptionPlanRepository(db).get_by_id(plan_id)
        if not plan:
            raise NotFoundError("Subscription plan not found")
        return plan

    @staticmethod
    def update_subscription_plan(
        db: Session, plan_id: UUID, update: UpdateSubscriptionPlanRequest
    ) -> SubscriptionPlan:
        """
        Apply a partial update to a plan. Feature flags are stored as a JSON object.

        Raises:
            NotFoundError: if the plan does not exist
            ConflictError: if another plan already uses the requested name
            ServiceValidationError: empty update or null for a required field
        """
        repo = SubscriptionPlanRepository(db)
        plan = repo.get_by_id(plan_id)
        if not plan:
            raise NotFoundError("Subscription plan not found")

        fields = update.model_dump(exclude_unset=True)
        if not fields:
            raise ServiceValidationError("No fields to update")
        _reject_nulls(fields, _NON_NULLABLE_PLAN_FIELDS)

        if "name" in fields:
            other = repo.get_by_name(fields["name"])
            if other and other.id != plan.id:
                raise ConflictError(f"Subscription plan '{fields['name']}' already exists")
        if "features" in fields:
            fields["features"] = dump_features(fields["features"])

        for field, value in fields.items():
            setattr(plan, field, value)
        try:
            repo.update(plan)
        except IntegrityError as e:
            db.rollback()
            raise ConflictError("Subscription plan update violates a constraint", details={"error": str(e.orig)})

        logger.info("Updated subscription plan %s fields=%s", plan_id, sorted(fields))
        return plan
