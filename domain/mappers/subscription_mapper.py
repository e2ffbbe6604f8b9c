"""
Subscription domain mappers.
Handles transformation between ORM models and DTOs for subscriptions, plans
and payment transactions.
"""

import json
from typing import Dict, Optional

from app.config import settings
from app.exceptions import DataIntegrityError
from domain.models import SubscriptionPlan, UserSubscription, Transaction
from domain.schemas.subscription_schemas import (
    SubscriptionResponse,
    TransactionResponse,
    SubscriptionPlanResponse,
    SubscriptionPlanWithUsersResponse,
    PlanSubscriber,
)


def format_currency(amount: int) -> str:
    """Format a whole-rupiah amount, e.g. 49000 -> 'Rp 49000'"""
    return f"{settings.currency_symbol} {amount}"


def parse_features(raw: Optional[str]) -> Dict[str, bool]:
    """
    Decode the JSON feature flags stored on a plan.

    Raises:
        DataIntegrityError: if the stored value is not a JSON object of booleans
    """
    if not raw:
        return {}
    try:
        features = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DataIntegrityError(
            "Error parsing plan features", details={"error": str(e)}
        )
    if features is None:
        return {}
    if not isinstance(features, dict):
        raise DataIntegrityError("Error parsing plan features")
    bad = sorted(k for k, v in features.items() if not isinstance(v, bool))
    if bad:
        raise DataIntegrityError(
            "Error parsing plan features", details={"non_boolean": bad}
        )
    return dict(features)


def dump_features(features: Dict[str, bool]) -> str:
    return json.dumps(features, sort_keys=True)


class SubscriptionMapper:
    """Mapper for subscription-related transformations."""

    @staticmethod
    def to_response(subscription: UserSubscription) -> SubscriptionResponse:
        """
        Convert UserSubscription ORM model to SubscriptionResponse DTO.

        Args:
            subscription: UserSubscription ORM instance; user and plan are read
                through their relationships when loaded

        Returns:
            SubscriptionResponse DTO
        """
        user = subscription.user
        plan = subscription.plan
        return SubscriptionResponse(
            id=subscription.id,
            user_id=subscription.user_id,
            user_name=user.full_name if user else None,
            user_email=user.email if user else None,
            plan_id=subscription.plan_id,
            plan_name=plan.name if plan else None,
            plan_price=plan.price if plan else None,
            ai_scan_limit=plan.ai_scan_limit if plan else None,
            status=subscription.status,
            payment_status=subscription.payment_status,
            payment_method=subscription.payment_method,
            start_date=subscription.start_date,
            end_date=subscription.end_date,
            ai_scan_used=subscription.ai_scan_used or 0,
            is_auto_renew=bool(subscription.is_auto_renew),
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
        )

    @staticmethod
    def transaction_to_response(transaction: Transaction) -> TransactionResponse:
        subscription = transaction.subscription
        user = transaction.user
        plan = subscription.plan if subscription else None
        return TransactionResponse(
            id=transaction.id,
            subscription_id=transaction.subscription_id,
            user_id=transaction.user_id,
            user_name=user.full_name if user else None,
            plan_name=plan.name if plan else None,
            amount=transaction.amount,
            amount_formatted=format_currency(transaction.amount),
            payment_method=transaction.payment_method,
            status=transaction.status,
            reference=transaction.reference,
            created_at=transaction.created_at,
        )

    @staticmethod
    def plan_to_response(plan: SubscriptionPlan) -> SubscriptionPlanResponse:
        return SubscriptionPlanResponse(
            id=plan.id,
            name=plan.name,
            price=plan.price,
            price_formatted=format_currency(plan.price),
            description=plan.description,
            ai_scan_limit=plan.ai_scan_limit,
            validity_days=plan.validity_days,
            features=parse_features(plan.features),
            is_active=bool(plan.is_active),
        )

    @staticmethod
    def plan_with_users_to_response(
        plan: SubscriptionPlan, with_users: bool = False
    ) -> SubscriptionPlanWithUsersResponse:
        """
        Convert a plan and its subscriptions to the admin listing DTO.

        user_count is always filled; the subscriber list only when with_users is set.
        """
        base = SubscriptionMapper.plan_to_response(plan)
        subscriptions = list(plan.subscriptions or [])
        users = []
        if with_users:
            users = [
                PlanSubscriber(
                    user_id=s.user_id,
                    full_name=s.user.full_name if s.user else None,
                    email=s.user.email if s.user else "",
                    subscription_id=s.id,
                    status=s.status,
                    end_date=s.end_date,
                )
                for s in subscriptions
            ]
        return SubscriptionPlanWithUsersResponse(
            **base.model_dump(),
            users=users,
            user_count=len({s.user_id for s in subscriptions}),
        )
