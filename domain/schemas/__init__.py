"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.subscription_schemas import (
    SubscriptionResponse,
    UpdateSubscriptionRequest,
    UpdatePaymentStatusRequest,
    TransactionResponse,
    SubscriptionPlanResponse,
    SubscriptionPlanWithUsersResponse,
    PlanSubscriber,
    UpdateSubscriptionPlanRequest,
)
from domain.schemas.food_ingredient_schemas import (
    FoodIngredientBase,
    FoodIngredientUpdate,
    FoodIngredientResponse,
)

__all__ = [
    # Subscription schemas
    "SubscriptionResponse",
    "UpdateSubscriptionRequest",
    "UpdatePaymentStatusRequest",
    "TransactionResponse",
    # Plan schemas
    "SubscriptionPlanResponse",
    "SubscriptionPlanWithUsersResponse",
    "PlanSubscriber",
    "UpdateSubscriptionPlanRequest",
    # Nutrition schemas
    "FoodIngredientBase",
    "FoodIngredientUpdate",
    "FoodIngredientResponse",
]
