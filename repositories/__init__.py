"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.subscription_repository import (
    SubscriptionRepository,
    SubscriptionPlanRepository,
    TransactionRepository,
)
from repositories.food_ingredient_repository import FoodIngredientRepository

__all__ = [
    "BaseRepository",
    "SubscriptionRepository",
    "SubscriptionPlanRepository",
    "TransactionRepository",
    "FoodIngredientRepository",
]
