"""Services package - Business logic layer"""

from services.subscription_service import SubscriptionService
from services.food_ingredient_service import FoodIngredientService

__all__ = [
    "SubscriptionService",
    "FoodIngredientService",
]
