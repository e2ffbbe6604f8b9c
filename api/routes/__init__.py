"""API routes package"""

from . import subscriptions, transactions, subscription_plans, food_ingredients, health

__all__ = [
    "subscriptions",
    "transactions",
    "subscription_plans",
    "food_ingredients",
    "health",
]
