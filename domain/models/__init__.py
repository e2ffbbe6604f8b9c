"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.subscription import SubscriptionPlan, UserSubscription, Transaction
from domain.models.food_ingredient import FoodIngredient

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # Subscription models
    "SubscriptionPlan",
    "UserSubscription",
    "Transaction",
    # Nutrition reference data
    "FoodIngredient",
]
