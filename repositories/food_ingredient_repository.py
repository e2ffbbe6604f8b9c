"""
Food Ingredient Repository - Data access layer for the nutrition reference table
"""

from typing import List, Optional, Dict, Any
from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import FoodIngredient
from repositories.base import BaseRepository


class FoodIngredientRepository(BaseRepository[FoodIngredient]):
    """Repository for food composition records"""

    def __init__(self, db: Session):
        super().__init__(db, FoodIngredient)

    def get_by_code(self, code: str) -> Optional[FoodIngredient]:
        """Get record by dataset code (case-insensitive)"""
        normalized = code.strip().lower()
        return (
            self.db.query(FoodIngredient)
            .filter(func.lower(FoodIngredient.code) == normalized)
            .first()
        )

    def list_all(self) -> List[FoodIngredient]:
        return self.db.query(FoodIngredient).order_by(FoodIngredient.id).all()

    def get_by_preparation_state(self, state: str) -> List[FoodIngredient]:
        normalized = state.strip().lower()
        return (
            self.db.query(FoodIngredient)
            .filter(func.lower(FoodIngredient.preparation_state) == normalized)
            .order_by(FoodIngredient.id)
            .all()
        )

    def get_by_food_group(self, group: str) -> List[FoodIngredient]:
        normalized = group.strip().lower()
        return (
            self.db.query(FoodIngredient)
            .filter(func.lower(FoodIngredient.food_group) == normalized)
            .order_by(FoodIngredient.id)
            .all()
        )

    def upsert_by_code(self, values: Dict[str, Any], commit: bool = True) -> FoodIngredient:
        """
        Insert a record, or overwrite the existing one with the same code.

        Used by the dataset loader; safe to run repeatedly.
        """
        record = self.get_by_code(values["code"])
        if record is None:
            record = FoodIngredient(**values)
            self.db.add(record)
        else:
            for field, value in values.items():
                setattr(record, field, value)
        if commit:
            self.db.commit()
            self.db.refresh(record)
        return record
