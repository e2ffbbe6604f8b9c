"""Food ingredient service - read and update access to the nutrition reference dataset."""

from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import FoodIngredient
from domain.schemas.food_ingredient_schemas import FoodIngredientUpdate
from repositories import FoodIngredientRepository
from app.exceptions import NotFoundError, ConflictError, ServiceValidationError

logger = logging.getLogger("nutriscan.food_ingredient")


class FoodIngredientService:
    """Business logic for the food composition table."""

    @staticmethod
    def get_all(db: Session) -> List[FoodIngredient]:
        return FoodIngredientRepository(db).list_all()

    @staticmethod
    def get_by_code(db: Session, code: str) -> FoodIngredient:
        if not code or not code.strip():
            raise ServiceValidationError("Food ingredient code is required")
        record = FoodIngredientRepository(db).get_by_code(code)
        if not record:
            raise NotFoundError(f"Food ingredient with code {code} not found")
        return record

    @staticmethod
    def get_by_id(db: Session, ingredient_id: int) -> FoodIngredient:
        record = FoodIngredientRepository(db).get_by_id(ingredient_id)
        if not record:
            raise NotFoundError(f"Food ingredient {ingredient_id} not found")
        return record

    @staticmethod
    def get_by_preparation_state(db: Session, state: str) -> List[FoodIngredient]:
        """Records that are raw or processed; empty list when nothing matches."""
        return FoodIngredientRepository(db).get_by_preparation_state(state)

    @staticmethod
    def get_by_food_group(db: Session, group: str) -> List[FoodIngredient]:
        return FoodIngredientRepository(db).get_by_food_group(group)

    @staticmethod
    def update(db: Session, ingredient_id: int, payload: FoodIngredientUpdate) -> FoodIngredient:
        """
        Replace every field of a record except its id.

        Raises:
            NotFoundError: if no record has this id
            ConflictError: if the new code belongs to another record
        """
        repo = FoodIngredientRepository(db)
        record = repo.get_by_id(ingredient_id)
        if not record:
            raise NotFoundError(f"Food ingredient {ingredient_id} not found")

        values = payload.model_dump()
        values["code"] = values["code"].strip()
        other = repo.get_by_code(values["code"])
        if other and other.id != record.id:
            raise ConflictError(f"Food ingredient code {values['code']} is already in use")

        for field, value in values.items():
            setattr(record, field, value)
        repo.update(record)
        logger.info("Updated food ingredient %s (%s)", record.id, record.code)
        return record
