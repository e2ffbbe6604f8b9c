"""Nutrition reference dataset routes"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from api.responses import APIResponse, ErrorResponse, success_response
from domain.schemas.food_ingredient_schemas import (
    FoodIngredientResponse,
    FoodIngredientUpdate,
)
from services.food_ingredient_service import FoodIngredientService

router = APIRouter(
    prefix="/food-ingredients",
    tags=["Food Ingredients"],
    responses={404: {"model": ErrorResponse}},
)
logger = logging.getLogger("nutriscan.api.food_ingredients")


def _to_list(records) -> List[FoodIngredientResponse]:
    return [FoodIngredientResponse.model_validate(r) for r in records]


@router.get("", response_model=APIResponse[List[FoodIngredientResponse]])
def get_all_food_ingredients(db: Session = Depends(get_db)):
    """Return the whole food composition table"""
    records = FoodIngredientService.get_all(db)
    return success_response(_to_list(records), "Food ingredients retrieved successfully")


@router.get("/code/{code}", response_model=APIResponse[FoodIngredientResponse])
def get_food_ingredient_by_code(code: str, db: Session = Depends(get_db)):
    record = FoodIngredientService.get_by_code(db, code)
    return success_response(
        FoodIngredientResponse.model_validate(record),
        "Food ingredient retrieved successfully",
    )


@router.get(
    "/preparation/{state}", response_model=APIResponse[List[FoodIngredientResponse]]
)
def get_food_ingredients_by_preparation_state(state: str, db: Session = Depends(get_db)):
    """Records that are raw or processed"""
    records = FoodIngredientService.get_by_preparation_state(db, state)
    return success_response(_to_list(records), "Food ingredients retrieved successfully")


@router.get("/group/{group}", response_model=APIResponse[List[FoodIngredientResponse]])
def get_food_ingredients_by_group(group: str, db: Session = Depends(get_db)):
    records = FoodIngredientService.get_by_food_group(db, group)
    return success_response(_to_list(records), "Food ingredients retrieved successfully")


@router.get("/{ingredient_id}", response_model=APIResponse[FoodIngredientResponse])
def get_food_ingredient_by_id(
    ingredient_id: int = Path(..., ge=1), db: Session = Depends(get_db)
):
    record = FoodIngredientService.get_by_id(db, ingredient_id)
    return success_response(
        FoodIngredientResponse.model_validate(record),
        "Food ingredient retrieved successfully",
    )


@router.put("/{ingredient_id}", response_model=APIResponse[FoodIngredientResponse])
def update_food_ingredient(
    body: FoodIngredientUpdate,
    ingredient_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
):
    """Replace a record; the id in the path is kept"""
    record = FoodIngredientService.update(db, ingredient_id, body)
    logger.info("Food ingredient %s replaced (code=%s)", ingredient_id, record.code)
    return success_response(
        FoodIngredientResponse.model_validate(record),
        "Food ingredient updated successfully",
    )
