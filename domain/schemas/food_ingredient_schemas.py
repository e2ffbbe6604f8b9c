from pydantic import BaseModel, Field
from typing import Optional


class FoodIngredientBase(BaseModel):
    """Nutrient composition per 100 g edible portion"""

    code: str = Field(..., min_length=1, description="Dataset code, e.g. 'AR001'")
    name: str = Field(..., min_length=1)
    water_g: float = 0.0
    energy_kcal: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbohydrate_g: float = 0.0
    fiber_g: Optional[float] = None
    ash_g: float = 0.0
    calcium_mg: Optional[float] = None
    phosphorus_mg: Optional[float] = None
    iron_mg: Optional[float] = None
    sodium_mg: Optional[float] = None
    potassium_mg: Optional[float] = None
    copper_mg: Optional[float] = None
    zinc_mg: Optional[float] = None
    retinol_mcg: Optional[float] = None
    beta_carotene_mcg: Optional[float] = None
    total_carotene_mcg: Optional[float] = None
    thiamin_mg: Optional[float] = None
    riboflavin_mg: Optional[float] = None
    niacin_mg: Optional[float] = None
    vitamin_c_mg: Optional[float] = None
    edible_portion_percent: float = Field(100.0, ge=0, le=100)
    preparation_state: str = Field(..., min_length=1, description="raw or processed")
    food_group: str = Field(..., min_length=1)


class FoodIngredientUpdate(FoodIngredientBase):
    """Full replacement of a record; the id comes from the path"""


class FoodIngredientResponse(FoodIngredientBase):
    id: int

    model_config = {"from_attributes": True}
