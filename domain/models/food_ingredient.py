"""
Food ingredient model - static nutrition reference dataset.
Values are per 100 g of edible portion.
"""

from sqlalchemy import Column, Integer, Text, Float

from domain.models.database import Base


class FoodIngredient(Base):
    """One record of the food composition table"""

    __tablename__ = "food_ingredient"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(Text, nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)

    # Proximates
    water_g = Column(Float, nullable=False, default=0)
    energy_kcal = Column(Float, nullable=False, default=0)
    protein_g = Column(Float, nullable=False, default=0)
    fat_g = Column(Float, nullable=False, default=0)
    carbohydrate_g = Column(Float, nullable=False, default=0)
    fiber_g = Column(Float)
    ash_g = Column(Float, nullable=False, default=0)

    # Minerals
    calcium_mg = Column(Float)
    phosphorus_mg = Column(Float)
    iron_mg = Column(Float)
    sodium_mg = Column(Float)
    potassium_mg = Column(Float)
    copper_mg = Column(Float)
    zinc_mg = Column(Float)

    # Vitamins
    retinol_mcg = Column(Float)
    beta_carotene_mcg = Column(Float)
    total_carotene_mcg = Column(Float)
    thiamin_mg = Column(Float)
    riboflavin_mg = Column(Float)
    niacin_mg = Column(Float)
    vitamin_c_mg = Column(Float)

    edible_portion_percent = Column(Float, nullable=False, default=100)
    preparation_state = Column(Text, nullable=False, index=True)
    food_group = Column(Text, nullable=False, index=True)

    def __repr__(self):
        return f"<FoodIngredient(id={self.id}, code='{self.code}')>"
