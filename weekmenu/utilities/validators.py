"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

from weekmenu.utilities.constants import DAYS_IN_WEEK

Category = Literal["produce", "protein", "dairy", "dry", "spice", "bakery", "frozen", "other"]


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., max_length=100)
    unit: str = Field(default="unit", max_length=20)
    quantity: float = Field(default=0, ge=0, le=100000)
    category: Category = "other"
    cost: float = Field(default=0, ge=0)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('unit')
    @classmethod
    def default_unit(cls, v):
        return v or "unit"


class RecipeInput(BaseModel):
    """Schema for recipe create/update validation."""
    id: Optional[str] = Field(default=None, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    ingredients: List[IngredientInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('description')
    @classmethod
    def blank_description(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def drop_blank_ingredients(cls, v):
        """Ingredient rows without a name are ignored."""
        return [ing for ing in v if ing.name]


class RulesInput(BaseModel):
    """Schema for generation rules updates."""
    servings: int = Field(..., ge=1, le=50)
    budget: float = Field(..., ge=0)
    variety: int = Field(..., ge=1, le=10)
    includeIds: List[str] = Field(default_factory=list)
    excludeIds: List[str] = Field(default_factory=list)
    sampleBias: float = Field(default=1.0, ge=0)
    maxPrepMinutes: int = Field(default=45, ge=0, le=600)


class SampleWeekInput(BaseModel):
    """Schema for sample week creation."""
    name: str = Field(..., min_length=1, max_length=100)
    recipeIds: List[str]

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Sample week name cannot be empty')
        return v.strip()

    @field_validator('recipeIds')
    @classmethod
    def validate_length(cls, v):
        if len(v) != DAYS_IN_WEEK:
            raise ValueError(f'Sample week must list exactly {DAYS_IN_WEEK} recipe ids')
        return v


class SampleFromMenuInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class DayAssignInput(BaseModel):
    recipeId: Optional[str] = None
