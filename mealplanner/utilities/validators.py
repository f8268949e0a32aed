"""
Input validation schemas using Pydantic for better data integrity.
"""
from datetime import date as _date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from mealplanner.domain.Meal import Meal


class MealInput(BaseModel):
    """Schema for meal create/edit input."""
    description: str = Field(..., max_length=200)
    primary_protein: str = Field(default="", max_length=100)
    primary_carb: str = Field(default="", max_length=100)
    other_components: List[str] = Field(default_factory=list)

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        """Validate meal description."""
        if not v.strip():
            raise ValueError('Please enter a meal description to continue.')
        return v.strip()

    @field_validator('primary_protein', 'primary_carb')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @field_validator('other_components')
    @classmethod
    def validate_components(cls, v):
        """Drop blank components, keep order."""
        return [c.strip() for c in v if c and c.strip()]

    def to_meal(self, existing: Optional[Meal] = None) -> Meal:
        if existing is not None:
            return existing.replace(self.description, self.primary_protein, self.primary_carb, self.other_components)
        return Meal(self.description, self.primary_protein, self.primary_carb, self.other_components)


class AssignmentInput(BaseModel):
    """Schema for assigning a meal to a day."""
    meal_id: UUID
    date: _date
