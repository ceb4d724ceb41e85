"""
Input validation schemas using Pydantic for better data integrity.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from planner.domain.Recipe import Recipe, RecipeId


class TagsInput(BaseModel):
    """Schema for recipe tags; every tag may be left empty."""
    mealDay: Literal["Weekday", "Weekend", ""] = ""
    mealTime: Literal["Breakfast", "Lunch", "Dinner", ""] = ""
    cuisine: Literal["Chinese", "Japanese", "Thai", "Italian", "Mexican", "American", ""] = ""
    prepTime: Literal["5 min", "15 min", "30 min", ">30 min", ""] = ""


class RecipeInput(BaseModel):
    """Schema for recipe create/edit; only the title is required."""
    title: str = Field(..., min_length=1, max_length=200)
    ingredients: str = ""
    instructions: str = ""
    image: Optional[str] = None
    tags: TagsInput = Field(default_factory=TagsInput)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate recipe title."""
        if not v.strip():
            raise ValueError('Recipe title cannot be empty')
        return v.strip()

    @field_validator('image')
    @classmethod
    def validate_image(cls, v):
        """Only stored image paths are kept."""
        if v is not None and not v.startswith('/images/'):
            return None
        return v

    def to_recipe(self, recipe_id: Optional[RecipeId] = None) -> Recipe:
        return Recipe(
            id=recipe_id,
            title=self.title,
            ingredients=self.ingredients,
            instructions=self.instructions,
            image=self.image,
            tags=self.tags.model_dump(),
        )
