from typing import List, Optional
from pydantic import BaseModel, Field
from .base import BaseRecord


class Recipe(BaseRecord):
    """Canonical recipe record shared by provider results, the fallback catalog and saved recipes"""
    title: str = Field(..., description="Recipe title")
    image: str = Field("", description="Image URL or empty")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient lines in order")
    instructions: List[str] = Field(default_factory=list, description="Cooking steps in order")
    ready_in_minutes: int = Field(0, ge=0, description="Total time in minutes", alias="readyInMinutes")
    servings: int = Field(1, ge=1, description="Number of servings")
    calories: float = Field(0.0, ge=0, description="Calories as reported by the source")
    summary: str = Field("", description="Summary text, may contain raw markup")
    # Derived from favorites membership; never a source of truth
    is_saved: bool = Field(False, description="Whether the recipe is in the user's saved set", alias="isSaved")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "1",
                "title": "Asian Chicken Stir Fry",
                "image": "",
                "ingredients": ["1 lb boneless chicken breast, cut into strips", "2 cups broccoli florets"],
                "instructions": ["Heat vegetable oil in a large wok.", "Add chicken strips and cook until golden."],
                "readyInMinutes": 25,
                "servings": 4,
                "calories": 385.0,
                "summary": "A colorful and nutritious Asian-inspired stir fry.",
                "isSaved": False
            }
        }
    }

    def to_storage(self) -> dict:
        """Serialize using the persisted field names"""
        return self.model_dump(by_alias=True)


class RecipeFilter(BaseModel):
    """Optional bounds applied to the current search results"""
    max_time: Optional[int] = Field(None, description="Maximum ready time in minutes", alias="maxTime")
    max_calories: Optional[float] = Field(None, description="Maximum calories", alias="maxCalories")
    min_servings: Optional[int] = Field(None, description="Minimum number of servings", alias="minServings")

    model_config = {
        "populate_by_name": True
    }

    def matches(self, recipe: Recipe) -> bool:
        if self.max_time is not None and recipe.ready_in_minutes > self.max_time:
            return False
        if self.max_calories is not None and recipe.calories > self.max_calories:
            return False
        if self.min_servings is not None and recipe.servings < self.min_servings:
            return False
        return True


class CoordinatorState(BaseModel):
    """Observable coordinator state handed to UI clients"""
    recipes: List[Recipe] = Field(default_factory=list)
    saved_recipes: List[Recipe] = Field(default_factory=list, alias="savedRecipes")
    is_loading: bool = Field(False, alias="isLoading")
    error: str = ""
    last_search_query: str = Field("", alias="lastSearchQuery")

    model_config = {
        "populate_by_name": True
    }
