from pydantic import BaseModel, Field


class NutritionSummary(BaseModel):
    """Aggregate nutrition statistics over a recipe collection"""
    recipe_count: int = Field(0, description="Number of recipes aggregated", alias="recipeCount")
    total_calories: float = Field(0.0, description="Sum of recipe calories", alias="totalCalories")
    total_servings: int = Field(0, description="Sum of recipe servings", alias="totalServings")
    average_calories_per_serving: float = Field(
        0.0, description="Total calories divided by total servings", alias="averageCaloriesPerServing"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "recipeCount": 2,
                "totalCalories": 905.0,
                "totalServings": 8,
                "averageCaloriesPerServing": 113.125
            }
        }
    }
