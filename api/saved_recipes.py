from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from api.dependencies import get_coordinator
from models.nutrition import NutritionSummary
from models.recipe import Recipe
from services.recipe_coordinator import RecipeCoordinator

router = APIRouter()


def _raise_on_error(coordinator: RecipeCoordinator) -> None:
    if coordinator.error:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=coordinator.error
        )


@router.get("/", response_model=List[Recipe])
async def get_saved_recipes(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Get all saved recipes from storage"""
    coordinator.clear_error()
    await coordinator.load_saved_recipes()
    _raise_on_error(coordinator)
    return coordinator.get_saved_recipes()


@router.get("/nutrition", response_model=NutritionSummary)
async def get_saved_nutrition(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Nutrition totals over the saved recipes"""
    coordinator.clear_error()
    await coordinator.load_saved_recipes()
    _raise_on_error(coordinator)
    return coordinator.get_nutrition_summary(coordinator.saved_recipes)


@router.delete("/{recipe_id}")
async def remove_saved_recipe(recipe_id: str, coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Remove a recipe from the saved set; removing an unsaved id succeeds"""
    coordinator.clear_error()
    await coordinator.remove_recipe(recipe_id)
    _raise_on_error(coordinator)
    return {"message": f"Recipe {recipe_id} removed from saved recipes"}


@router.delete("/")
async def clear_saved_recipes(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Delete every saved recipe"""
    coordinator.clear_error()
    await coordinator.clear_saved_recipes()
    _raise_on_error(coordinator)
    return {"message": "All saved recipes cleared"}
