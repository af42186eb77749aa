from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from api.dependencies import get_coordinator
from exceptions import RecipeNotFoundError
from models.recipe import CoordinatorState, Recipe
from services.recipe_coordinator import RecipeCoordinator

router = APIRouter()


def _raise_on_error(coordinator: RecipeCoordinator) -> None:
    if coordinator.error:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=coordinator.error
        )


@router.get("/search", response_model=List[Recipe])
async def search_by_ingredients(
    ingredients: str = Query(..., description="Comma separated ingredients"),
    coordinator: RecipeCoordinator = Depends(get_coordinator),
):
    """Search recipes by ingredients, annotated with saved status"""
    items = [i for i in ingredients.split(",") if i.strip()]
    if not items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one ingredient is required"
        )
    await coordinator.search(items)
    _raise_on_error(coordinator)
    return coordinator.recipes


@router.get("/search/query", response_model=List[Recipe])
async def search_by_query(
    q: str = Query(..., description="Free text query"),
    coordinator: RecipeCoordinator = Depends(get_coordinator),
):
    """Search recipes by free text"""
    if not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query must not be blank"
        )
    await coordinator.search_by_query(q)
    _raise_on_error(coordinator)
    return coordinator.recipes


@router.get("/", response_model=List[Recipe])
async def get_recipes(
    max_time: Optional[int] = Query(None, alias="maxTime"),
    max_calories: Optional[float] = Query(None, alias="maxCalories"),
    min_servings: Optional[int] = Query(None, alias="minServings"),
    coordinator: RecipeCoordinator = Depends(get_coordinator),
):
    """Current search results, optionally filtered"""
    return coordinator.get_filtered_recipes(
        max_time=max_time,
        max_calories=max_calories,
        min_servings=min_servings,
    )


@router.delete("/")
async def clear_recipes(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Clear the current search results"""
    coordinator.clear_recipes()
    return {"message": "Search results cleared"}


@router.get("/state", response_model=CoordinatorState)
async def get_state(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Full observable state for UI clients"""
    return coordinator.snapshot()


@router.delete("/state/error")
async def clear_error(coordinator: RecipeCoordinator = Depends(get_coordinator)):
    coordinator.clear_error()
    return {"message": "Error cleared"}


@router.get("/{recipe_id}", response_model=Recipe)
async def get_recipe(recipe_id: str, coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Get a specific recipe by ID"""
    try:
        recipe = await coordinator.require_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return recipe


@router.post("/{recipe_id}/toggle-save", response_model=Recipe)
async def toggle_save(recipe_id: str, coordinator: RecipeCoordinator = Depends(get_coordinator)):
    """Save an unsaved recipe or remove a saved one"""
    coordinator.clear_error()
    try:
        recipe = await coordinator.require_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    updated = await coordinator.toggle_save(recipe)
    _raise_on_error(coordinator)
    return updated
