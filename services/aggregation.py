"""
Nutrition aggregation over recipe collections.
"""

from typing import Iterable, List

from models.nutrition import NutritionSummary
from models.recipe import Recipe


def total_calories(recipes: Iterable[Recipe]) -> float:
    return float(sum(recipe.calories for recipe in recipes))


def total_servings(recipes: Iterable[Recipe]) -> int:
    return sum(recipe.servings for recipe in recipes)


def average_calories_per_serving(recipes: Iterable[Recipe]) -> float:
    recipes = list(recipes)
    servings = total_servings(recipes)
    if servings <= 0:
        return 0.0
    return total_calories(recipes) / servings


def summarize(recipes: Iterable[Recipe]) -> NutritionSummary:
    """All aggregate statistics for one collection"""
    recipes: List[Recipe] = list(recipes)
    return NutritionSummary(
        recipe_count=len(recipes),
        total_calories=total_calories(recipes),
        total_servings=total_servings(recipes),
        average_calories_per_serving=average_calories_per_serving(recipes),
    )
