import pytest

from models.recipe import Recipe
from services.aggregation import (
    average_calories_per_serving,
    summarize,
    total_calories,
    total_servings,
)


def recipe(recipe_id, calories, servings):
    return Recipe(id=recipe_id, title=f"R{recipe_id}", calories=calories, servings=servings)


class TestAggregation:

    def test_empty_collection(self):
        assert total_calories([]) == 0.0
        assert total_servings([]) == 0
        assert average_calories_per_serving([]) == 0.0

    def test_totals_and_average(self):
        recipes = [recipe("1", 385.0, 4), recipe("2", 520.0, 4)]

        assert total_calories(recipes) == pytest.approx(905.0)
        assert total_servings(recipes) == 8
        assert average_calories_per_serving(recipes) == pytest.approx(113.125)

    def test_zero_calories_never_divides_by_zero(self):
        recipes = [recipe("1", 0.0, 1)]

        assert average_calories_per_serving(recipes) == 0.0

    def test_accepts_generators(self):
        assert average_calories_per_serving(recipe(str(i), 100.0, 2) for i in range(3)) == pytest.approx(50.0)

    def test_summary(self):
        summary = summarize([recipe("1", 300.0, 3), recipe("2", 100.0, 1)])

        assert summary.recipe_count == 2
        assert summary.total_calories == pytest.approx(400.0)
        assert summary.total_servings == 4
        assert summary.average_calories_per_serving == pytest.approx(100.0)
        assert summary.model_dump(by_alias=True)["averageCaloriesPerServing"] == pytest.approx(100.0)
