"""
Recipe coordinator.

Owns the current search results and the view of saved recipes, and keeps the
two consistent across searches and save/remove operations. Callers read state
from the attributes or ``snapshot()`` and may register listeners with
``subscribe()`` to be called after every state change.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from exceptions import RecipeNotFoundError
from models.nutrition import NutritionSummary
from models.recipe import CoordinatorState, Recipe, RecipeFilter
from services import aggregation
from services.recipe_gateway import RecipeGateway
from storage.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)

Listener = Callable[["RecipeCoordinator"], None]


class RecipeCoordinator:
    """Search, save and nutrition operations for one user session"""

    def __init__(self, gateway: RecipeGateway, favorites: FavoritesStore):
        self.gateway = gateway
        self.favorites = favorites

        self.recipes: List[Recipe] = []
        self.saved_recipes: List[Recipe] = []
        self.is_loading: bool = False
        self.error: str = ""
        self.last_search_query: str = ""

        self._listeners: List[Listener] = []
        self._search_generation = 0

    # Observers
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"State listener failed: {e}", exc_info=True)

    def snapshot(self) -> CoordinatorState:
        return CoordinatorState(
            recipes=[r.model_copy(deep=True) for r in self.recipes],
            saved_recipes=[r.model_copy(deep=True) for r in self.saved_recipes],
            is_loading=self.is_loading,
            error=self.error,
            last_search_query=self.last_search_query,
        )

    # Search
    async def search(self, ingredients: List[str]) -> None:
        """Search by ingredients and annotate each result with its saved status"""
        cleaned = [i.strip() for i in ingredients or [] if i and i.strip()]
        if not cleaned:
            return
        await self._run_search(", ".join(cleaned), lambda: self.gateway.search_by_ingredients(cleaned))

    async def search_by_query(self, query: str) -> None:
        query = (query or "").strip()
        if not query:
            return
        await self._run_search(query, lambda: self.gateway.search_by_query(query))

    async def _run_search(self, label: str, call: Callable[[], Awaitable[List[Recipe]]]) -> None:
        self._search_generation += 1
        generation = self._search_generation

        self.is_loading = True
        self.error = ""
        self.last_search_query = label
        self._notify()

        try:
            results = await call()
            saved_ids = self.favorites.saved_ids()
            annotated = [r.model_copy(update={"is_saved": r.id in saved_ids}) for r in results]
        except Exception as e:
            if generation != self._search_generation:
                return
            logger.error(f"Search for '{label}' failed: {e}", exc_info=True)
            self.error = f"Failed to search recipes: {e}"
            self.is_loading = False
            self._notify()
            return

        if generation != self._search_generation:
            logger.debug(f"Discarding superseded results for '{label}'")
            return

        self.recipes = annotated
        self.is_loading = False
        logger.info(f"Search for '{label}' produced {len(annotated)} recipes")
        self._notify()

    async def get_recipe_details(self, recipe_id: str) -> Optional[Recipe]:
        """Detail for a recipe, preferring the copy already in results or saved recipes"""
        for recipe in self.recipes + self.saved_recipes:
            if recipe.id == recipe_id:
                return recipe.model_copy(deep=True)
        recipe = await self.gateway.get_recipe_details(recipe_id)
        if recipe is None:
            return None
        try:
            recipe.is_saved = self.favorites.is_saved(recipe.id)
        except Exception as e:
            logger.error(f"Could not check saved status for {recipe_id}: {e}", exc_info=True)
            self.error = f"Failed to load saved recipes: {e}"
            self._notify()
        return recipe

    async def require_recipe(self, recipe_id: str) -> Recipe:
        recipe = await self.get_recipe_details(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    # Favorites
    def _mark_result(self, recipe_id: str, is_saved: bool) -> None:
        for index, recipe in enumerate(self.recipes):
            if recipe.id == recipe_id:
                self.recipes[index] = recipe.model_copy(update={"is_saved": is_saved})

    async def save_recipe(self, recipe: Recipe) -> Recipe:
        try:
            self.favorites.save(recipe)
        except Exception as e:
            logger.error(f"Saving recipe {recipe.id} failed: {e}", exc_info=True)
            self.error = f"Failed to save recipe: {e}"
            self._notify()
            return recipe.model_copy()
        self._mark_result(recipe.id, True)
        await self.load_saved_recipes()
        return recipe.model_copy(update={"is_saved": True})

    async def remove_recipe(self, recipe_id: str) -> bool:
        try:
            self.favorites.remove(recipe_id)
        except Exception as e:
            logger.error(f"Removing recipe {recipe_id} failed: {e}", exc_info=True)
            self.error = f"Failed to remove recipe: {e}"
            self._notify()
            return False
        self._mark_result(recipe_id, False)
        await self.load_saved_recipes()
        return True

    async def toggle_save(self, recipe: Recipe) -> Recipe:
        """Save an unsaved recipe or remove a saved one; returns the updated copy"""
        if recipe.is_saved:
            if not await self.remove_recipe(recipe.id):
                return recipe.model_copy()
            return recipe.model_copy(update={"is_saved": False})
        return await self.save_recipe(recipe)

    async def load_saved_recipes(self) -> None:
        try:
            self.saved_recipes = self.favorites.get_all()
        except Exception as e:
            logger.error(f"Loading saved recipes failed: {e}", exc_info=True)
            self.error = f"Failed to load saved recipes: {e}"
        self._notify()

    def get_saved_recipes(self) -> List[Recipe]:
        return [r.model_copy(deep=True) for r in self.saved_recipes]

    async def clear_saved_recipes(self) -> None:
        try:
            self.favorites.clear()
        except Exception as e:
            logger.error(f"Clearing saved recipes failed: {e}", exc_info=True)
            self.error = f"Failed to clear saved recipes: {e}"
            self._notify()
            return
        self.recipes = [r.model_copy(update={"is_saved": False}) for r in self.recipes]
        await self.load_saved_recipes()

    # Utility methods
    def clear_error(self) -> None:
        self.error = ""
        self._notify()

    def clear_recipes(self) -> None:
        self._search_generation += 1
        self.recipes = []
        self.last_search_query = ""
        self.is_loading = False
        self._notify()

    # Nutrition
    def get_total_calories(self, recipes: List[Recipe]) -> float:
        return aggregation.total_calories(recipes)

    def get_total_servings(self, recipes: List[Recipe]) -> int:
        return aggregation.total_servings(recipes)

    def get_average_calories_per_serving(self, recipes: List[Recipe]) -> float:
        return aggregation.average_calories_per_serving(recipes)

    def get_nutrition_summary(self, recipes: List[Recipe]) -> NutritionSummary:
        return aggregation.summarize(recipes)

    # Filtering
    def get_filtered_recipes(
        self,
        max_time: Optional[int] = None,
        max_calories: Optional[float] = None,
        min_servings: Optional[int] = None,
    ) -> List[Recipe]:
        """Current results within every supplied bound; omitted bounds are unconstrained"""
        bounds = RecipeFilter(max_time=max_time, max_calories=max_calories, min_servings=min_servings)
        return [r.model_copy() for r in self.recipes if bounds.matches(r)]
