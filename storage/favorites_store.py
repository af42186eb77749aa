import json
import logging
import threading
from typing import List, Set

from pydantic import ValidationError

from exceptions import StorageError
from models.recipe import Recipe
from storage.local_storage import KeyValueBackend

logger = logging.getLogger(__name__)

SAVED_RECIPES_KEY = "saved_recipes"


class FavoritesStore:
    """The user's saved recipes, serialized as one JSON array under a single key.

    Every operation reads the whole set, changes it and writes it back. The
    lock serializes those cycles so concurrent save/remove calls cannot lose
    updates.
    """

    def __init__(self, backend: KeyValueBackend, key: str = SAVED_RECIPES_KEY):
        self.backend = backend
        self.key = key
        self._lock = threading.RLock()

    def _read(self) -> List[Recipe]:
        raw = self.backend.get_string(self.key)
        if raw is None:
            return []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(self.key, f"saved recipes are not valid JSON: {e}")
        if not isinstance(entries, list):
            raise StorageError(self.key, f"expected a JSON array, found {type(entries).__name__}")

        recipes: List[Recipe] = []
        for entry in entries:
            try:
                recipes.append(Recipe.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed saved recipe entry: {e.error_count()} validation error(s)")
        return recipes

    def _write(self, recipes: List[Recipe]) -> None:
        payload = json.dumps([recipe.to_storage() for recipe in recipes])
        self.backend.set_string(self.key, payload)

    def save(self, recipe: Recipe) -> Recipe:
        """Persist a copy of ``recipe`` marked saved; an existing entry with the same id is replaced"""
        stored = recipe.model_copy(update={"is_saved": True}, deep=True)
        with self._lock:
            recipes = self._read()
            for index, existing in enumerate(recipes):
                if existing.id == stored.id:
                    recipes[index] = stored
                    break
            else:
                recipes.append(stored)
            self._write(recipes)
        logger.info(f"Saved recipe {stored.id} ({stored.title})")
        return stored.model_copy(deep=True)

    def remove(self, recipe_id: str) -> None:
        """Drop every entry with ``recipe_id``; removing an absent id is a no-op"""
        with self._lock:
            recipes = self._read()
            remaining = [recipe for recipe in recipes if recipe.id != recipe_id]
            if len(remaining) == len(recipes):
                logger.debug(f"Recipe {recipe_id} not saved, nothing to remove")
                return
            self._write(remaining)
        logger.info(f"Removed recipe {recipe_id}")

    def get_all(self) -> List[Recipe]:
        with self._lock:
            return self._read()

    def saved_ids(self) -> Set[str]:
        return {recipe.id for recipe in self.get_all()}

    def is_saved(self, recipe_id: str) -> bool:
        return recipe_id in self.saved_ids()

    def clear(self) -> None:
        with self._lock:
            self.backend.remove(self.key)
        logger.info("Cleared all saved recipes")
