from typing import Optional

from config.settings import settings
from services.recipe_coordinator import RecipeCoordinator
from services.recipe_gateway import RecipeGateway
from storage.favorites_store import FavoritesStore
from storage.local_storage import LocalStorage

# One coordinator per process; the app serves a single local user
_coordinator: Optional[RecipeCoordinator] = None


def build_coordinator() -> RecipeCoordinator:
    """Wire gateway and favorites store from settings"""
    storage = LocalStorage(settings.storage_directory)
    favorites = FavoritesStore(storage, key=settings.saved_recipes_key)
    return RecipeCoordinator(RecipeGateway(), favorites)


def get_coordinator() -> RecipeCoordinator:
    global _coordinator
    if _coordinator is None:
        _coordinator = build_coordinator()
    return _coordinator


async def close_coordinator() -> None:
    global _coordinator
    if _coordinator is not None:
        await _coordinator.gateway.aclose()
    _coordinator = None
