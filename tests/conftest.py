"""
Shared fixtures: a fake recipe provider, on-disk storage in a temp directory,
and a coordinator wired from both.
"""

import httpx
import pytest

from services.fallback_catalog import FallbackCatalog
from services.recipe_coordinator import RecipeCoordinator
from services.recipe_gateway import RecipeGateway
from storage.favorites_store import FavoritesStore
from storage.local_storage import LocalStorage


def provider_hit(label, **overrides):
    """Minimal ingredient-line shaped provider recipe"""
    recipe = {
        "uri": f"http://www.edamam.com/ontologies/edamam.owl#recipe_{label.lower().replace(' ', '')}",
        "label": label,
        "image": f"https://img.example.com/{label.lower().replace(' ', '-')}.jpg",
        "ingredientLines": ["1 lb chicken breast", "2 cups rice"],
        "totalTime": 40,
        "yield": 4,
        "digest": [{"label": "Calories", "total": 812.5}],
    }
    recipe.update(overrides)
    return {"recipe": recipe}


def make_gateway(handler, **kwargs):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    kwargs.setdefault("app_id", "test-id")
    kwargs.setdefault("app_key", "test-key")
    kwargs.setdefault("base_url", "https://provider.test/api/recipes/v2")
    return RecipeGateway(http_client=client, **kwargs)


def unavailable_handler(request):
    return httpx.Response(503, text="Service Unavailable")


@pytest.fixture
def catalog():
    return FallbackCatalog()


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(data_directory=str(tmp_path / "data"))


@pytest.fixture
def favorites(local_storage):
    return FavoritesStore(local_storage)


@pytest.fixture
def failing_gateway():
    return make_gateway(unavailable_handler)


@pytest.fixture
def coordinator(failing_gateway, favorites):
    return RecipeCoordinator(failing_gateway, favorites)
