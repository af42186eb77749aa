"""
Gateway to the remote recipe provider.

One GET per search. Every provider failure (bad status, transport error,
malformed body, missing credentials) is absorbed here and answered from the
fallback catalog, so callers never see a provider exception.
"""

import logging
import time
from typing import Dict, List, Optional

import httpx

from config.settings import settings
from exceptions import ProviderError
from models.recipe import Recipe
from services.fallback_catalog import FallbackCatalog
from services.normalizer import normalize

logger = logging.getLogger(__name__)


class RecipeGateway:
    """Searches the provider and normalizes its hits into Recipe records"""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        catalog: Optional[FallbackCatalog] = None,
        app_id: Optional[str] = None,
        app_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.catalog = catalog or FallbackCatalog()
        self.app_id = app_id if app_id is not None else settings.edamam_app_id
        self.app_key = app_key if app_key is not None else settings.edamam_app_key
        self.base_url = (base_url or settings.recipe_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.recipe_api_timeout

        # Only close clients we created
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def __aenter__(self) -> "RecipeGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    def _credentials(self) -> Dict[str, str]:
        if not self.app_id or not self.app_key:
            raise ProviderError("EDAMAM_APP_ID / EDAMAM_APP_KEY not configured")
        return {"app_id": self.app_id, "app_key": self.app_key}

    async def _get_json(self, url: str, params: Dict[str, str]) -> Dict:
        response = await self.http_client.get(url, params=params)
        if response.status_code != 200:
            raise ProviderError(f"HTTP {response.status_code}: {response.text[:100]}")
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON body: {e}")
        if not isinstance(data, dict):
            raise ProviderError(f"Expected JSON object, got {type(data).__name__}")
        return data

    async def _search(self, q: str) -> List[Recipe]:
        params = {"type": "public", "q": q, "random": "true", **self._credentials()}
        data = await self._get_json(self.base_url, params)

        hits = data.get("hits")
        if not isinstance(hits, list):
            raise ProviderError("Response is missing the 'hits' list")

        stamp = time.time_ns()
        recipes: List[Recipe] = []
        seen_ids = set()
        for index, hit in enumerate(hits):
            payload = hit.get("recipe") if isinstance(hit, dict) else None
            recipe = normalize(payload, fallback_id=f"{stamp}{index}")
            if recipe is None:
                logger.debug(f"Dropped unparseable hit #{index}")
                continue
            if recipe.id in seen_ids:
                logger.debug(f"Dropped duplicate hit {recipe.id}")
                continue
            seen_ids.add(recipe.id)
            recipes.append(recipe)

        logger.info(f"Provider returned {len(recipes)} recipes for '{q}' ({len(hits)} hits)")
        return recipes

    async def search_by_ingredients(self, ingredients: List[str]) -> List[Recipe]:
        """Search by ingredient list; falls back to the catalog keyword filter on failure"""
        cleaned = [i.strip() for i in ingredients or [] if i and i.strip()]
        if not cleaned:
            logger.info("Empty ingredient list, serving full catalog without a provider call")
            return self.catalog.all()

        try:
            return await self._search(",".join(cleaned))
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning(f"Ingredient search failed, using fallback catalog: {type(e).__name__}: {e}")
            return self.catalog.filter_by_ingredients(cleaned)

    async def search_by_query(self, query: str) -> List[Recipe]:
        """Free-text search; falls back to the full catalog on failure"""
        query = (query or "").strip()
        if not query:
            logger.info("Blank query rejected before provider call")
            return []

        try:
            return await self._search(query)
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning(f"Query search failed, using fallback catalog: {type(e).__name__}: {e}")
            return self.catalog.all()

    async def get_recipe_details(self, recipe_id: str) -> Optional[Recipe]:
        """Single recipe by id; catalog ids are answered locally"""
        recipe_id = (recipe_id or "").strip()
        if not recipe_id:
            return None

        local = self.catalog.get(recipe_id)
        if local is not None:
            return local

        try:
            data = await self._get_json(f"{self.base_url}/{recipe_id}", {"type": "public", **self._credentials()})
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning(f"Detail lookup for {recipe_id} failed: {type(e).__name__}: {e}")
            return None

        return normalize(data.get("recipe", data), fallback_id=recipe_id)
