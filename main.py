"""
Entry Point for the Pantry Recipes API

Serves ingredient search, recipe detail and the saved-recipes store to the
mobile/web client as a FastAPI web service.
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import close_coordinator, get_coordinator
from api.recipes import router as recipes_router
from api.saved_recipes import router as saved_recipes_router
from config.settings import settings

logging.basicConfig(level=settings.log_level.upper(), format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Pantry Recipes API",
    description="Find recipes by ingredients, with an offline fallback catalog and a local saved-recipes store.",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure for your client in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router, prefix="/recipes", tags=["recipes"])
app.include_router(saved_recipes_router, prefix="/saved-recipes", tags=["saved-recipes"])


@app.on_event("startup")
async def on_startup() -> None:
    coordinator = get_coordinator()
    await coordinator.load_saved_recipes()
    if not (settings.edamam_app_id and settings.edamam_app_key):
        logger.warning("Recipe provider credentials missing - searches will use the fallback catalog")
    logger.info(f"Loaded {len(coordinator.saved_recipes)} saved recipes")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await close_coordinator()


@app.get("/")
async def root():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", settings.port))

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        workers=1,
        log_level=settings.log_level.lower()
    )
