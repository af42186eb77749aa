from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Recipe provider (Edamam recipe search v2)
    edamam_app_id: Optional[str] = None
    edamam_app_key: Optional[str] = None
    recipe_api_base_url: str = "https://api.edamam.com/api/recipes/v2"
    recipe_api_timeout: float = 30.0

    # Local persistence
    storage_directory: str = "storage/data"
    saved_recipes_key: str = "saved_recipes"

    # Server Configuration
    port: int = 3000
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False  # Allow EDAMAM_APP_ID or edamam_app_id


# Create singleton instance
settings = Settings()
