"""
Custom exception classes for the recipe service
"""


class RecipeServiceError(Exception):
    """Base exception for the recipe service"""
    pass


class StorageError(RecipeServiceError):
    """Raised when the local persistence medium cannot be read or written"""
    def __init__(self, key: str, error: str):
        self.key = key
        self.error = error
        super().__init__(f"Storage failure for '{key}': {error}")


class ProviderError(RecipeServiceError):
    """Raised inside the gateway when the recipe provider response is unusable"""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Recipe provider failed: {reason}")


class RecipeNotFoundError(RecipeServiceError):
    """Raised when a requested recipe is neither in the results nor saved"""
    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found")
