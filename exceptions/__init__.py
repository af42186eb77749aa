"""
Exceptions module exports
"""

from .recipe_exceptions import (
    RecipeServiceError,
    StorageError,
    ProviderError,
    RecipeNotFoundError
)

__all__ = [
    'RecipeServiceError',
    'StorageError',
    'ProviderError',
    'RecipeNotFoundError'
]
