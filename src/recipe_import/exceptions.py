"""Exceptions for recipe import package."""


class RecipeImportError(Exception):
    """Base class for every expected recipe import failure."""
    pass


class RecipeExtractionError(RecipeImportError):
    """Raised when no recipe (or no recipe title) can be found in the page."""
    pass


class RecipeFetchError(RecipeImportError):
    """Raised when the recipe page cannot be downloaded."""
    pass
