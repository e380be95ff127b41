"""
recipe_import package for extracting structured recipes from recipe web pages.
"""

from .exceptions import RecipeExtractionError, RecipeFetchError, RecipeImportError
from .fetcher import RecipeFetcher
from .importer import import_recipe_from_url
from .models import ImportResult, Ingredient, Instruction, NutritionFacts, Recipe
from .parser import parse_recipe_from_html

__all__ = [
    "parse_recipe_from_html",
    "import_recipe_from_url",
    "RecipeFetcher",
    "Recipe",
    "Ingredient",
    "Instruction",
    "NutritionFacts",
    "ImportResult",
    "RecipeImportError",
    "RecipeExtractionError",
    "RecipeFetchError",
]
