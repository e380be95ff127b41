"""Configuration for recipe import package, read from the environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; RecipeImport/1.0; +https://github.com/recipe-import)"

USER_AGENT: str = os.getenv("RECIPE_IMPORT_USER_AGENT", DEFAULT_USER_AGENT)
ACCEPT: str = os.getenv("RECIPE_IMPORT_ACCEPT", "text/html,application/xhtml+xml")

try:
    TIMEOUT: float = float(os.getenv("RECIPE_IMPORT_TIMEOUT", "30.0"))
except ValueError:
    raise ValueError(f"Invalid RECIPE_IMPORT_TIMEOUT: {os.getenv('RECIPE_IMPORT_TIMEOUT')}. Must be a number of seconds")

if TIMEOUT <= 0:
    raise ValueError(f"Invalid RECIPE_IMPORT_TIMEOUT: {TIMEOUT}. Must be greater than 0")
