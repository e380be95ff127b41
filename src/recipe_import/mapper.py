"""Map a raw schema.org Recipe dict onto the canonical Recipe model."""

import logging
from typing import Any, List, Optional

from .constants import MAX_TITLE_LENGTH
from .exceptions import RecipeExtractionError
from .models import Ingredient, RawRecipe, Recipe
from .services.ingredient_parser import parse_ingredient_line
from .services.instructions import normalize_instructions
from .services.normalizers import (
    extract_image_url,
    join_cuisine,
    parse_duration,
    parse_keywords,
    parse_nutrition,
    parse_servings,
    to_string_list,
)

logger = logging.getLogger(__name__)


def _ingredient_lines(schema: RawRecipe) -> List[str]:
    raw = schema.get("recipeIngredient")
    if raw is None:
        # Older schema.org vocabulary
        raw = schema.get("ingredients")
    if not raw:
        return []
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list):
        return [item if isinstance(item, str) else str(item) for item in raw if item is not None]
    return []


def parse_ingredients(schema: RawRecipe) -> List[Ingredient]:
    ingredients = []
    for line in _ingredient_lines(schema):
        ingredient = parse_ingredient_line(line)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def _clean_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def map_schema_to_recipe(schema: RawRecipe, source_url: Optional[str] = None) -> Recipe:
    """
    Normalize a raw schema.org Recipe into a Recipe.

    Only fields that parse successfully are set; ingredients and
    instructions default to empty lists.

    Raises:
        RecipeExtractionError: If the schema has no usable name
    """
    title = _clean_string(schema.get("name"))
    if not title:
        raise RecipeExtractionError("Recipe has no title")
    if len(title) > MAX_TITLE_LENGTH:
        logger.warning(f"Truncating title longer than {MAX_TITLE_LENGTH} characters")
        title = title[:MAX_TITLE_LENGTH].rstrip()

    recipe = Recipe(
        title=title,
        description=_clean_string(schema.get("description")),
        sourceUrl=source_url or None,
        imageUrl=extract_image_url(schema.get("image")),
        prepTime=parse_duration(schema.get("prepTime")),
        cookTime=parse_duration(schema.get("cookTime")),
        totalTime=parse_duration(schema.get("totalTime")),
        servings=parse_servings(schema.get("recipeYield")),
        cuisine=join_cuisine(schema.get("recipeCuisine")),
        categoryNames=to_string_list(schema.get("recipeCategory")),
        tagNames=parse_keywords(schema.get("keywords")),
        ingredients=parse_ingredients(schema),
        instructions=normalize_instructions(schema.get("recipeInstructions")),
        nutrition=parse_nutrition(schema.get("nutrition")),
    )

    logger.debug(
        f"Mapped recipe '{recipe.title}': "
        f"{len(recipe.ingredients)} ingredients, {len(recipe.instructions)} steps, "
        f"nutrition={'yes' if recipe.nutrition else 'no'}"
    )
    return recipe
