"""Schema.org microdata (itemscope/itemprop) recipe extraction."""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..constants import MICRODATA_RECIPE_TYPE, NUTRITION_FIELDS
from ..models import RawRecipe

logger = logging.getLogger(__name__)


def _prop_selector(prop: str) -> str:
    # itemprop may hold several space separated names
    return f'[itemprop~="{prop}"]'


def _text(element: Tag) -> str:
    return " ".join(element.get_text().split())


def _value(element: Optional[Tag], *attrs: str) -> Optional[str]:
    """First non-empty attribute among attrs, falling back to the element text."""
    if element is None:
        return None
    for attr in attrs:
        value = element.get(attr)
        if value:
            return value
    return _text(element) or None


def _get_text(root: Tag, prop: str) -> Optional[str]:
    return _value(root.select_one(_prop_selector(prop)), "content", "datetime")


def _get_all(root: Tag, prop: str) -> List[str]:
    values = []
    for element in root.select(_prop_selector(prop)):
        value = _value(element, "content")
        if value:
            values.append(value)
    return values


def _get_image(root: Tag) -> Optional[str]:
    image = root.select_one(_prop_selector("image"))
    if image is None:
        return None
    for attr in ("src", "content", "href"):
        value = image.get(attr)
        if value:
            return value
    return None


def extract_from_microdata(soup: BeautifulSoup) -> Optional[RawRecipe]:
    """
    Read a Recipe marked up with microdata attributes.

    Returns None when the page has no Recipe item or the item has no name,
    so the caller can move on to the heuristic strategy.
    """
    recipe_el = soup.select_one(f'[itemtype*="{MICRODATA_RECIPE_TYPE}"]')
    if recipe_el is None:
        return None

    name = _get_text(recipe_el, "name")
    if not name:
        logger.debug("Microdata Recipe item has no name, skipping")
        return None

    recipe: RawRecipe = {
        "name": name,
        "description": _get_text(recipe_el, "description"),
        "image": _get_image(recipe_el),
        "prepTime": _get_text(recipe_el, "prepTime"),
        "cookTime": _get_text(recipe_el, "cookTime"),
        "totalTime": _get_text(recipe_el, "totalTime"),
        "recipeYield": _get_text(recipe_el, "recipeYield"),
        "recipeIngredient": _get_all(recipe_el, "recipeIngredient"),
        "recipeInstructions": _get_all(recipe_el, "recipeInstructions"),
        "recipeCategory": _get_text(recipe_el, "recipeCategory"),
        "recipeCuisine": _get_text(recipe_el, "recipeCuisine"),
        "keywords": _get_text(recipe_el, "keywords"),
    }

    nutrition_el = recipe_el.select_one(_prop_selector("nutrition"))
    if nutrition_el is not None:
        nutrition = {}
        for schema_key, _ in NUTRITION_FIELDS:
            value = _value(nutrition_el.select_one(_prop_selector(schema_key)), "content")
            if value:
                nutrition[schema_key] = value
        recipe["nutrition"] = nutrition

    return recipe
