"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Any, Optional

from bs4 import BeautifulSoup

from ..constants import JSON_LD_CONTENT_TYPE, RECIPE_TYPE
from ..models import RawRecipe

logger = logging.getLogger(__name__)


def _is_recipe(obj: dict) -> bool:
    obj_type = obj.get("@type")
    if isinstance(obj_type, list):
        return RECIPE_TYPE in obj_type
    return obj_type == RECIPE_TYPE


def find_recipe(data: Any) -> Optional[RawRecipe]:
    """
    Depth-first search of a parsed JSON-LD tree for a Recipe object.

    Looks at the object itself, then inside an @graph wrapper; lists are
    searched item by item.
    """
    if isinstance(data, list):
        for item in data:
            found = find_recipe(item)
            if found:
                return found
        return None

    if not isinstance(data, dict):
        return None

    if _is_recipe(data):
        return data

    graph = data.get("@graph")
    if isinstance(graph, list):
        return find_recipe(graph)
    return None


def extract_from_json_ld(soup: BeautifulSoup) -> Optional[RawRecipe]:
    """Return the first Recipe found in the page's JSON-LD blocks."""
    scripts = soup.find_all("script", attrs={"type": JSON_LD_CONTENT_TYPE})
    logger.debug(f"Found {len(scripts)} JSON-LD script blocks")

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            continue
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as e:
            logger.debug(f"JSON-LD block {idx} failed to parse: {e}")
            continue

        recipe = find_recipe(data)
        if recipe:
            logger.debug(f"Recipe found in JSON-LD block {idx}")
            return recipe

    return None
