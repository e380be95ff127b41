"""
Recipe parsing pipeline.

parse_recipe_from_html tries each extraction strategy in priority order
(JSON-LD, then microdata, then page heuristics) and maps the first raw
schema found onto a Recipe.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from .exceptions import RecipeExtractionError
from .extractors import EXTRACTORS
from .mapper import map_schema_to_recipe
from .models import Recipe

logger = logging.getLogger(__name__)


def parse_recipe_from_html(html: str, source_url: Optional[str] = None) -> Recipe:
    """
    Parse recipe data from raw HTML.

    Args:
        html: The page markup
        source_url: Optional URL the page was fetched from

    Returns:
        The canonical Recipe

    Raises:
        RecipeExtractionError: If no strategy finds a recipe, or the one
            found has no title
    """
    soup = BeautifulSoup(html or "", "html.parser")

    for extractor in EXTRACTORS:
        schema = extractor(soup)
        if schema is not None:
            logger.info(f"Recipe data found with {extractor.__name__}")
            return map_schema_to_recipe(schema, source_url)

    logger.warning(f"No recipe data found in page{f' {source_url}' if source_url else ''}")
    raise RecipeExtractionError("Could not extract recipe data from the provided HTML")
