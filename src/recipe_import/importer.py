import logging
from typing import Optional

from pydantic import ValidationError

from .exceptions import RecipeImportError
from .fetcher import RecipeFetcher
from .models import ImportRequest, ImportResult

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Please enter a valid URL"


async def import_recipe_from_url(url: str, fetcher: Optional[RecipeFetcher] = None) -> ImportResult:
    """
    Import a recipe from a user supplied URL.

    Expected failures (bad URL, fetch error, no recipe in the page) are
    reported in the result instead of being raised.

    Args:
        url: The URL pasted by the user
        fetcher: Optional fetcher to reuse; a new one is created and closed otherwise

    Returns:
        ImportResult with either data or error set
    """
    try:
        ImportRequest(url=url)
    except ValidationError:
        logger.warning(f"Rejected invalid import URL: {url!r}")
        return ImportResult(success=False, error=INVALID_URL_MESSAGE)

    # Keep the URL as typed, HttpUrl would normalize it (trailing slash)
    target = url.strip()
    try:
        if fetcher is not None:
            recipe = await fetcher.fetch_recipe(target)
        else:
            async with RecipeFetcher() as own_fetcher:
                recipe = await own_fetcher.fetch_recipe(target)
    except RecipeImportError as e:
        logger.error(f"Failed to import recipe from {target}: {e}")
        return ImportResult(success=False, error=str(e))

    logger.info(f"Imported recipe '{recipe.title}' from {target}")
    return ImportResult(success=True, data=recipe)
