import logging
from typing import Optional

import httpx

from . import config
from .exceptions import RecipeFetchError
from .models import Recipe
from .parser import parse_recipe_from_html

logger = logging.getLogger(__name__)


class RecipeFetcher:
    """Downloads recipe pages and runs them through the parsing pipeline."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            client: Optional httpx client to use instead of creating one.
                It is left open when the fetcher is closed, and its own
                redirect and timeout settings apply.
            timeout: Optional request timeout in seconds, defaults to
                RECIPE_IMPORT_TIMEOUT
            transport: Optional transport for the client the fetcher creates
        """
        self.headers = {
            "User-Agent": config.USER_AGENT,
            "Accept": config.ACCEPT,
        }
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            headers=self.headers,
            follow_redirects=True,
            timeout=timeout or config.TIMEOUT,
            transport=transport,
        )

    async def fetch_html(self, url: str) -> str:
        """
        Fetch the markup of a page.

        Raises:
            RecipeFetchError: On a non-2xx response or a network failure
        """
        logger.info(f"Fetching recipe page: {url}")
        try:
            response = await self.client.get(url, headers=self.headers)
        except httpx.HTTPError as e:
            raise RecipeFetchError(f"Failed to fetch URL: {str(e) or type(e).__name__}") from e

        if not response.is_success:
            raise RecipeFetchError(f"Failed to fetch URL: {response.status_code} {response.reason_phrase}")

        logger.debug(f"Fetched {len(response.text)} characters from {response.url}")
        return response.text

    async def fetch_recipe(self, url: str) -> Recipe:
        """Fetch a page and extract its recipe, keeping url as the source URL."""
        html = await self.fetch_html(url)
        return parse_recipe_from_html(html, url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        """Support for async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up resources."""
        await self.aclose()
