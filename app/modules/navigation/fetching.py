"""Fetching target pages and extracting the parts a transition needs."""

from typing import Optional

import httpx

from infrastructure.logging import get_module_logger
from modules.navigation.document import PageDocument
from modules.navigation.errors import MalformedPageError, PageFetchError
from modules.navigation.models import PageFragment

logger = get_module_logger()


def extract_fragment(
    markup: str, content_selector: str = "main", path: Optional[str] = None
) -> PageFragment:
    """Pull the content region, title and description out of a document.

    Raises:
        MalformedPageError: If the document has no content region.
    """
    document = PageDocument(markup)
    region = document.content_region(content_selector)
    if region is None:
        raise MalformedPageError("No main content found in page", path=path)
    return PageFragment(
        main_content=str(region),
        title=document.title,
        description=document.description,
    )


class PageFetcher:
    """Fetches same-origin HTML documents over an httpx client.

    No timeout is applied beyond the client's own configuration.
    """

    def __init__(self, client: httpx.AsyncClient, content_selector: str = "main"):
        self.client = client
        self.content_selector = content_selector

    async def fetch_fragment(self, path: str) -> PageFragment:
        """Fetch path and extract its fragment.

        Raises:
            PageFetchError: On a non-success status.
            MalformedPageError: If the page has no content region.
            httpx.RequestError: On network failure.
        """
        response = await self.client.get(path)
        if not response.is_success:
            raise PageFetchError(path, response.status_code)
        logger.debug("page_fetched", path=path, status_code=response.status_code)
        return extract_fragment(response.text, self.content_selector, path=path)
