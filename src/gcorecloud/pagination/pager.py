"""Lazy traversal of link-paginated collections.

The pager never assumes a page size or a page count: it fetches the base
URL, asks that page for its ``next`` link, fetches that, and stops when a
page has no ``next`` link.

Example:
    ```python
    pager = Pager(client, client.service_url(), RegionPage)

    for page in pager:
        for region in page.extract():
            print(region.display_name)

    regions = Pager(client, client.service_url(), RegionPage).all_pages()
    ```
"""

import enum
import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from gcorecloud.pagination.page import Page, PageResult

if TYPE_CHECKING:
    from gcorecloud.client import ServiceClient

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Page)


class PagerState(enum.Enum):
    START = "start"
    FETCHING = "fetching"
    DONE = "done"
    FAILED = "failed"


class Pager(Generic[P]):
    """Sequential, single-use cursor over the pages of one collection.

    A pager is not safe to share; concurrent traversals need their own
    pager. Errors from the transport or from decoding a page end the
    traversal and propagate to the caller. Nothing is retried.

    Args:
        client: Client used to fetch each page.
        initial_url: URL of the first page.
        create_page: Builds the resource-specific page from a fetched result.
    """

    def __init__(
        self,
        client: "ServiceClient",
        initial_url: str,
        create_page: Callable[[PageResult], P],
    ) -> None:
        self._client = client
        self._create_page = create_page
        self._initial_url = initial_url
        self._next_url: str | None = initial_url
        self._state = PagerState.START
        self.pages_fetched = 0

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state in (PagerState.DONE, PagerState.FAILED)

    def next_page(self) -> P | None:
        """Fetch the next page.

        Returns:
            The page, or None once the previous page had no ``next`` link.

        Raises:
            httpx.HTTPError: If fetching fails.
            APIError: If the server answers with an error status.
            DecodeError: If the page body or its links cannot be decoded.
        """
        if self.done or self._next_url is None:
            return None

        url = self._next_url
        self._state = PagerState.FETCHING
        try:
            response = self._client.get(url)
            page = self._create_page(PageResult.from_response(response))
            next_url = page.next_page_url()
        except Exception:
            self._state = PagerState.FAILED
            self._next_url = None
            logger.debug(f"Pagination of {self._initial_url} failed on page {self.pages_fetched + 1} ({url})")
            raise

        self.pages_fetched += 1
        if next_url is None:
            self._state = PagerState.DONE
            self._next_url = None
            logger.debug(f"Pagination of {self._initial_url} finished after {self.pages_fetched} page(s)")
        else:
            self._next_url = self._client.resolve_url(next_url, relative_to=page.url)
            logger.debug(f"Page {self.pages_fetched} of {self._initial_url} links to {self._next_url}")
        return page

    def __iter__(self) -> Iterator[P]:
        while (page := self.next_page()) is not None:
            yield page

    def all_pages(self) -> list:
        """Traverse every remaining page and concatenate their resources.

        Either every page is fetched and decoded, or the error is raised;
        resources of the pages fetched before a failure are discarded.
        """
        resources = []
        for page in self:
            resources.extend(page.extract())
        return resources
