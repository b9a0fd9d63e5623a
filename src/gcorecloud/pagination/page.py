"""Pages of a link-paginated collection.

A collection response looks like::

    {
      "results": [<resource>, ...],
      "links":   [{"href": "<url>", "rel": "next"}, ...]
    }

The page that carries no ``rel == "next"`` link is the last one.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

import httpx

from gcorecloud.errors import DecodeError
from gcorecloud.extract import DEFAULT_COLLECTION_KEY, extract_many, load_body

logger = logging.getLogger(__name__)

T = TypeVar("T")

NEXT_REL = "next"


@dataclass(frozen=True)
class Link:
    """A hyperlink attached to a page."""

    href: str
    rel: str


@dataclass(frozen=True)
class PageResult:
    """A fetched page body together with where it came from."""

    url: str
    body: Any
    raw: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "PageResult":
        """Wrap an HTTP response, decoding its JSON body.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        return cls(
            url=str(response.request.url),
            body=load_body(response.content),
            raw=response.content,
            headers=dict(response.headers),
        )


def parse_links(body: Any, links_key: str = "links") -> list[Link]:
    """Read the link list of a page body.

    Entries without a string ``href`` or ``rel`` are skipped.

    Raises:
        DecodeError: If the link field is present but is not a list.
    """
    if not isinstance(body, Mapping):
        return []
    raw_links = body.get(links_key)
    if raw_links is None:
        return []
    if not isinstance(raw_links, list):
        msg = f"Cannot decode page links: field '{links_key}' must be an array, got {type(raw_links).__name__}"
        raise DecodeError(msg, field_path=links_key, target="Link")

    links = []
    for index, entry in enumerate(raw_links):
        if not isinstance(entry, Mapping):
            logger.warning(f"Ignoring malformed link {links_key}[{index}]: {entry!r}")
            continue
        href, rel = entry.get("href"), entry.get("rel")
        if not isinstance(href, str) or not isinstance(rel, str) or not href:
            logger.warning(f"Ignoring malformed link {links_key}[{index}]: {entry!r}")
            continue
        links.append(Link(href=href, rel=rel))
    return links


def extract_next_url(links: Sequence[Link]) -> str | None:
    """Return the target of the first ``next`` link, or None."""
    for link in links:
        if link.rel == NEXT_REL:
            return link.href
    return None


class Page(ABC):
    """One fetched page of a collection.

    Subclasses implement :meth:`next_page_url` and :meth:`extract`;
    :class:`LinkedPage` does so for the shared conventions.
    """

    def __init__(self, result: PageResult):
        self.result = result

    @property
    def url(self) -> str:
        return self.result.url

    @property
    def body(self) -> Any:
        return self.result.body

    @abstractmethod
    def next_page_url(self) -> str | None:
        """URL of the following page, or None when this page is the last one."""

    @abstractmethod
    def extract(self) -> list:
        """Decode the resources held by this page."""

    def is_empty(self) -> bool:
        """True iff this page holds no resources."""
        return len(self.extract()) == 0


class LinkedPage(Page, Generic[T]):
    """A page following the shared ``results`` / ``links`` conventions.

    Subclasses set ``resource_model`` to the type of the resources.
    """

    resource_model: ClassVar[Any] = dict
    collection_key: ClassVar[str] = DEFAULT_COLLECTION_KEY
    links_key: ClassVar[str] = "links"

    def links(self) -> list[Link]:
        return parse_links(self.body, self.links_key)

    def next_page_url(self) -> str | None:
        return extract_next_url(self.links())

    def extract(self) -> list[T]:
        return extract_many(self.body, self.resource_model, self.collection_key)
