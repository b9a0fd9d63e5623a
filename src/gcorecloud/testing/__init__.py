"""Testing utilities for code built on the cloud API client.

Example:
    ```python
    from gcorecloud.testing import collection_body, mock_service_client


    def test_lists_regions():
        def handler(request):
            return httpx.Response(200, json=collection_body([{"id": 1, ...}]))

        client = mock_service_client(handler, "https://api.example.com/cloud/v1/regions")
        assert len(list_all_regions(client)) == 1
    ```
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx

from gcorecloud.client import ServiceClient

DEFAULT_RESOURCE_BASE = "https://api.example.com/cloud/v1/resources"


def collection_body(results: Sequence[Any], next_href: str | None = None, **extra: Any) -> dict[str, Any]:
    """Body of one collection page, linking to ``next_href`` when given."""
    links = [{"href": next_href, "rel": "next"}] if next_href else []
    return {"results": list(results), "links": links, **extra}


def linked_pages(base_url: str, pages: Sequence[Sequence[Any]]) -> dict[str, dict[str, Any]]:
    """Map page URLs to bodies of a collection split into ``pages``.

    The first page lives at ``base_url``, page ``n`` at ``base_url?page=n``;
    every page but the last links to its successor.
    """
    urls = [base_url] + [f"{base_url}?page={n}" for n in range(2, len(pages) + 1)]
    bodies = {}
    for index, (url, results) in enumerate(zip(urls, pages, strict=True)):
        next_href = urls[index + 1] if index + 1 < len(urls) else None
        bodies[url] = collection_body(results, next_href)
    return bodies


def serve_json(bodies: Mapping[str, Any]) -> Callable[[httpx.Request], httpx.Response]:
    """MockTransport handler answering each known URL with its JSON body and 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url not in bodies:
            return httpx.Response(404, json={"message": f"{url} not found", "exception_class": "NotFound"})
        return httpx.Response(200, json=bodies[url])

    return handler


def mock_service_client(
    handler: Callable[[httpx.Request], httpx.Response],
    resource_base: str = DEFAULT_RESOURCE_BASE,
) -> ServiceClient:
    """ServiceClient whose requests are answered by ``handler``."""
    return ServiceClient(resource_base, httpx.Client(transport=httpx.MockTransport(handler)))


__all__ = [
    "DEFAULT_RESOURCE_BASE",
    "collection_body",
    "linked_pages",
    "mock_service_client",
    "serve_json",
]
