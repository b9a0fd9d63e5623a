"""Service client: URL construction and request execution for one API resource family."""

import logging
import time
from collections.abc import Collection
from typing import Any

import httpx

from gcorecloud.auth import APIKeyAuth
from gcorecloud.config import ClientSettings
from gcorecloud.errors import raise_for_status

logger = logging.getLogger(__name__)


class ServiceClient:
    """HTTP client bound to the resource base URL of one API service.

    ``resource_base`` is an absolute URL such as
    ``https://api.gcore.com/cloud/v1/loadbalancers/1/2/``; per-resource URLs
    are built from it with :meth:`service_url`. Transport concerns
    (timeouts, TLS, retries, auth) are configured on the wrapped
    ``httpx.Client``.

    Can be used as a context manager for automatic cleanup.
    """

    def __init__(self, resource_base: str, http_client: httpx.Client):
        if not resource_base:
            msg = "resource_base cannot be empty"
            raise ValueError(msg)
        if not resource_base.endswith("/"):
            resource_base += "/"
        self.resource_base = resource_base
        self.http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *path: str | int,
        version: str = "v1",
        http_client: httpx.Client | None = None,
    ) -> "ServiceClient":
        """Create a client for ``{api_url}/{version}/{path...}/``.

        Args:
            settings: Connection settings.
            path: Resource path segments, e.g. ``("loadbalancers", 1, 2)``.
            version: API version segment.
            http_client: Pre-built client; one is created from settings if omitted.

        Raises:
            ValueError: If a path segment is None, e.g. an unset project or region id.
        """
        if any(p is None for p in path):
            msg = f"path segments cannot be None: {path!r}"
            raise ValueError(msg)
        segments = [settings.api_url, version, *(str(p).strip("/") for p in path)]
        if http_client is None:
            http_client = httpx.Client(
                auth=APIKeyAuth(settings.api_key),
                headers={"Accept": "application/json"},
                timeout=settings.timeout,
            )
        return cls("/".join(segments), http_client)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the wrapped HTTP client."""
        self.http_client.close()

    def service_url(self, *parts: str | int) -> str:
        """Join path parts onto the resource base."""
        if not parts:
            return self.resource_base.rstrip("/")
        return self.resource_base + "/".join(str(p) for p in parts)

    def resolve_url(self, href: str, relative_to: str | None = None) -> str:
        """Resolve a server-provided link, which may be relative, to an absolute URL."""
        return str(httpx.URL(relative_to or self.resource_base).join(href))

    def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        ok_codes: Collection[int] | None = None,
    ) -> httpx.Response:
        """Send a request and check its status.

        Args:
            method: HTTP method.
            url: Absolute URL.
            json: Optional JSON body.
            ok_codes: Accepted status codes; any 2xx when omitted.

        Returns:
            The HTTP response.

        Raises:
            httpx.HTTPError: If the transport fails.
            APIError: If the response status is not accepted.
        """
        start_time = time.monotonic()
        logger.debug(f"{method} {url}")
        try:
            response = self.http_client.request(method, url, json=json)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed after {time.monotonic() - start_time:.3f}s: {e}")
            raise

        logger.debug(f"{method} {url} -> {response.status_code} in {time.monotonic() - start_time:.3f}s")
        raise_for_status(response, ok_codes)
        return response

    def get(self, url: str, *, ok_codes: Collection[int] | None = None) -> httpx.Response:
        return self.request("GET", url, ok_codes=ok_codes)

    def post(self, url: str, body: Any = None, *, ok_codes: Collection[int] | None = None) -> httpx.Response:
        return self.request("POST", url, json=body, ok_codes=ok_codes)

    def patch(self, url: str, body: Any = None, *, ok_codes: Collection[int] | None = None) -> httpx.Response:
        return self.request("PATCH", url, json=body, ok_codes=ok_codes)

    def delete(self, url: str, *, ok_codes: Collection[int] | None = None) -> httpx.Response:
        return self.request("DELETE", url, ok_codes=ok_codes)
