"""HTTP-backed template view.

The view URL names a template served over HTTP, absolute or relative to
``base_url``. The existence probe issues a ``HEAD`` request.

Probe outcomes:
- 2xx/3xx: the template exists
- 404/410: the template is absent, the next resolver may be tried
- any other status or a transport error: ``ProbeError``

Example:
    >>> class CdnTemplateView(HttpTemplateView):
    ...     base_url = "https://cdn.example.com/templates/"
    ...
    >>> resolver = UrlBasedViewResolver(view_class=CdnTemplateView, suffix=".html")
"""

from __future__ import annotations

from collections.abc import Mapping
from string import Template
from typing import Any

import httpx

from ..exceptions import ProbeError
from ..logging import log_trace
from ..types import RenderResult
from .base import UrlBasedView

# Status codes meaning the template is not there
ABSENT_STATUS_CODES = {
    404,  # Not Found
    410,  # Gone
}


class HttpTemplateView(UrlBasedView):
    """Template view fetched over HTTP with httpx.

    Class Attributes:
        base_url: Base URL relative view URLs are resolved against.
        default_timeout: Request timeout in seconds.
        default_headers: Headers sent with every request.
    """

    # Class attributes - can be overridden by subclasses
    base_url: str = ""
    default_timeout: float = 10.0
    default_headers: dict[str, str] = {}

    def __init__(
        self,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(url)
        self._client = client

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.default_timeout,
            headers=self.default_headers,
        )

    async def _request(self, method: str) -> httpx.Response:
        url = self.url or ""
        try:
            if self._client is not None:
                return await self._client.request(method, url)
            async with self._new_client() as client:
                return await client.request(method, url)
        except httpx.HTTPError as e:
            raise ProbeError(f"{method} {url} failed: {e}", url=url) from e

    async def check_resource_exists(self, locale: str | None) -> bool:
        response = await self._request("HEAD")
        log_trace(
            "Probed template URL",
            {"url": self.url, "status_code": response.status_code},
        )

        if response.status_code in ABSENT_STATUS_CODES:
            return False
        if response.status_code < 400:
            return True
        raise ProbeError(
            f"HEAD {self.url} returned HTTP {response.status_code}", url=self.url
        )

    async def render(
        self,
        model: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> RenderResult:
        response = await self._request("GET")
        response.raise_for_status()
        body = Template(response.text).safe_substitute(self.merged_model(model, locale))
        return RenderResult(
            media_type=self.supported_media_types[0] if self.supported_media_types else None,
            charset=self.default_charset,
            body=body,
        )


__all__ = ["HttpTemplateView", "ABSENT_STATUS_CODES"]
