"""Redirect view.

Produced by the resolver for view names carrying the ``redirect:``
prefix. The remainder of the name is used verbatim as the redirect
target; no prefix or suffix is applied.

Example:
    >>> view = RedirectView("/orders/{order_id}")
    >>> result = await view.render({"order_id": 42})
    >>> result.headers["Location"]
    '/orders/42'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..types import RenderResult
from .base import UrlBasedView

SEE_OTHER = 303

_URI_VARIABLE = re.compile(r"\{([^/{}]+?)\}")


class RedirectView(UrlBasedView):
    """View that redirects to an absolute, context-relative or relative URL.

    Attributes:
        status_code: Redirect status code, 303 See Other by default.
        context_relative: Whether URLs starting with "/" are prefixed
            with the context path.
        context_path: Application context path used for context-relative
            URLs.
    """

    def __init__(
        self,
        redirect_url: str | None = None,
        status_code: int = SEE_OTHER,
        context_relative: bool = True,
    ) -> None:
        super().__init__(redirect_url)
        if not 300 <= status_code < 400:
            raise ValueError(f"Not a redirect status code: {status_code}")
        self._status_code = status_code
        self.context_relative = context_relative
        self.context_path = ""

    @property
    def status_code(self) -> int:
        return self._status_code

    def is_redirect_view(self) -> bool:
        return True

    async def check_resource_exists(self, locale: str | None) -> bool:
        # A redirect target is never probed.
        return True

    def create_target_url(self, model: Mapping[str, Any] | None = None) -> str:
        """Build the final redirect URL.

        Expands ``{name}`` URI variables from the model and prepends the
        context path for context-relative URLs.

        Args:
            model: Model attributes used to expand URI variables.

        Returns:
            The target URL.

        Raises:
            KeyError: If a URI variable has no value in the model.
        """
        url = self.url or ""
        if self.context_relative and url.startswith("/"):
            url = self.context_path.rstrip("/") + url

        values = dict(model or {})

        def expand(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in values:
                raise KeyError(f"No value for URI variable '{name}'")
            return quote(str(values[name]), safe="")

        return _URI_VARIABLE.sub(expand, url)

    async def render(
        self,
        model: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> RenderResult:
        return RenderResult(
            status_code=self._status_code,
            headers={"Location": self.create_target_url(model)},
        )

    def __repr__(self) -> str:
        return f"RedirectView(url={self.url!r}, status_code={self._status_code})"


__all__ = ["RedirectView", "SEE_OTHER"]
