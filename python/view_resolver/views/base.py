"""Abstract base classes for views.

A view is a renderable target handed to the rendering stage once a view
name has been resolved. URL-based views additionally carry the backing
URL computed by the resolver and expose an asynchronous existence probe
that the resolver awaits before committing to the view.

Example Implementation:
    class MarkdownView(UrlBasedView):
        async def check_resource_exists(self, locale: str | None) -> bool:
            return await asyncio.to_thread(Path(self.url).is_file)

        async def render(self, model, locale=None) -> RenderResult:
            text = await asyncio.to_thread(Path(self.url).read_text)
            return RenderResult(body=markdown(text), media_type="text/html")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..types import RenderResult

DEFAULT_MEDIA_TYPES: tuple[str, ...] = ("text/html",)
DEFAULT_CHARSET = "utf-8"


class View(ABC):
    """Renderable view.

    Attributes:
        supported_media_types: Media types this view can produce.
        default_charset: Charset used when the media type names none.
    """

    def __init__(self) -> None:
        self._supported_media_types: list[str] = list(DEFAULT_MEDIA_TYPES)
        self._default_charset = DEFAULT_CHARSET

    @property
    def supported_media_types(self) -> list[str]:
        return self._supported_media_types

    @supported_media_types.setter
    def supported_media_types(self, media_types: Sequence[str]) -> None:
        self._supported_media_types = list(media_types)

    @property
    def default_charset(self) -> str:
        return self._default_charset

    @default_charset.setter
    def default_charset(self, charset: str) -> None:
        self._default_charset = charset

    @abstractmethod
    async def render(
        self,
        model: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> RenderResult:
        """Render the view with the given model.

        Args:
            model: Model attributes exposed to the view.
            locale: Locale of the request.

        Returns:
            The rendered result.
        """
        ...

    def is_redirect_view(self) -> bool:
        """Whether rendering this view sends a redirect."""
        return False


class UrlBasedView(View):
    """View backed by a URL.

    Subclasses must provide a no-argument constructor path, since the
    resolver instantiates the configured view class without arguments
    and sets the URL afterwards.

    Attributes:
        url: Backing URL of the resource.
        request_context_attribute: Model key under which a render context
            is exposed, or None.
    """

    def __init__(self, url: str | None = None) -> None:
        super().__init__()
        self._url = url
        self._request_context_attribute: str | None = None

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, url: str | None) -> None:
        self._url = url

    @property
    def request_context_attribute(self) -> str | None:
        return self._request_context_attribute

    @request_context_attribute.setter
    def request_context_attribute(self, name: str | None) -> None:
        self._request_context_attribute = name

    def after_properties_set(self) -> None:
        """Validate the view once its properties are set.

        Raises:
            ConfigurationError: If no URL was set.
        """
        if not self._url:
            raise ConfigurationError("Property 'url' is required")

    async def resource_exists(self, locale: str | None) -> bool:
        """Check whether the backing resource exists.

        The check runs off the calling thread where it touches I/O and
        can be cancelled by cancelling the awaiting task.

        Args:
            locale: Locale of the request.

        Returns:
            True if the resource exists.
        """
        return await self.check_resource_exists(locale)

    @abstractmethod
    async def check_resource_exists(self, locale: str | None) -> bool:
        """Probe the backing resource.

        Args:
            locale: Locale of the request.

        Returns:
            True if the resource exists, False if it is absent.

        Raises:
            Exception: Any failure of the probe itself, which the
                resolver propagates.
        """
        ...

    def merged_model(
        self,
        model: Mapping[str, Any] | None,
        locale: str | None = None,
    ) -> dict[str, Any]:
        """Build the model handed to the template.

        Exposes a render context under the request context attribute
        when one is configured.
        """
        merged = dict(model or {})
        if self._request_context_attribute:
            merged[self._request_context_attribute] = {
                "url": self._url,
                "locale": locale,
                "charset": self._default_charset,
            }
        return merged

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url={self._url!r})"


__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_MEDIA_TYPES",
    "UrlBasedView",
    "View",
]
