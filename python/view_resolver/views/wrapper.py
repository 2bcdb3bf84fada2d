"""View wrapper for decorating resolved views.

Initialization contexts may replace a freshly created view with a
decorated one, for example to time rendering. ViewWrapper is the base
for such decorations: it is itself a View, so the resolver accepts it,
and it forwards everything else to the wrapped view.

The resolver always probes the URL-based view it created, never the
wrapper, since existence depends on the URL and not the decoration.

Example:
    >>> class TimedView(ViewWrapper):
    ...     async def render(self, model=None, locale=None):
    ...         started = time.monotonic()
    ...         try:
    ...             return await super().render(model, locale)
    ...         finally:
    ...             metrics.observe(time.monotonic() - started)
    ...
    >>> wrapped = TimedView(view)
    >>> wrapped.unwrap() is view
    True
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from .base import View

if TYPE_CHECKING:
    from ..types import RenderResult


class ViewWrapper(View):
    """View that delegates to a wrapped view.

    Attributes:
        wrapped_view: The wrapped view instance.
    """

    def __init__(self, view: View) -> None:
        """Initialize the wrapper.

        Args:
            view: The view to wrap.

        Raises:
            TypeError: If view is not a View.
        """
        if not isinstance(view, View):
            raise TypeError(f"Cannot wrap {view.__class__.__name__}: not a View")
        self._view = view

    @property
    def wrapped_view(self) -> View:
        return self._view

    @property
    def supported_media_types(self) -> list[str]:
        return self._view.supported_media_types

    @supported_media_types.setter
    def supported_media_types(self, media_types: Sequence[str]) -> None:
        self._view.supported_media_types = media_types

    @property
    def default_charset(self) -> str:
        return self._view.default_charset

    @default_charset.setter
    def default_charset(self, charset: str) -> None:
        self._view.default_charset = charset

    async def render(
        self,
        model: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> RenderResult:
        return await self._view.render(model, locale)

    def is_redirect_view(self) -> bool:
        return self._view.is_redirect_view()

    def unwrap(self) -> View:
        """Get the innermost wrapped view.

        Returns:
            The original view beneath all wrapper layers.
        """
        view = self._view
        while isinstance(view, ViewWrapper):
            view = view.wrapped_view
        return view

    def __getattr__(self, name: str) -> Any:
        """Delegate attribute access to the wrapped view."""
        if name == "_view":
            raise AttributeError(name)
        return getattr(self._view, name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._view!r})"


__all__ = ["ViewWrapper"]
