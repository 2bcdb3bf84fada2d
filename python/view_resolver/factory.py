"""View construction.

ResourceViewFactory turns a view name into a fully configured URL-based
view. ViewTypeRegistry maps short type keys, as used in YAML
configuration, to the view classes or factories that build them.

Example:
    >>> registry = ViewTypeRegistry.default()
    >>> registry.register("cdn", CdnTemplateView)
    >>>
    >>> factory = ResourceViewFactory(
    ...     ResolverConfiguration(view_class=registry.get("file"), prefix="templates/")
    ... )
    >>> factory.create_view("home").url
    'templates/home'
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from .exceptions import ViewInstantiationError
from .views import FileTemplateView, HttpTemplateView, RedirectView, UrlBasedView

if TYPE_CHECKING:
    from .config import ResolverConfiguration


class ViewTypeRegistry:
    """Registry of view types by key.

    Supports registering:
    - UrlBasedView subclasses (instantiated without arguments)
    - Factory functions (called without arguments)

    Thread-safe for concurrent registration and lookup.
    """

    def __init__(self) -> None:
        self._view_types: dict[str, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def default(cls) -> ViewTypeRegistry:
        """Create a registry with the built-in view types.

        Returns:
            Registry with "file", "http" and "redirect" registered.
        """
        registry = cls()
        registry.register("file", FileTemplateView)
        registry.register("http", HttpTemplateView)
        registry.register("redirect", RedirectView)
        return registry

    def register(self, key: str, view_type: Any) -> None:
        """Register a view type.

        Args:
            key: View type identifier.
            view_type: UrlBasedView subclass or zero-argument factory.

        Raises:
            TypeError: If view_type is neither a class nor callable.
        """
        if not callable(view_type):
            raise TypeError(f"View type for '{key}' must be a class or factory")
        with self._lock:
            self._view_types[key] = view_type

    def unregister(self, key: str) -> bool:
        """Unregister a view type.

        Args:
            key: View type identifier to remove.

        Returns:
            True if the type was removed, False if not found.
        """
        with self._lock:
            if key in self._view_types:
                del self._view_types[key]
                return True
            return False

    def get(self, key: str) -> Any | None:
        return self._view_types.get(key)

    def registered_types(self) -> list[str]:
        return list(self._view_types.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._view_types


class ResourceViewFactory:
    """Builds configured URL-based views from view names.

    Reads the shared configuration only, so one factory may serve
    concurrent resolutions.
    """

    def __init__(self, config: ResolverConfiguration) -> None:
        self._config = config

    @property
    def config(self) -> ResolverConfiguration:
        return self._config

    def instantiate_view(self) -> UrlBasedView:
        """Instantiate the configured view class without arguments.

        Returns:
            A fresh, unconfigured view.

        Raises:
            ViewInstantiationError: If no view class is configured, the
                class cannot be constructed without arguments, or the
                result is not a UrlBasedView.
        """
        view_class = self._config.view_class
        if view_class is None:
            raise ViewInstantiationError("No view class")

        type_name = getattr(view_class, "__name__", repr(view_class))
        try:
            view = view_class()
        except Exception as e:
            raise ViewInstantiationError(
                f"Failed to instantiate view class [{type_name}]: {e}"
            ) from e

        if not isinstance(view, UrlBasedView):
            raise ViewInstantiationError(
                f"View factory [{type_name}] returned {view.__class__.__name__}, "
                f"not a {UrlBasedView.__name__}"
            )
        return view

    def create_view(self, view_name: str) -> UrlBasedView:
        """Create a configured view for a view name.

        The URL is ``prefix + view_name + suffix`` verbatim. View names
        are not normalized or sanitized, so names from untrusted input
        must be validated before they reach the resolver.

        Args:
            view_name: Symbolic view name.

        Returns:
            The configured view. Existence is not checked here.
        """
        config = self._config
        view = self.instantiate_view()
        view.supported_media_types = config.supported_media_types
        view.default_charset = config.default_charset
        view.url = config.prefix + view_name + config.suffix

        if config.request_context_attribute is not None:
            view.request_context_attribute = config.request_context_attribute

        return view


__all__ = [
    "ResourceViewFactory",
    "ViewTypeRegistry",
]
