"""URL-based view resolver.

Resolves symbolic view names to views by building a URL from a prefix,
the view name and a suffix, then confirming asynchronously that the
resource behind the URL exists. A view name the resolver does not handle,
or whose resource is absent, resolves to None so that the next resolver
in a chain can be tried.

Resolution Contract:
1. Names not matching ``view_names`` resolve to None without creating a
   view or probing anything
2. ``redirect:<url>`` names produce a redirect view for ``<url>`` as is;
   redirects are never probed
3. Other names produce a view of the configured class for
   ``prefix + name + suffix``
4. The view passes through the initialization context, if any
5. The URL-based view is probed; True returns the (possibly decorated)
   view, False returns None, and a probe failure propagates

Views are resolved independently of the locale; the locale is only
passed on to the existence probe.

Example:
    >>> resolver = UrlBasedViewResolver(
    ...     view_class=FileTemplateView,
    ...     prefix="templates/",
    ...     suffix=".html",
    ... )
    >>> resolver.after_properties_set()
    >>> view = await resolver.resolve_view_name("home", "en_US")
    >>> view.url
    'templates/home.html'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .config import ResolverConfiguration
from .event_bridge import EventNames
from .exceptions import ConfigurationError
from .factory import ResourceViewFactory
from .logging import log_debug, log_info, log_warn
from .matching import NameMatcher
from .types import LogContext
from .views import View

if TYPE_CHECKING:
    from .event_bridge import EventBridge
    from .views import UrlBasedView

REDIRECT_URL_PREFIX = "redirect:"


class UrlBasedViewResolver:
    """View resolver mapping view names directly to URLs.

    The configuration is validated once by after_properties_set() (or
    lazily on first resolution) and must not be changed afterwards;
    concurrent resolutions then share it without locking.

    Attributes:
        config: The resolver configuration.
        name: Resolver name for logging and chain introspection.
        order: Position in a resolver chain (lower = tried first).
    """

    REDIRECT_URL_PREFIX = REDIRECT_URL_PREFIX

    def __init__(
        self,
        config: ResolverConfiguration | None = None,
        *,
        name: str | None = None,
        event_bridge: EventBridge | None = None,
        **settings: Any,
    ) -> None:
        """Initialize the resolver.

        Args:
            config: Resolver configuration. If omitted, one is built from
                the keyword settings.
            name: Resolver name; defaults to the class name.
            event_bridge: Bridge to publish resolution events on.
            **settings: ResolverConfiguration fields, when no config is given.

        Raises:
            TypeError: If both a config and keyword settings are given.
            ConfigurationError: If a setting is invalid, such as a view
                class that is not a UrlBasedView.
        """
        if config is None:
            try:
                config = ResolverConfiguration(**settings)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid resolver config: {e}") from e
        elif settings:
            raise TypeError("Pass either a configuration or keyword settings, not both")

        self._config = config
        self._name = name or self.__class__.__name__
        self._event_bridge = event_bridge
        self._name_matcher: NameMatcher | None = None
        self._view_factory: ResourceViewFactory | None = None

    @property
    def config(self) -> ResolverConfiguration:
        return self._config

    @property
    def name(self) -> str:
        return self._name

    @property
    def order(self) -> int:
        return self._config.order

    def after_properties_set(self) -> None:
        """Validate the configuration and prepare for resolution.

        Raises:
            ConfigurationError: If no view class is configured.
        """
        self._configure()

    def _configure(self) -> tuple[NameMatcher, ResourceViewFactory]:
        self._config.validate_required()
        name_matcher = NameMatcher(self._config.view_names)
        view_factory = ResourceViewFactory(self._config)
        self._name_matcher = name_matcher
        self._view_factory = view_factory
        log_info(
            f"Configured view resolver '{self._name}'",
            {
                "resolver": self._name,
                "prefix": self._config.prefix,
                "suffix": self._config.suffix,
                "view_names": self._config.view_names,
            },
        )
        return name_matcher, view_factory

    def _ensure_ready(self) -> tuple[NameMatcher, ResourceViewFactory]:
        if self._name_matcher is not None and self._view_factory is not None:
            return self._name_matcher, self._view_factory
        return self._configure()

    def can_handle(self, view_name: str, locale: str | None = None) -> bool:
        """Check whether this resolver handles a view name.

        Args:
            view_name: Symbolic view name.
            locale: Locale of the request.

        Returns:
            True if no view names are configured or one of them matches.
        """
        name_matcher, _ = self._ensure_ready()
        return name_matcher.can_handle(view_name, locale)

    def create_view(self, view_name: str) -> UrlBasedView:
        """Create a configured view of the configured class.

        Args:
            view_name: Symbolic view name.

        Returns:
            The view with its URL set; existence is not checked.

        Raises:
            ViewInstantiationError: If the view class cannot be constructed.
        """
        _, view_factory = self._ensure_ready()
        return view_factory.create_view(view_name)

    def create_redirect_view(self, redirect_url: str) -> UrlBasedView:
        """Create the view for a redirect target.

        Args:
            redirect_url: The view name with the redirect prefix removed.

        Returns:
            View built by the configured redirect view provider.
        """
        return self._config.redirect_view_provider(redirect_url)

    def apply_lifecycle_methods(self, view_name: str, view: UrlBasedView) -> View:
        """Run a created view through the initialization context.

        Args:
            view_name: The view name the view was created for.
            view: The created view.

        Returns:
            The initialized view, or the original view if there is no
            initialization context or it returned something that is not
            a View.
        """
        context = self._config.initialization_context
        if context is None:
            return view

        initialized = context.initialize(view, view_name)
        if isinstance(initialized, View):
            return initialized

        log_warn(
            f"Initialization of view '{view_name}' returned "
            f"{initialized.__class__.__name__}, keeping original view",
            {"view_name": view_name, "resolver": self._name},
        )
        return view

    async def resolve_view_name(self, view_name: str, locale: str | None = None) -> View | None:
        """Resolve a view name to a view.

        Args:
            view_name: Symbolic view name.
            locale: Locale of the request, passed to the existence probe.

        Returns:
            The resolved view, or None if this resolver does not handle
            the name or the resource does not exist.

        Raises:
            ViewInstantiationError: If the view class cannot be constructed.
            Exception: Whatever the initialization context or the
                existence probe raised.
        """
        context = LogContext(
            view_name=view_name,
            locale=locale,
            resolver=self._name,
            operation="resolve_view_name",
        )

        if not self.can_handle(view_name, locale):
            log_debug("View name not handled", context)
            self._publish(EventNames.VIEW_REJECTED, view_name, locale)
            return None

        if view_name.startswith(REDIRECT_URL_PREFIX):
            url_view = self.create_redirect_view(view_name[len(REDIRECT_URL_PREFIX) :])
            view = self.apply_lifecycle_methods(view_name, url_view)
            log_debug(f"Resolved redirect to '{url_view.url}'", context)
            self._publish(EventNames.VIEW_RESOLVED, view_name, locale, view)
            return view

        url_view = self.create_view(view_name)
        view = self.apply_lifecycle_methods(view_name, url_view)
        context.url = url_view.url

        # Existence depends on the URL, so probe the view owning it.
        try:
            exists = await url_view.resource_exists(locale)
        except Exception as e:
            log_warn(f"Existence check failed: {e}", context)
            self._publish(EventNames.VIEW_PROBE_FAILED, view_name, locale, e)
            raise

        if not exists:
            log_debug("View resource not found", context)
            self._publish(EventNames.VIEW_NOT_FOUND, view_name, locale)
            return None

        log_debug("Resolved view", context)
        self._publish(EventNames.VIEW_RESOLVED, view_name, locale, view)
        return view

    def _publish(self, event: str, *args: Any) -> None:
        if self._event_bridge is None or not self._event_bridge.is_active:
            return
        # Subscribers never change the resolution outcome.
        try:
            self._event_bridge.publish(event, *args)
        except Exception as e:
            log_warn(
                f"Event subscriber for '{event}' failed: {e}",
                {"resolver": self._name, "event": event, "error_type": e.__class__.__name__},
            )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"prefix={self._config.prefix!r}, suffix={self._config.suffix!r})"
        )


__all__ = ["REDIRECT_URL_PREFIX", "UrlBasedViewResolver"]
