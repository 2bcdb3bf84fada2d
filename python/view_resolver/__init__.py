"""
View Resolver

This package resolves symbolic view names, as returned by request
handlers, to renderable views backed by URLs. A resolver decides whether
it is responsible for a name, builds the view for ``prefix + name +
suffix``, runs it through an optional initialization context and checks
asynchronously that the resource exists before returning it.

Example:
    >>> import view_resolver
    >>> resolver = view_resolver.UrlBasedViewResolver(
    ...     view_class=view_resolver.FileTemplateView,
    ...     prefix="templates/",
    ...     suffix=".html",
    ...     view_names=["*"],
    ... )
    >>> resolver.after_properties_set()

    >>> # Resolve a view (None if the template does not exist)
    >>> view = await resolver.resolve_view_name("home", "en_US")
    >>> result = await view.render({"user": "Ada"})

    >>> # Redirects bypass the URL template and the existence check
    >>> view = await resolver.resolve_view_name("redirect:/login", "en_US")
    >>> view.is_redirect_view()
    True

    >>> # Load configuration from YAML
    >>> config = view_resolver.load_resolver_config("config/views.yaml")
    >>> resolver = view_resolver.UrlBasedViewResolver(config)
"""

from __future__ import annotations

__version__ = "0.1.0"

from view_resolver.chain import ViewResolver, ViewResolverChain
from view_resolver.config import (
    CONFIG_PATH_ENV,
    LOWEST_PRECEDENCE,
    ResolverConfiguration,
    config_from_dict,
    find_config_file,
    load_resolver_config,
)
from view_resolver.event_bridge import EventBridge, EventNames
from view_resolver.exceptions import (
    ConfigurationError,
    InitializationError,
    ProbeError,
    ViewInstantiationError,
    ViewResolverError,
    ViewTypeMismatchError,
)
from view_resolver.factory import ResourceViewFactory, ViewTypeRegistry
from view_resolver.lifecycle import InitializationContext, PostProcessorContext
from view_resolver.logging import (
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from view_resolver.matching import NameMatcher, simple_match, simple_match_any
from view_resolver.resolver import REDIRECT_URL_PREFIX, UrlBasedViewResolver
from view_resolver.types import LogContext, RenderResult
from view_resolver.views import (
    FileTemplateView,
    HttpTemplateView,
    RedirectView,
    UrlBasedView,
    View,
    ViewWrapper,
)

__all__ = [
    "__version__",
    # Resolution
    "UrlBasedViewResolver",
    "REDIRECT_URL_PREFIX",
    "ViewResolver",
    "ViewResolverChain",
    # Matching
    "NameMatcher",
    "simple_match",
    "simple_match_any",
    # Construction
    "ResourceViewFactory",
    "ViewTypeRegistry",
    # Lifecycle
    "InitializationContext",
    "PostProcessorContext",
    # Configuration
    "ResolverConfiguration",
    "LOWEST_PRECEDENCE",
    "CONFIG_PATH_ENV",
    "config_from_dict",
    "find_config_file",
    "load_resolver_config",
    # Views
    "View",
    "UrlBasedView",
    "RedirectView",
    "FileTemplateView",
    "HttpTemplateView",
    "ViewWrapper",
    # Types
    "LogContext",
    "RenderResult",
    # Events
    "EventBridge",
    "EventNames",
    # Exceptions
    "ViewResolverError",
    "ConfigurationError",
    "ViewTypeMismatchError",
    "ViewInstantiationError",
    "ProbeError",
    "InitializationError",
    # Logging
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
