"""Custom exceptions for view resolution.

This module provides a hierarchy of exceptions for error handling
in the view resolver. A view name that a resolver is not responsible
for, or whose resource does not exist, is not an error: resolution
simply returns None so the next resolver can be tried.
"""

from __future__ import annotations


class ViewResolverError(Exception):
    """Base exception for all view resolver errors.

    Example:
        >>> try:
        ...     view = await resolver.resolve_view_name("home", "en")
        ... except ViewResolverError as e:
        ...     print(f"Resolution error: {e}")
    """

    pass


class ConfigurationError(ViewResolverError):
    """Raised when a resolver is misconfigured.

    Fatal and raised at configuration or construction time, never retried.

    Common causes:
    - The required view class was never configured
    - The configured view class cannot be instantiated
    - A YAML configuration file could not be read
    """

    pass


class ViewTypeMismatchError(ConfigurationError):
    """Raised when a configured view class is not a URL-based view.

    Example:
        >>> config.view_class = dict
        Traceback (most recent call last):
        ...
        ViewTypeMismatchError: Given view class [dict] is not of type [UrlBasedView]
    """

    pass


class ViewInstantiationError(ConfigurationError):
    """Raised when the configured view class fails to construct a view.

    Surfaced at the resolution call that attempted construction.
    """

    pass


class ProbeError(ViewResolverError):
    """Raised when a resource existence check itself fails.

    Distinct from a resource being absent: an absent resource yields
    False from the probe, while an I/O or transport failure raises.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InitializationError(ViewResolverError):
    """Raised by an initialization context that rejects a view."""

    def __init__(self, message: str, view_name: str | None = None) -> None:
        super().__init__(message)
        self.view_name = view_name


__all__ = [
    "ViewResolverError",
    "ConfigurationError",
    "ViewTypeMismatchError",
    "ViewInstantiationError",
    "ProbeError",
    "InitializationError",
]
