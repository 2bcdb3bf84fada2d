"""Resolver chain - order-based view resolution.

The ViewResolverChain tries view resolvers in order until one returns a
view. A resolver returning None means "not mine" and the next one is
tried; a resolver raising stops the chain and the error propagates.

Usage:
    chain = ViewResolverChain()
    chain.add_resolver(UrlBasedViewResolver(
        name="local", view_class=FileTemplateView, order=10
    ))
    chain.add_resolver(UrlBasedViewResolver(
        name="remote", view_class=HttpTemplateView, order=20
    ))

    view = await chain.resolve_view_name("home", "en_US")
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Protocol

from .logging import log_debug

if TYPE_CHECKING:
    from .views import View


class ViewResolver(Protocol):
    """Anything able to resolve view names."""

    @property
    def name(self) -> str: ...

    @property
    def order(self) -> int: ...

    async def resolve_view_name(self, view_name: str, locale: str | None = None) -> View | None: ...


class ViewResolverChain:
    """Order-sorted chain of view resolvers.

    Resolvers with equal order keep their insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty resolver chain."""
        self._resolvers: list[ViewResolver] = []
        self._resolvers_by_name: dict[str, ViewResolver] = {}
        self._lock = threading.RLock()

    def add_resolver(self, resolver: ViewResolver) -> ViewResolverChain:
        """Add a resolver to the chain.

        Args:
            resolver: Resolver to add.

        Returns:
            Self for method chaining.

        Raises:
            ValueError: If a resolver with the same name is already present.
        """
        with self._lock:
            if resolver.name in self._resolvers_by_name:
                raise ValueError(f"Resolver '{resolver.name}' already in chain")
            self._resolvers.append(resolver)
            self._resolvers.sort(key=lambda r: r.order)
            self._resolvers_by_name[resolver.name] = resolver
        return self

    def remove_resolver(self, name: str) -> ViewResolver | None:
        """Remove a resolver by name.

        Args:
            name: Resolver name to remove.

        Returns:
            Removed resolver or None if not found.
        """
        with self._lock:
            resolver = self._resolvers_by_name.pop(name, None)
            if resolver:
                self._resolvers.remove(resolver)
            return resolver

    def get_resolver(self, name: str) -> ViewResolver | None:
        return self._resolvers_by_name.get(name)

    async def resolve_view_name(self, view_name: str, locale: str | None = None) -> View | None:
        """Resolve a view name with the first resolver that returns a view.

        Args:
            view_name: Symbolic view name.
            locale: Locale of the request.

        Returns:
            The first view found, or None if no resolver returned one.
        """
        with self._lock:
            resolvers = list(self._resolvers)

        for resolver in resolvers:
            view = await resolver.resolve_view_name(view_name, locale)
            if view is None:
                continue

            log_debug(f"ViewResolverChain: Resolved '{view_name}' via '{resolver.name}'")
            return view

        log_debug(f"ViewResolverChain: No resolver could resolve '{view_name}'")
        return None

    def chain_info(self) -> list[dict[str, Any]]:
        """Get chain info for debugging.

        Returns:
            List of resolver info dicts.
        """
        return [
            {"name": resolver.name, "order": resolver.order}
            for resolver in self._resolvers
        ]

    def __len__(self) -> int:
        return len(self._resolvers)

    @property
    def resolver_names(self) -> list[str]:
        """Names of resolvers in order."""
        return [r.name for r in self._resolvers]


__all__ = ["ViewResolver", "ViewResolverChain"]
