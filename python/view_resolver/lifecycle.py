"""Post-construction initialization of views.

A resolver hands every view it creates to its initialization context,
if one is configured. The context may return the same view or a
decorated replacement; anything that is not a View is discarded by the
resolver in favour of the original.

Example:
    >>> context = PostProcessorContext()
    >>> context.add_post_processor(lambda view, name: TimedView(view))
    >>> resolver = UrlBasedViewResolver(
    ...     view_class=FileTemplateView,
    ...     initialization_context=context,
    ... )
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .logging import log_debug

PostProcessor = Callable[[Any, str], Any]


@runtime_checkable
class InitializationContext(Protocol):
    """Component registry able to initialize freshly created views."""

    def initialize(self, view: Any, view_name: str) -> Any:
        """Initialize a view.

        Args:
            view: The freshly created view.
            view_name: The view name the view was created for.

        Returns:
            The view itself or a replacement for it.
        """
        ...


class PostProcessorContext:
    """Initialization context running an ordered list of post-processors.

    Each post-processor receives the result of the previous one and the
    view name. Exceptions raised by a post-processor propagate.

    Thread-safe for registration; initialize() reads a snapshot.
    """

    def __init__(self, post_processors: list[PostProcessor] | None = None) -> None:
        self._post_processors: list[PostProcessor] = list(post_processors or [])
        self._lock = threading.RLock()

    def add_post_processor(self, post_processor: PostProcessor) -> PostProcessorContext:
        """Append a post-processor.

        Args:
            post_processor: Callable taking (view, view_name).

        Returns:
            Self for method chaining.
        """
        with self._lock:
            self._post_processors.append(post_processor)
        return self

    def initialize(self, view: Any, view_name: str) -> Any:
        """Initialize a view and run it through the post-processors.

        Calls the view's ``after_properties_set()`` first when it has one,
        so a view without a URL is rejected here.

        Args:
            view: The freshly created view.
            view_name: The view name the view was created for.

        Returns:
            Result of the last post-processor, or the view itself.
        """
        with self._lock:
            post_processors = list(self._post_processors)

        after_properties_set = getattr(view, "after_properties_set", None)
        if callable(after_properties_set):
            after_properties_set()

        result = view
        for post_processor in post_processors:
            result = post_processor(result, view_name)
        log_debug(
            f"Initialized view '{view_name}' with {len(post_processors)} post-processors"
        )
        return result

    def __len__(self) -> int:
        return len(self._post_processors)


__all__ = [
    "InitializationContext",
    "PostProcessor",
    "PostProcessorContext",
]
