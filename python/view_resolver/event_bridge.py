"""In-process event bridge for view resolution outcomes.

This module provides the EventBridge class that wraps pyee's EventEmitter
so applications can observe resolutions without touching the resolver,
for example to count missing templates.

Example:
    >>> from view_resolver import EventBridge, EventNames
    >>>
    >>> bridge = EventBridge.instance()
    >>> bridge.start()
    >>>
    >>> def on_not_found(view_name, locale):
    ...     print(f"No template for {view_name}")
    ...
    >>> bridge.subscribe(EventNames.VIEW_NOT_FOUND, on_not_found)
    >>> resolver = UrlBasedViewResolver(config, event_bridge=bridge)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug, log_info, log_warn


class EventNames:
    """Constants for event names used in the event bridge.

    Attributes:
        VIEW_RESOLVED: Emitted when a view name resolved to a view.
        VIEW_NOT_FOUND: Emitted when the probe reported the resource absent.
        VIEW_REJECTED: Emitted when a resolver does not handle a view name.
        VIEW_PROBE_FAILED: Emitted when the existence probe raised.
    """

    VIEW_RESOLVED = "view.resolved"
    VIEW_NOT_FOUND = "view.not_found"
    VIEW_REJECTED = "view.rejected"
    VIEW_PROBE_FAILED = "view.probe_failed"


class EventBridge:
    """In-process event bus for resolution events.

    A shared instance is available through EventBridge.instance(), but
    independent bridges can be created for isolated resolvers.

    Events:
        view.resolved: (view_name, locale, view)
        view.not_found: (view_name, locale)
        view.rejected: (view_name, locale)
        view.probe_failed: (view_name, locale, exception)
    """

    _instance: EventBridge | None = None

    def __init__(self) -> None:
        """Initialize the EventBridge.

        Creates a new pyee EventEmitter and sets up the event schema.
        """
        self._emitter = EventEmitter()
        self._active = False
        self._setup_event_schema()

    @classmethod
    def instance(cls) -> EventBridge:
        """Get the shared EventBridge instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the shared instance.

        Stops the current instance if active before resetting.
        """
        if cls._instance is not None:
            cls._instance.stop()
        cls._instance = None

    def _setup_event_schema(self) -> None:
        """Define the event schema for documentation."""
        self._event_schema: dict[str, str] = {
            EventNames.VIEW_RESOLVED: "tuple[str, str | None, View]",
            EventNames.VIEW_NOT_FOUND: "tuple[str, str | None]",
            EventNames.VIEW_REJECTED: "tuple[str, str | None]",
            EventNames.VIEW_PROBE_FAILED: "tuple[str, str | None, Exception]",
        }

    def start(self) -> None:
        """Activate the event bridge.

        Events will only be published when the bridge is active.
        Calling start() multiple times is safe.
        """
        if self._active:
            return
        self._active = True
        log_info("EventBridge started")

    def stop(self) -> None:
        """Deactivate the event bridge and remove all listeners."""
        if not self._active:
            return
        self._active = False
        self._emitter.remove_all_listeners()
        log_info("EventBridge stopped")

    def subscribe(
        self,
        event: str,
        handler: Callable[..., Any],
    ) -> None:
        """Subscribe to an event.

        Args:
            event: Event name to subscribe to.
            handler: Callback invoked when the event is published.
        """
        self._emitter.on(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Subscribed to {event}: {handler_name}")

    def subscribe_once(
        self,
        event: str,
        handler: Callable[..., Any],
    ) -> None:
        """Subscribe to an event for a single invocation."""
        self._emitter.once(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Subscribed once to {event}: {handler_name}")

    def unsubscribe(
        self,
        event: str,
        handler: Callable[..., Any],
    ) -> None:
        self._emitter.remove_listener(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Unsubscribed from {event}: {handler_name}")

    def publish(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Publish an event to all subscribers.

        If the bridge is not active the event is dropped with a warning.

        Args:
            event: Event name to publish.
            *args: Positional arguments passed to handlers.
            **kwargs: Keyword arguments passed to handlers.
        """
        if not self._active:
            log_warn(f"EventBridge not active, dropping event: {event}")
            return

        log_debug(f"Publishing event: {event}")
        self._emitter.emit(event, *args, **kwargs)

    def listener_count(self, event: str) -> int:
        return len(self._emitter.listeners(event))

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._emitter.listeners(event))

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def event_schema(self) -> dict[str, str]:
        """Get the event schema documentation.

        Returns:
            Dict mapping event names to their payload types.
        """
        return self._event_schema.copy()


__all__ = ["EventBridge", "EventNames"]
