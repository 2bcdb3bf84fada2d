"""Pydantic models for the view resolver.

This module provides the plain data models shared across the package,
using Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LogContext(BaseModel):
    """Context fields for structured logging.

    Example:
        >>> context = LogContext(
        ...     view_name="home",
        ...     locale="en_US",
        ...     operation="resolve_view_name"
        ... )
        >>> log_debug("Resolving view", context)
    """

    view_name: str | None = Field(
        default=None,
        description="Symbolic view name being resolved.",
    )
    locale: str | None = Field(
        default=None,
        description="Locale the view is resolved for.",
    )
    resolver: str | None = Field(
        default=None,
        description="Name of the resolver handling the view.",
    )
    url: str | None = Field(
        default=None,
        description="Backing URL of the constructed view.",
    )
    operation: str | None = Field(
        default=None,
        description="Current operation name.",
    )


class RenderResult(BaseModel):
    """Output of rendering a view.

    Example:
        >>> result = RenderResult(body="<h1>Hello</h1>")
        >>> result.status_code
        200
    """

    status_code: int = Field(
        default=200,
        description="HTTP status code to respond with.",
    )
    media_type: str | None = Field(
        default=None,
        description="Media type of the rendered body.",
    )
    charset: str | None = Field(
        default=None,
        description="Character set of the rendered body.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional response headers.",
    )
    body: str = Field(
        default="",
        description="Rendered body text.",
    )

    @property
    def content_type(self) -> str | None:
        """Combined Content-Type header value, or None without a media type."""
        if self.media_type is None:
            return None
        if self.charset:
            return f"{self.media_type};charset={self.charset}"
        return self.media_type


__all__ = [
    "LogContext",
    "RenderResult",
]
