"""View descriptors produced by view resolution.

- View: renderable view (abstract)
- UrlBasedView: view backed by a URL, with an async existence probe
- RedirectView: redirect to the target of a "redirect:" view name
- FileTemplateView: template read from the filesystem
- HttpTemplateView: template fetched over HTTP
- ViewWrapper: base for decorated views
"""

from __future__ import annotations

from .base import DEFAULT_CHARSET, DEFAULT_MEDIA_TYPES, UrlBasedView, View
from .file import FileTemplateView
from .http import HttpTemplateView
from .redirect import SEE_OTHER, RedirectView
from .wrapper import ViewWrapper

__all__ = [
    # Base classes
    "View",
    "UrlBasedView",
    "DEFAULT_MEDIA_TYPES",
    "DEFAULT_CHARSET",
    # Concrete views
    "RedirectView",
    "SEE_OTHER",
    "FileTemplateView",
    "HttpTemplateView",
    # Decoration
    "ViewWrapper",
]
