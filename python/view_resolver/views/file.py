"""Filesystem-backed template view.

The view URL is a filesystem path, resolved against ``base_dir`` when
relative. Both the existence probe and template loading run in a worker
thread so the event loop is never blocked on disk access.

Example:
    >>> view = FileTemplateView(base_dir="templates")
    >>> view.url = "home.html"
    >>> await view.check_resource_exists("en")
    True
"""

from __future__ import annotations

import asyncio
import stat
from collections.abc import Mapping
from pathlib import Path
from string import Template
from typing import Any

from ..logging import log_trace
from ..types import RenderResult
from .base import UrlBasedView


def _is_regular_file(path: Path) -> bool:
    # Missing paths are absent; any other OSError is a probe failure.
    try:
        st = path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return stat.S_ISREG(st.st_mode)


class FileTemplateView(UrlBasedView):
    """Template view loaded from the local filesystem.

    Templates use ``$name`` placeholders; unknown placeholders are left
    in place.

    Attributes:
        base_dir: Directory relative URLs are resolved against, or None
            for the current working directory.
    """

    def __init__(self, url: str | None = None, base_dir: str | Path | None = None) -> None:
        super().__init__(url)
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resource_path(self) -> Path:
        """Filesystem path of the backing template."""
        path = Path(self.url or "")
        if self.base_dir is not None and not path.is_absolute():
            return self.base_dir / path
        return path

    async def check_resource_exists(self, locale: str | None) -> bool:
        path = self.resource_path()
        exists = await asyncio.to_thread(_is_regular_file, path)
        log_trace("Probed template file", {"url": self.url, "path": path, "exists": exists})
        return exists

    async def render(
        self,
        model: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> RenderResult:
        text = await asyncio.to_thread(
            self.resource_path().read_text, encoding=self.default_charset
        )
        body = Template(text).safe_substitute(self.merged_model(model, locale))
        return RenderResult(
            media_type=self.supported_media_types[0] if self.supported_media_types else None,
            charset=self.default_charset,
            body=body,
        )


__all__ = ["FileTemplateView"]
