"""pytest configuration and fixtures for view_resolver tests.

This module provides shared fixtures for testing view resolution,
including in-memory views with scripted existence probes, an
EventBridge, and a template directory on disk.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from view_resolver import RenderResult, UrlBasedView

if TYPE_CHECKING:
    from view_resolver import EventBridge


class StubView(UrlBasedView):
    """URL-based view whose probe result is scripted per class.

    Class Attributes:
        existing_urls: URLs the probe reports as present, or None for all.
        probe_error: Exception raised by the probe instead of answering.
        probes: (url, locale) pairs probed so far.
        instances: Number of views constructed so far.
    """

    existing_urls: set[str] | None = None
    probe_error: Exception | None = None
    probes: list[tuple[str | None, str | None]] = []
    instances = 0

    def __init__(self) -> None:
        super().__init__()
        StubView.instances += 1

    @classmethod
    def reset(cls) -> None:
        cls.existing_urls = None
        cls.probe_error = None
        cls.probes = []
        cls.instances = 0

    async def check_resource_exists(self, locale: str | None) -> bool:
        StubView.probes.append((self.url, locale))
        if StubView.probe_error is not None:
            raise StubView.probe_error
        if StubView.existing_urls is None:
            return True
        return self.url in StubView.existing_urls

    async def render(self, model: Any = None, locale: str | None = None) -> RenderResult:
        return RenderResult(body=f"{self.url}:{dict(model or {})}")


@pytest.fixture
def stub_view_class() -> Generator[type[StubView], None, None]:
    """Provide StubView with fresh class state for each test."""
    StubView.reset()
    yield StubView
    StubView.reset()


@pytest.fixture
def event_bridge() -> Generator[EventBridge, None, None]:
    """Provide a fresh EventBridge for each test.

    The bridge is automatically started and cleaned up after the test.
    """
    from view_resolver import EventBridge

    EventBridge.reset_instance()
    bridge = EventBridge.instance()
    bridge.start()
    yield bridge
    bridge.stop()
    EventBridge.reset_instance()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Provide a directory holding a couple of templates."""
    templates = tmp_path / "templates"
    (templates / "admin").mkdir(parents=True)
    (templates / "home.html").write_text("<h1>Hello $user</h1>", encoding="utf-8")
    (templates / "admin" / "users.html").write_text("<ul>$users</ul>", encoding="utf-8")
    return templates


# Markers for test categorization
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow running",
    )
