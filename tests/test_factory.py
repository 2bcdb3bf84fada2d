"""Tests for view construction and the view type registry."""

from __future__ import annotations

import pytest

from view_resolver import (
    FileTemplateView,
    HttpTemplateView,
    RedirectView,
    ResolverConfiguration,
    ResourceViewFactory,
    ViewInstantiationError,
    ViewTypeRegistry,
)


class TestResourceViewFactory:
    """Tests for ResourceViewFactory."""

    def test_url_is_prefix_name_suffix(self, stub_view_class):
        """Test URL synthesis from prefix, name and suffix."""
        factory = ResourceViewFactory(
            ResolverConfiguration(view_class=stub_view_class, prefix="templates/", suffix=".ftl")
        )

        view = factory.create_view("test")

        assert view.url == "templates/test.ftl"

    def test_url_is_not_normalized(self, stub_view_class):
        """Test that names are concatenated verbatim."""
        factory = ResourceViewFactory(
            ResolverConfiguration(view_class=stub_view_class, prefix="templates/", suffix=".html")
        )

        view = factory.create_view("../secret")

        assert view.url == "templates/../secret.html"

    def test_shared_rendering_configuration_copied(self, stub_view_class):
        """Test that media types and charset land on every view."""
        config = ResolverConfiguration(
            view_class=stub_view_class,
            supported_media_types=["text/plain", "text/html"],
            default_charset="iso-8859-1",
        )
        factory = ResourceViewFactory(config)

        first = factory.create_view("a")
        second = factory.create_view("b")

        assert first.supported_media_types == ["text/plain", "text/html"]
        assert first.default_charset == "iso-8859-1"
        assert second.supported_media_types == ["text/plain", "text/html"]

        # Views get their own copy of the list
        first.supported_media_types.append("application/json")
        assert config.supported_media_types == ["text/plain", "text/html"]

    def test_request_context_attribute_copied_when_set(self, stub_view_class):
        """Test the request context attribute is copied only when set."""
        with_attr = ResourceViewFactory(
            ResolverConfiguration(view_class=stub_view_class, request_context_attribute="rc")
        )
        without_attr = ResourceViewFactory(ResolverConfiguration(view_class=stub_view_class))

        assert with_attr.create_view("home").request_context_attribute == "rc"
        assert without_attr.create_view("home").request_context_attribute is None

    def test_no_probe_during_construction(self, stub_view_class):
        """Test that creating a view does not check existence."""
        factory = ResourceViewFactory(ResolverConfiguration(view_class=stub_view_class))

        factory.create_view("home")

        assert stub_view_class.probes == []

    def test_each_call_builds_a_new_view(self, stub_view_class):
        factory = ResourceViewFactory(ResolverConfiguration(view_class=stub_view_class))

        assert factory.create_view("home") is not factory.create_view("home")
        assert stub_view_class.instances == 2

    def test_factory_function_view_class(self, tmp_path):
        """Test a zero-argument factory in place of a class."""
        factory = ResourceViewFactory(
            ResolverConfiguration(view_class=lambda: FileTemplateView(base_dir=tmp_path))
        )

        view = factory.create_view("home.html")

        assert isinstance(view, FileTemplateView)
        assert view.resource_path() == tmp_path / "home.html"

    def test_constructor_failure_raises_instantiation_error(self):
        """Test that a class without a no-argument path fails at creation."""

        class NeedsArgs(FileTemplateView):
            def __init__(self, required):
                super().__init__()

        factory = ResourceViewFactory(ResolverConfiguration(view_class=NeedsArgs))

        with pytest.raises(ViewInstantiationError, match="NeedsArgs"):
            factory.create_view("home")

    def test_factory_returning_wrong_type_raises(self):
        """Test that a factory returning a non-view fails at creation."""
        factory = ResourceViewFactory(ResolverConfiguration(view_class=lambda: object()))

        with pytest.raises(ViewInstantiationError, match="not a UrlBasedView"):
            factory.create_view("home")

    def test_missing_view_class_raises(self):
        factory = ResourceViewFactory(ResolverConfiguration())

        with pytest.raises(ViewInstantiationError, match="No view class"):
            factory.instantiate_view()


class TestViewTypeRegistry:
    """Tests for ViewTypeRegistry."""

    def test_default_types(self):
        registry = ViewTypeRegistry.default()

        assert registry.get("file") is FileTemplateView
        assert registry.get("http") is HttpTemplateView
        assert registry.get("redirect") is RedirectView
        assert sorted(registry.registered_types()) == ["file", "http", "redirect"]

    def test_register_and_unregister(self, stub_view_class):
        registry = ViewTypeRegistry()
        registry.register("stub", stub_view_class)

        assert "stub" in registry
        assert registry.get("stub") is stub_view_class
        assert registry.unregister("stub") is True
        assert registry.unregister("stub") is False
        assert registry.get("stub") is None

    def test_register_rejects_non_callable(self):
        registry = ViewTypeRegistry()

        with pytest.raises(TypeError):
            registry.register("bad", "not a class")
