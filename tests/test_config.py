"""Tests for resolver configuration and YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from view_resolver import (
    CONFIG_PATH_ENV,
    LOWEST_PRECEDENCE,
    ConfigurationError,
    FileTemplateView,
    HttpTemplateView,
    PostProcessorContext,
    RedirectView,
    ResolverConfiguration,
    ViewTypeMismatchError,
    ViewTypeRegistry,
    config_from_dict,
    find_config_file,
    load_resolver_config,
)


class TestResolverConfiguration:
    """Tests for ResolverConfiguration."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ResolverConfiguration()

        assert config.view_class is None
        assert config.prefix == ""
        assert config.suffix == ""
        assert config.view_names is None
        assert config.supported_media_types == ["text/html"]
        assert config.default_charset == "utf-8"
        assert config.request_context_attribute is None
        assert config.redirect_view_provider is RedirectView
        assert config.initialization_context is None
        assert config.order == LOWEST_PRECEDENCE

    def test_missing_view_class_fails_validation(self):
        """Test that validation requires a view class."""
        with pytest.raises(ConfigurationError, match="'view_class' is required"):
            ResolverConfiguration().validate_required()

    def test_valid_configuration_passes(self):
        ResolverConfiguration(view_class=FileTemplateView).validate_required()

    def test_incompatible_view_class_rejected(self):
        """Test the kind-mismatch check at construction time."""
        with pytest.raises(ViewTypeMismatchError, match=r"\[dict\] is not of type \[UrlBasedView\]"):
            ResolverConfiguration(view_class=dict)

    def test_incompatible_view_class_rejected_on_assignment(self):
        """Test the kind-mismatch check when assigning later."""
        config = ResolverConfiguration()

        with pytest.raises(ViewTypeMismatchError):
            config.view_class = str

        assert config.view_class is None

    def test_non_callable_view_class_rejected(self):
        with pytest.raises(ViewTypeMismatchError):
            ResolverConfiguration(view_class="FileTemplateView")

    def test_mismatch_is_a_configuration_error(self):
        assert issubclass(ViewTypeMismatchError, ConfigurationError)

    def test_none_prefix_and_suffix_become_empty(self):
        """Test that None resets prefix and suffix to empty strings."""
        config = ResolverConfiguration(prefix=None, suffix=None)
        assert config.prefix == ""
        assert config.suffix == ""

        config.prefix = "templates/"
        config.prefix = None
        assert config.prefix == ""

    def test_initialization_context_must_have_initialize(self):
        with pytest.raises(ConfigurationError, match="initialize"):
            ResolverConfiguration(initialization_context=object())

        context = PostProcessorContext()
        config = ResolverConfiguration(initialization_context=context)
        assert config.initialization_context is context


class TestConfigFromDict:
    """Tests for building a configuration from parsed data."""

    def test_full_mapping(self):
        config = config_from_dict(
            {
                "view_type": "http",
                "prefix": "https://cdn.example.com/t/",
                "suffix": ".html",
                "view_names": ["*"],
                "media_types": ["text/html", "text/plain"],
                "charset": "utf-16",
                "request_context_attribute": "rc",
                "order": 5,
            }
        )

        assert config.view_class is HttpTemplateView
        assert config.prefix == "https://cdn.example.com/t/"
        assert config.suffix == ".html"
        assert config.view_names == ["*"]
        assert config.supported_media_types == ["text/html", "text/plain"]
        assert config.default_charset == "utf-16"
        assert config.request_context_attribute == "rc"
        assert config.order == 5

    def test_custom_registry(self, stub_view_class):
        registry = ViewTypeRegistry()
        registry.register("stub", stub_view_class)

        config = config_from_dict({"view_type": "stub"}, registry)

        assert config.view_class is stub_view_class

    def test_unknown_view_type(self):
        with pytest.raises(ConfigurationError, match="Unknown view type 'velocity'"):
            config_from_dict({"view_type": "velocity"})

    def test_invalid_values(self):
        with pytest.raises(ConfigurationError, match="Invalid resolver config"):
            config_from_dict({"view_type": "file", "order": "first"})

    def test_unknown_keys_ignored(self):
        config = config_from_dict({"view_type": "file", "cache": True})
        assert config.view_class is FileTemplateView


class TestLoadResolverConfig:
    """Tests for loading configuration from YAML files."""

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "views.yaml"
        path.write_text(
            "view_type: file\n"
            "prefix: templates/\n"
            "suffix: .html\n"
            "view_names:\n"
            "  - home\n"
            "  - 'admin/*'\n"
        )

        config = load_resolver_config(path)

        assert config.view_class is FileTemplateView
        assert config.prefix == "templates/"
        assert config.suffix == ".html"
        assert config.view_names == ["home", "admin/*"]

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "views.yaml"
        path.write_text("")

        config = load_resolver_config(path)

        assert config.view_class is None

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_resolver_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "views.yaml"
        path.write_text("prefix: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_resolver_config(path)

    def test_non_mapping_document(self, tmp_path: Path):
        path = tmp_path / "views.yaml"
        path.write_text("- file\n- http\n")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_resolver_config(path)

    def test_path_from_environment(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("view_type: file\nsuffix: .tpl\n")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

        assert find_config_file() == path
        assert load_resolver_config().suffix == ".tpl"

    def test_default_location(self, tmp_path: Path, monkeypatch):
        (tmp_path / "config").mkdir()
        path = tmp_path / "config" / "views.yml"
        path.write_text("view_type: file\n")
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.chdir(tmp_path)

        assert find_config_file() == path

    def test_no_config_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.chdir(tmp_path)

        assert find_config_file() is None
        with pytest.raises(ConfigurationError, match="No resolver configuration file"):
            load_resolver_config()
