"""Resolver configuration.

ResolverConfiguration holds everything a URL-based view resolver needs.
It is set up once at startup, validated, and then only read; concurrent
resolutions share it without locking.

Configuration can also be loaded from a YAML file:

    # config/views.yaml
    view_type: file
    prefix: templates/
    suffix: .html
    view_names: ["*"]
    media_types: [text/html]
    charset: utf-8
    request_context_attribute: rc
    order: 10

Example:
    >>> config = load_resolver_config(Path("config/views.yaml"))
    >>> config.validate_required()
    >>> resolver = UrlBasedViewResolver(config)
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError, ViewTypeMismatchError
from .logging import log_debug, log_info, log_warn
from .views import DEFAULT_CHARSET, DEFAULT_MEDIA_TYPES, RedirectView, UrlBasedView

if TYPE_CHECKING:
    from .factory import ViewTypeRegistry

# Order of a resolver that should be tried last
LOWEST_PRECEDENCE = 2**31 - 1

CONFIG_PATH_ENV = "VIEW_RESOLVER_CONFIG"

# Default locations searched when no path is given
DEFAULT_CONFIG_PATHS = (
    Path("config") / "views.yaml",
    Path("config") / "views.yml",
)


class ResolverConfiguration(BaseModel):
    """Configuration of a URL-based view resolver.

    Attributes:
        view_class: UrlBasedView subclass, or zero-argument factory
            returning one, used to create views. Required.
        prefix: Prepended to view names to build URLs.
        suffix: Appended to view names to build URLs.
        view_names: Names or ``*`` patterns this resolver handles, or
            None to handle every name.
        supported_media_types: Media types set on every created view.
        default_charset: Charset set on every created view.
        request_context_attribute: Model key for the render context set
            on every created view, or None.
        redirect_view_provider: Builds the view for "redirect:" names
            from the redirect target.
        initialization_context: Post-processes every created view, or
            None for no post-processing.
        order: Position in a resolver chain (lower = tried first).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    view_class: Any = None
    prefix: str = ""
    suffix: str = ""
    view_names: list[str] | None = None
    supported_media_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MEDIA_TYPES)
    )
    default_charset: str = DEFAULT_CHARSET
    request_context_attribute: str | None = None
    redirect_view_provider: Callable[[str], Any] = RedirectView
    initialization_context: Any = None
    order: int = LOWEST_PRECEDENCE

    @field_validator("view_class")
    @classmethod
    def _check_view_class(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, type):
            if not issubclass(value, UrlBasedView):
                raise ViewTypeMismatchError(
                    f"Given view class [{value.__name__}] is not of type "
                    f"[{UrlBasedView.__name__}]"
                )
            return value
        if not callable(value):
            raise ViewTypeMismatchError(
                f"Given view class [{value!r}] is neither a class nor a factory"
            )
        return value

    @field_validator("initialization_context")
    @classmethod
    def _check_initialization_context(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "initialize", None)):
            raise ConfigurationError(
                f"Initialization context [{value!r}] has no initialize() method"
            )
        return value

    @field_validator("prefix", "suffix", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def validate_required(self) -> None:
        """Check required settings once before first use.

        Raises:
            ConfigurationError: If no view class is configured.
        """
        if self.view_class is None:
            raise ConfigurationError("Property 'view_class' is required")


def find_config_file() -> Path | None:
    """Find the resolver configuration file.

    Returns
    -------
    Path | None
        Path to the configuration file, or None if not found.

    Notes
    -----
    Search priority:
    1. VIEW_RESOLVER_CONFIG environment variable
    2. config/views.yaml, then config/views.yml, in the current directory
    """
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        path = Path(env_path)
        if path.is_file():
            log_debug(f"Using {CONFIG_PATH_ENV}: {path}")
            return path
        log_warn(f"{CONFIG_PATH_ENV} does not exist: {env_path}")

    for candidate in DEFAULT_CONFIG_PATHS:
        path = Path.cwd() / candidate
        if path.is_file():
            log_debug(f"Using resolver config: {path}")
            return path

    log_debug("No resolver configuration file found")
    return None


def load_resolver_config(
    path: Path | str | None = None,
    registry: ViewTypeRegistry | None = None,
) -> ResolverConfiguration:
    """Load a resolver configuration from a YAML file.

    Parameters
    ----------
    path : Path | str | None
        Configuration file; defaults to the result of find_config_file().
    registry : ViewTypeRegistry | None
        Registry used to look up ``view_type``; defaults to
        ViewTypeRegistry.default().

    Returns
    -------
    ResolverConfiguration
        The loaded configuration, not yet validated.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, is not a YAML mapping,
        names an unknown view type, or holds invalid values.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            raise ConfigurationError("No resolver configuration file found")
    path = Path(path)

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read resolver config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Resolver config {path} must be a mapping")

    return config_from_dict(data, registry)


def config_from_dict(
    data: dict[str, Any],
    registry: ViewTypeRegistry | None = None,
) -> ResolverConfiguration:
    """Build a configuration from parsed YAML data.

    Args:
        data: Parsed configuration mapping.
        registry: Registry used to look up ``view_type``.

    Returns:
        The configuration, not yet validated.

    Raises:
        ConfigurationError: If the view type is unknown or values are invalid.
    """
    if registry is None:
        from .factory import ViewTypeRegistry

        registry = ViewTypeRegistry.default()

    values: dict[str, Any] = {}

    view_type = data.get("view_type")
    if view_type is not None:
        view_class = registry.get(str(view_type))
        if view_class is None:
            raise ConfigurationError(
                f"Unknown view type '{view_type}', "
                f"known types: {sorted(registry.registered_types())}"
            )
        values["view_class"] = view_class

    # YAML key -> configuration field
    key_map = {
        "prefix": "prefix",
        "suffix": "suffix",
        "view_names": "view_names",
        "media_types": "supported_media_types",
        "charset": "default_charset",
        "request_context_attribute": "request_context_attribute",
        "order": "order",
    }
    for key, field_name in key_map.items():
        if key in data:
            values[field_name] = data[key]

    unknown = set(data) - set(key_map) - {"view_type"}
    if unknown:
        log_warn(f"Ignoring unknown resolver config keys: {sorted(unknown)}")

    try:
        config = ResolverConfiguration(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid resolver config: {e}") from e

    log_info(
        "Loaded resolver configuration",
        {"view_type": view_type, "prefix": config.prefix, "suffix": config.suffix},
    )
    return config


__all__ = [
    "CONFIG_PATH_ENV",
    "LOWEST_PRECEDENCE",
    "ResolverConfiguration",
    "config_from_dict",
    "find_config_file",
    "load_resolver_config",
]
