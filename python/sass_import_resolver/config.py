"""Importer configuration.

Configuration is a Pydantic model with three ordered settings:

- ``paths``: search directories, tried after the per-call include paths
  and the referrer's directory (default: the current working directory)
- ``extensions``: allowed extensions in priority order
  (default: ``.scss``, ``.css``)
- ``resolvers``: strategy order (default: local, partial, tilde, node);
  unknown names are dropped

It can be built from keyword options, a YAML file, or the YAML file named
by the ``SASS_IMPORT_CONFIG`` environment variable.

Example YAML:
    paths:
      - styles
      - vendor/styles
    extensions: [scss, css]
    resolvers: [partial, local, node]
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError
from .logging import log_debug, log_warn
from .paths import normalize_extension
from .types import DEFAULT_EXTENSIONS, DEFAULT_RESOLVER_ORDER, StrategyKind

CONFIG_ENV_VAR = "SASS_IMPORT_CONFIG"


class ImporterConfig(BaseModel):
    """Validated importer configuration.

    Example:
        >>> config = ImporterConfig(extensions=["sass"], resolvers=["partial", "bogus"])
        >>> config.extensions
        ['.sass']
        >>> config.resolvers
        [<StrategyKind.PARTIAL: 'partial'>]
    """

    paths: list[str] = Field(
        default_factory=lambda: [os.getcwd()],
        description="Search directories in priority order.",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        min_length=1,
        description="Allowed file extensions in priority order.",
    )
    resolvers: list[StrategyKind] = Field(
        default_factory=lambda: list(DEFAULT_RESOLVER_ORDER),
        description="Strategy order.",
    )

    model_config = {"extra": "forbid"}

    @field_validator("paths", mode="before")
    @classmethod
    def _coerce_paths(cls, value: Any) -> Any:
        if value is None:
            return [os.getcwd()]
        if isinstance(value, (str, os.PathLike)):
            return [os.fspath(value)]
        if isinstance(value, (list, tuple)):
            return [os.fspath(v) if isinstance(v, os.PathLike) else v for v in value]
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def _coerce_extensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        if any(not ext.strip(".") for ext in value):
            raise ValueError("extensions must not be empty strings")
        return [normalize_extension(ext) for ext in value]

    @field_validator("resolvers", mode="before")
    @classmethod
    def _drop_unknown_resolvers(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value

        known = {kind.value for kind in StrategyKind}
        kept = []
        for name in value:
            raw = name.value if isinstance(name, StrategyKind) else name
            if isinstance(raw, str) and raw in known:
                kept.append(raw)
            else:
                log_debug(f"Dropping unknown resolver: {name!r}")
        return kept

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> ImporterConfig:
        """Build a configuration from keyword options.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid importer configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> ImporterConfig:
        """Load a configuration from a YAML file.

        Relative ``paths`` entries are resolved against the file's directory.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid.
        """
        config_path = Path(path)
        try:
            with config_path.open(encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        paths = data.get("paths")
        if isinstance(paths, str):
            paths = [paths]
        if isinstance(paths, list):
            base = config_path.resolve().parent
            data["paths"] = [str(base / p) if isinstance(p, str) else p for p in paths]

        log_debug(f"Loaded importer config from {config_path}")
        return cls.from_options(data)


def load_config(path: str | Path | None = None) -> ImporterConfig:
    """Load importer configuration.

    Search priority:
    1. Explicit ``path`` argument
    2. ``SASS_IMPORT_CONFIG`` environment variable
    3. Defaults

    Raises:
        ConfigurationError: If the selected file is missing or invalid.
    """
    if path is not None:
        return ImporterConfig.from_yaml(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        if not Path(env_path).is_file():
            log_warn(f"{CONFIG_ENV_VAR} does not exist: {env_path}")
            raise ConfigurationError(f"{CONFIG_ENV_VAR} points to a missing file: {env_path}")
        log_debug(f"Using {CONFIG_ENV_VAR}: {env_path}")
        return ImporterConfig.from_yaml(env_path)

    return ImporterConfig()


__all__ = ["CONFIG_ENV_VAR", "ImporterConfig", "load_config"]
