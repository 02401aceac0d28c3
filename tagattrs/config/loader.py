"""
Configuration file loader for tagattrs.

This module provides functions to load configuration from JSON, YAML and
TOML files, merged with environment variables and programmatic overrides.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import TagattrsConfig


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If file format is not supported or file not found
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    elif suffix in (".yaml", ".yml"):
        return _load_yaml(path)
    elif suffix == ".toml":
        return _load_toml(path)
    else:
        raise ConfigurationError(f"Unsupported configuration format: {suffix}")


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find a configuration file in the search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to the first configuration file found, or None
    """
    search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
    extensions = extensions or DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs take precedence over earlier ones.
    """
    result: dict[str, Any] = {}

    for config in configs:
        _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = True,
    search_paths: Optional[list[str]] = None,
) -> TagattrsConfig:
    """Load configuration from all sources.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file (explicit, or the first one found)
    4. Default values

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables
        auto_find: Whether to search for a config file when none is given
        search_paths: Directories to search for config files

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If a source cannot be read or fails validation
    """
    configs = []

    config_path: Optional[Union[str, Path]] = config_file
    if config_path is None and auto_find:
        config_path = find_config_file(search_paths=search_paths)

    if config_path is not None:
        configs.append(load_file(config_path))

    if load_env:
        configs.append(load_env_config())

    if overrides:
        configs.append(overrides)

    merged = merge_configs(*configs) if configs else {}

    try:
        return TagattrsConfig.from_dict(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
