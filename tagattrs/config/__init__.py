"""
Configuration module for tagattrs.

This module provides:
- Strongly-typed option classes (ParseOptions, TagattrsConfig)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Validation and type checking via Pydantic

Example usage:
    from tagattrs.config import ParseOptions, load_config

    # Load from file with environment overrides
    config = load_config("tagattrs.config.yaml")

    # Create programmatically
    options = ParseOptions(xml_mode=True)

Environment variables:
    TAGATTRS_PARSE_XML_MODE=true
    TAGATTRS_PARSE_KEEP_COMMENTS=false
    TAGATTRS_PARSE_ENCODING=utf-8
"""

from .defaults import (
    DEFAULT_KEEP_COMMENTS,
    DEFAULT_LOWER_CASE_TAGS,
    DEFAULT_SELECTOR_CACHE_SIZE,
    DEFAULT_XML_MODE,
    ENV_PREFIX,
    get_default_parse_config,
)
from .env import (
    ENV_MAPPINGS,
    get_env,
    get_env_bool,
    get_env_key,
    load_env_config,
)
from .loader import (
    ConfigurationError,
    find_config_file,
    load_config,
    load_file,
    merge_configs,
)
from .options import ParseOptions, TagattrsConfig

__all__ = [
    # Configuration classes
    "TagattrsConfig",
    "ParseOptions",
    # Loader functions
    "load_config",
    "load_file",
    "find_config_file",
    "merge_configs",
    "ConfigurationError",
    # Environment functions
    "get_env",
    "get_env_bool",
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "DEFAULT_XML_MODE",
    "DEFAULT_LOWER_CASE_TAGS",
    "DEFAULT_KEEP_COMMENTS",
    "DEFAULT_SELECTOR_CACHE_SIZE",
    "get_default_parse_config",
]
