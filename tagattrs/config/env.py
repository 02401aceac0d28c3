"""
Environment variable support for tagattrs configuration.

This module provides functions to load configuration values from environment
variables with support for type conversion and nested keys.
"""

import os
from typing import Any, Optional, TypeVar, Union, get_args, get_origin

from .defaults import ENV_PREFIX

T = TypeVar("T")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "parse.xml_mode")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "TAGATTRS_PARSE_XML_MODE")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean.

    Args:
        value: String value

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def parse_value(value: str, target_type: Any) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type

    Returns:
        Parsed value
    """
    origin = get_origin(target_type)

    if origin is Union:
        # Handle Optional types
        args = get_args(target_type)
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[Any] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, str]]:
    """Get configuration value from environment variable.

    Args:
        key: Configuration key (e.g., "parse.xml_mode")
        default: Default value if not set
        target_type: Target type for parsing
        prefix: Environment variable prefix

    Returns:
        Parsed value or default
    """
    env_key = get_env_key(key, prefix)
    value = os.environ.get(env_key)

    if value is None:
        return default

    if target_type is not None:
        return parse_value(value, target_type)

    # Infer type from default
    if default is not None:
        return parse_value(value, type(default))

    return value


def get_env_bool(key: str, default: bool = False, prefix: str = ENV_PREFIX) -> bool:
    """Get boolean value from environment variable.

    Args:
        key: Configuration key
        default: Default value
        prefix: Environment variable prefix

    Returns:
        Boolean value
    """
    result = get_env(key, default, bool, prefix)
    return result if isinstance(result, bool) else default


# Predefined environment variable mappings
ENV_MAPPINGS = {
    "parse.xml_mode": ("TAGATTRS_PARSE_XML_MODE", bool),
    "parse.lower_case_tags": ("TAGATTRS_PARSE_LOWER_CASE_TAGS", bool),
    "parse.keep_comments": ("TAGATTRS_PARSE_KEEP_COMMENTS", bool),
    "parse.encoding": ("TAGATTRS_PARSE_ENCODING", Optional[str]),
}


def load_env_config() -> dict[str, Any]:
    """Load configuration from predefined environment variables.

    Returns:
        Nested dictionary of configuration values
    """
    result: dict[str, Any] = {"parse": {}}

    for key, (env_var, target_type) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is not None:
            section, option = key.split(".", 1)
            result[section][option] = parse_value(value, target_type)

    return result
