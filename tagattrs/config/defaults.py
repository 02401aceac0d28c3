"""
Default configuration values for tagattrs.

This module contains all default values used throughout the configuration system.
"""

from typing import Any

# Environment variable prefix
ENV_PREFIX = "TAGATTRS_"

# Parse defaults
DEFAULT_XML_MODE = False
DEFAULT_LOWER_CASE_TAGS = True
DEFAULT_KEEP_COMMENTS = True
DEFAULT_ENCODING = None

# Selector matching defaults
DEFAULT_SELECTOR_CACHE_SIZE = 256

# Config file discovery
DEFAULT_CONFIG_FILENAME = "tagattrs.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/tagattrs",
]


def get_default_parse_config() -> dict[str, Any]:
    """Get default parse configuration as dictionary."""
    return {
        "xml_mode": DEFAULT_XML_MODE,
        "lower_case_tags": DEFAULT_LOWER_CASE_TAGS,
        "keep_comments": DEFAULT_KEEP_COMMENTS,
        "encoding": DEFAULT_ENCODING,
    }
