"""
Configuration options classes for tagattrs.

This module provides strongly-typed option classes for parsing and selector
matching with validation and type checking.
"""

import codecs
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_ENCODING,
    DEFAULT_KEEP_COMMENTS,
    DEFAULT_LOWER_CASE_TAGS,
    DEFAULT_XML_MODE,
)


class ParseOptions(BaseModel):
    """Options for building a node tree from markup."""

    xml_mode: bool = Field(
        DEFAULT_XML_MODE, description="Parse as XML (case-sensitive tag names)"
    )
    lower_case_tags: bool = Field(
        DEFAULT_LOWER_CASE_TAGS, description="Lowercase tag names (HTML mode only)"
    )
    keep_comments: bool = Field(
        DEFAULT_KEEP_COMMENTS, description="Keep comment nodes in the tree"
    )
    encoding: Optional[str] = Field(
        DEFAULT_ENCODING, description="Encoding used when markup is given as bytes"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: Optional[str]) -> Optional[str]:
        """Reject encodings Python does not know."""
        if v is None:
            return None
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e

    @property
    def translator(self) -> str:
        """Name of the cssselect translator matching this parse mode."""
        return "xhtml" if self.xml_mode else "html"


class TagattrsConfig(BaseModel):
    """Main configuration class."""

    parse: ParseOptions = Field(
        default_factory=ParseOptions, description="Parse options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TagattrsConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)
