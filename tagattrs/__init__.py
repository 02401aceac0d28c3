"""
tagattrs: attribute, class, data and form-value manipulation for markup trees.

Basic usage:
    import tagattrs

    doc = tagattrs.load('<div class="a"><input name="q" value="x"></div>')
    doc.find("div").add_class("b").toggle_class("a")
    doc.find("input").val("y").attr("placeholder", "Search")
    doc.find("div").data("count", 3).data("count")  # 3

Working on single nodes:
    from tagattrs.api import get_attribute, set_attribute

    node = doc.find("input")[0]
    set_attribute(node, "disabled", "")
"""

__version__ = "0.1.0"
__license__ = "MIT"

from typing import Any, Iterable, Optional, Union

from tagattrs.config import ConfigurationError, ParseOptions, TagattrsConfig, load_config
from tagattrs.loader import Markup, parse_document
from tagattrs.nodes import OFF, Comment, Document, Node, NodeType, Off, Tag, Text
from tagattrs.selection import MISSING, Selection


def load(markup: Markup, options: Optional[ParseOptions] = None, **kwargs: Any) -> Selection:
    """Parse markup and return a selection holding its Document.

    Args:
        markup: HTML (or XML with ``xml_mode=True``) text or bytes.
        options: Parse options. When omitted they come from ``load_config()``
            (config file, then ``TAGATTRS_*`` environment), with keyword
            arguments applied on top.

    Returns:
        Selection over the new Document node.

    Raises:
        ConfigurationError: If the configuration sources are invalid.
    """
    if options is None:
        options = load_config(overrides={"parse": kwargs} if kwargs else None).parse
    return Selection(parse_document(markup, options), options=options)


def wrap(
    nodes: Union[Node, Iterable[Node], None],
    options: Optional[ParseOptions] = None,
) -> Selection:
    """Create a selection over existing nodes."""
    return Selection(nodes, options=options)


__all__ = [
    # Entry points
    "load",
    "wrap",
    "Selection",
    "MISSING",
    # Nodes
    "Node",
    "NodeType",
    "Document",
    "Tag",
    "Text",
    "Comment",
    "OFF",
    "Off",
    # Configuration
    "ParseOptions",
    "TagattrsConfig",
    "ConfigurationError",
    "load_config",
]
