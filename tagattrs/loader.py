"""
Tree construction for tagattrs.

Parses markup with lxml and converts the result into tagattrs nodes.
Attribute values are stored in encoded form, as every stored value is.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from lxml import etree, html
from lxml.etree import _Element

from tagattrs.codec import encode
from tagattrs.config.options import ParseOptions
from tagattrs.nodes import Comment, Document, ParentNode, Tag, Text

logger = logging.getLogger(__name__)

# Markup that is a whole document rather than a fragment
_DOCUMENT_RE = re.compile(r"^\s*(?:<!--.*?-->\s*)*(?:<!doctype|<html)", re.IGNORECASE | re.DOTALL)

Markup = Union[str, bytes]


def _as_text(markup: Markup, options: ParseOptions) -> str:
    if isinstance(markup, bytes):
        return markup.decode(options.encoding or "utf-8")
    return markup


def _local_name(name: str) -> str:
    """Strip an lxml "{namespace}" prefix."""
    return name.rsplit("}", 1)[-1]


def _tag_name(element: _Element, options: ParseOptions) -> str:
    name = _local_name(element.tag)
    if options.lower_case_tags and not options.xml_mode:
        return name.lower()
    return name


def _append_text(parent: ParentNode, content: Optional[str]) -> None:
    if content:
        parent.append(Text(content=content))


def _convert(element: _Element, parent: ParentNode, options: ParseOptions) -> None:
    """Append ``element`` (and its tail text) to ``parent`` as nodes."""
    if element.tag is etree.Comment:
        if options.keep_comments:
            parent.append(Comment(content=element.text or ""))
    elif isinstance(element.tag, str):
        tag = Tag(
            name=_tag_name(element, options),
            attributes={
                _local_name(name): encode(value)
                for name, value in element.attrib.items()
            },
        )
        parent.append(tag)
        _append_text(tag, element.text)
        for child in element:
            _convert(child, tag, options)
    else:
        logger.debug(f"Skipping unsupported node: {element!r}")

    _append_text(parent, element.tail)


def parse_document(markup: Markup, options: Optional[ParseOptions] = None) -> Document:
    """Parse markup into a Document node.

    Whole HTML documents keep their ``html`` root; fragments become the
    top-level children of the Document. In XML mode a recovering XML parser
    is used and tag name case is preserved.

    Args:
        markup: Markup as text, or bytes decoded with ``options.encoding``.
        options: Parse options; defaults apply when omitted.

    Returns:
        The new Document.
    """
    options = options or ParseOptions()
    document = Document()
    text = _as_text(markup, options)

    if options.xml_mode:
        parser = etree.XMLParser(recover=True, remove_comments=not options.keep_comments)
        root = etree.fromstring(text.encode("utf-8"), parser=parser) if text.strip() else None
        if root is not None:
            _convert(root, document, options)
        logger.debug(f"Parsed XML document with {len(document.children)} top-level nodes")
        return document

    if _DOCUMENT_RE.match(text):
        _convert(html.document_fromstring(text), document, options)
        return document

    for item in html.fragments_fromstring(text) if text.strip() else []:
        if isinstance(item, str):
            _append_text(document, item)
        else:
            _convert(item, document, options)
    logger.debug(f"Parsed fragment with {len(document.children)} top-level nodes")
    return document


__all__ = ["parse_document"]
