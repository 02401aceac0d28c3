"""
CSS selector matching for tagattrs node trees.

Selectors are compiled with cssselect (through lxml.cssselect) and evaluated
against an lxml mirror of the node tree. The mirror is rebuilt per query so
it always reflects the current attribute state: switched-off boolean
attributes are left out and values are decoded.
"""

from __future__ import annotations

import functools
import logging
from typing import Iterable, Optional

from lxml import etree
from lxml.cssselect import CSSSelector
from lxml.etree import _Element

from tagattrs.codec import decode
from tagattrs.config.defaults import DEFAULT_SELECTOR_CACHE_SIZE
from tagattrs.nodes import OFF, Node, ParentNode, Tag, Text

logger = logging.getLogger(__name__)

# Synthetic element standing in for the tree root
MIRROR_ROOT_TAG = "tagattrs-root"
_PLACEHOLDER_TAG = "tagattrs-unknown"


@functools.lru_cache(maxsize=DEFAULT_SELECTOR_CACHE_SIZE)
def compile_selector(query: str, translator: str = "html") -> CSSSelector:
    """Compile (and cache) a CSS selector.

    Raises:
        cssselect.SelectorError: If the selector cannot be parsed.
    """
    return CSSSelector(query, translator=translator)


def quote(value: str) -> str:
    """Quote a string for use inside an attribute selector."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class TreeMirror:
    """lxml copy of a node tree, mapping elements back to their nodes."""

    def __init__(self, root: Node) -> None:
        self.root = root
        self._nodes: dict[_Element, Node] = {}
        self._elements: dict[Node, _Element] = {}
        self.element = etree.Element(MIRROR_ROOT_TAG)
        self._elements[root] = self.element
        if isinstance(root, Tag):
            self._build_tag(root, self.element)
        elif isinstance(root, ParentNode):
            self._build_children(root, self.element)

    def _build_tag(self, tag: Tag, parent: _Element) -> _Element:
        try:
            element = etree.SubElement(parent, tag.name)
        except ValueError:
            logger.debug(f"Tag name not usable in selectors: {tag.name!r}")
            element = etree.SubElement(parent, _PLACEHOLDER_TAG)

        for name, value in tag.attributes.items():
            if value is OFF:
                continue
            try:
                element.set(name, decode(value))
            except ValueError as e:
                logger.debug(f"Skipping attribute {name!r} in mirror: {e}")

        self._nodes[element] = tag
        self._elements[tag] = element
        self._build_children(tag, element)
        return element

    def _build_children(self, container: ParentNode, parent: _Element) -> None:
        last: Optional[_Element] = None
        for child in container.children:
            if isinstance(child, Tag):
                last = self._build_tag(child, parent)
            elif isinstance(child, Text):
                try:
                    if last is None:
                        parent.text = (parent.text or "") + child.content
                    else:
                        last.tail = (last.tail or "") + child.content
                except ValueError as e:
                    logger.debug(f"Skipping text in mirror: {e}")

    def element_for(self, node: Node) -> Optional[_Element]:
        return self._elements.get(node)

    def select(self, query: str, context: Node, translator: str = "html") -> list[Node]:
        """Descendants of ``context`` matching ``query``, in document order."""
        element = self.element_for(context)
        if element is None:
            return []
        selector = compile_selector(query, translator)
        return [
            self._nodes[match]
            for match in selector(element)
            if match is not element and match in self._nodes
        ]

    def matching(self, query: str, translator: str = "html") -> set[Node]:
        """Every node of the tree matching ``query``."""
        selector = compile_selector(query, translator)
        return {self._nodes[match] for match in selector(self.element) if match in self._nodes}


def mirrors_for(nodes: Iterable[Node]) -> dict[Node, TreeMirror]:
    """One mirror per distinct tree root among ``nodes``."""
    mirrors: dict[Node, TreeMirror] = {}
    for node in nodes:
        root = node.root
        if root not in mirrors:
            mirrors[root] = TreeMirror(root)
    return mirrors


__all__ = [
    "MIRROR_ROOT_TAG",
    "TreeMirror",
    "compile_selector",
    "mirrors_for",
    "quote",
]
