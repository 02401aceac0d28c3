"""
Node model for tagattrs.

A small tree of markup nodes. Only Tag nodes carry attribute and data maps;
Document, Text and Comment nodes exist so that traversal and text content
behave like a real document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union


class NodeType(str, Enum):
    """Kinds of nodes in a tree."""

    DOCUMENT = "document"
    TAG = "tag"
    TEXT = "text"
    COMMENT = "comment"


class Off(Enum):
    """Explicit absence of a boolean attribute.

    A removed boolean attribute keeps its key with this value, so
    ``"checked" in tag.attributes`` stays true while the attribute is off.
    """

    OFF = "off"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "OFF"


OFF = Off.OFF

AttributeValue = Union[str, Off]


@dataclass(eq=False)
class Node:
    """Base node. Identity semantics; nodes are shared, never copied."""

    parent: Optional["Node"] = field(default=None, repr=False)

    type = NodeType.DOCUMENT

    @property
    def root(self) -> "Node":
        """Topmost ancestor (the Document for loaded trees)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_tag(self) -> bool:
        return self.type is NodeType.TAG


@dataclass(eq=False)
class Text(Node):
    content: str = ""

    type = NodeType.TEXT


@dataclass(eq=False)
class Comment(Node):
    content: str = ""

    type = NodeType.COMMENT


@dataclass(eq=False)
class ParentNode(Node):
    children: list[Node] = field(default_factory=list, repr=False)

    def append(self, child: Node) -> Node:
        """Attach a child node at the end and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self) -> Iterator[Node]:
        """Depth-first pre-order walk, excluding self."""
        for child in self.children:
            yield child
            if isinstance(child, ParentNode):
                yield from child.iter_descendants()

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant Text nodes."""
        return "".join(
            node.content for node in self.iter_descendants() if isinstance(node, Text)
        )

    def replace_text(self, value: str) -> None:
        """Drop all children and leave a single Text node."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.append(Text(content=value))


@dataclass(eq=False)
class Document(ParentNode):
    type = NodeType.DOCUMENT


@dataclass(eq=False)
class Tag(ParentNode):
    """Element node.

    ``attributes`` and ``data`` hold encoded strings (``attributes`` may also
    hold ``OFF``). Both maps are created empty with the node.
    """

    name: str = ""
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    data: dict[str, str] = field(default_factory=dict)

    type = NodeType.TAG

    def __repr__(self) -> str:
        attrs = " ".join(
            f'{k}="{v}"' for k, v in list(self.attributes.items())[:3] if v is not OFF
        )
        if attrs:
            return f"<Tag <{self.name} {attrs}>>"
        return f"<Tag <{self.name}>>"


def is_tag(node: Optional[Node]) -> bool:
    """True for Tag nodes, False for anything else including None."""
    return node is not None and node.type is NodeType.TAG


__all__ = [
    "AttributeValue",
    "Comment",
    "Document",
    "Node",
    "ParentNode",
    "NodeType",
    "OFF",
    "Off",
    "Tag",
    "Text",
    "is_tag",
]
