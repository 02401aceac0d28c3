"""
Attribute store for tagattrs.

Get/set/remove on a Tag's attribute map, including the boolean-attribute
off state and map (batch) assignment.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

from tagattrs.codec import decode, encode
from tagattrs.nodes import OFF, AttributeValue, Node, Tag, is_tag

if TYPE_CHECKING:
    from tagattrs.selection import Selection

logger = logging.getLogger(__name__)

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "autofocus",
        "autoplay",
        "async",
        "checked",
        "controls",
        "defer",
        "disabled",
        "hidden",
        "loop",
        "multiple",
        "open",
        "readonly",
        "required",
        "scoped",
        "selected",
    }
)

_BOOLEAN_RE = re.compile(
    r"^(?:" + "|".join(sorted(BOOLEAN_ATTRIBUTES)) + r")$", re.IGNORECASE
)

ComputeFn = Callable[[int, Optional[AttributeValue]], Any]


def is_boolean_attribute(name: str) -> bool:
    """Check whether ``name`` is one of the presence-only attributes."""
    return bool(_BOOLEAN_RE.match(name))


def get_attribute(node: Optional[Node], name: Optional[str] = None) -> Any:
    """Read one decoded attribute, or a decoded copy of the whole map.

    Args:
        node: Node to read from. Non-Tag nodes yield None.
        name: Attribute name. Omit to get every attribute.

    Returns:
        The decoded value, ``OFF`` for a removed boolean attribute, a new
        dict when no name is given, or None when absent.
    """
    if not is_tag(node):
        return None
    attributes = node.attributes  # type: ignore[union-attr]

    if not name:
        return {key: _decoded(value) for key, value in attributes.items()}

    if name in attributes:
        return _decoded(attributes[name])
    return None


def has_attribute(node: Optional[Node], name: str) -> bool:
    """True when the attribute is present and not switched off."""
    if not is_tag(node):
        return False
    value = node.attributes.get(name)  # type: ignore[union-attr]
    return value is not None and value is not OFF


def set_attribute(node: Optional[Node], name: str, value: Any) -> None:
    """Store ``encode(value)`` under ``name``; None removes the attribute."""
    if not is_tag(node):
        return
    if value is None:
        remove_attribute(node, name)
        return
    node.attributes[name] = encode(value)  # type: ignore[union-attr]


def set_attribute_map(node: Optional[Node], mapping: Mapping[str, Any]) -> None:
    """Merge ``mapping`` into the attribute map as-is.

    Values are taken as already encoded; no escaping is applied here.
    """
    if not is_tag(node):
        return
    node.attributes.update(mapping)  # type: ignore[union-attr]


def remove_attribute(node: Optional[Node], name: str) -> None:
    """Delete an attribute; boolean attributes are switched off instead."""
    if not is_tag(node):
        return
    attributes = node.attributes  # type: ignore[union-attr]
    if name not in attributes:
        return

    if is_boolean_attribute(name):
        attributes[name] = OFF
    else:
        del attributes[name]


def _decoded(value: AttributeValue) -> AttributeValue:
    if value is OFF:
        return OFF
    return decode(value)


# Assignment inputs


@dataclass(frozen=True)
class MapAssignment:
    """Merge a whole mapping (pre-encoded values)."""

    mapping: Mapping[str, Any]

    def apply(self, index: int, node: Tag) -> None:
        set_attribute_map(node, self.mapping)


@dataclass(frozen=True)
class ScalarAssignment:
    """Set one attribute to one value (None removes it)."""

    name: str
    value: Any

    def apply(self, index: int, node: Tag) -> None:
        set_attribute(node, self.name, self.value)


@dataclass(frozen=True)
class ComputedAssignment:
    """Set one attribute to ``fn(index, current_raw_value)`` per node."""

    name: str
    fn: ComputeFn

    def apply(self, index: int, node: Tag) -> None:
        current = node.attributes.get(self.name)
        set_attribute(node, self.name, self.fn(index, current))


Assignment = Union[MapAssignment, ScalarAssignment, ComputedAssignment]


def resolve_assignment(name: Union[str, Mapping[str, Any]], value: Any = None) -> Assignment:
    """Classify setter arguments once, at the call boundary."""
    if isinstance(name, Mapping):
        return MapAssignment(name)
    if callable(value):
        return ComputedAssignment(name, value)
    return ScalarAssignment(name, value)


def apply_assignment(selection: "Selection", assignment: Assignment) -> "Selection":
    """Apply an assignment to every Tag in the selection, in order."""
    for index, node in enumerate(selection):
        if not is_tag(node):
            logger.debug(f"Skipping non-tag node at {index}: {node!r}")
            continue
        assignment.apply(index, node)  # type: ignore[arg-type]
    return selection


def remove_attr(selection: "Selection", name: str) -> "Selection":
    """Remove ``name`` from every node of the selection."""
    for node in selection:
        remove_attribute(node, name)
    return selection


__all__ = [
    "Assignment",
    "BOOLEAN_ATTRIBUTES",
    "ComputedAssignment",
    "MapAssignment",
    "ScalarAssignment",
    "apply_assignment",
    "get_attribute",
    "has_attribute",
    "is_boolean_attribute",
    "remove_attr",
    "remove_attribute",
    "resolve_assignment",
    "set_attribute",
    "set_attribute_map",
]
