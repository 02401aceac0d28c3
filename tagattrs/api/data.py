"""
Data store for tagattrs.

Auxiliary per-node values. Values are stored encoded and coerced to
null/bool/number/JSON only when a single key is read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from tagattrs.codec import coerce, decode, encode
from tagattrs.nodes import Node, is_tag

if TYPE_CHECKING:
    from tagattrs.selection import Selection


def get_data(node: Optional[Node], name: Optional[str] = None) -> Any:
    """Read one coerced data value, or a decoded copy of the whole map.

    Args:
        node: Node to read from. Non-Tag nodes yield None.
        name: Data key. Omit to get every key (decoded, not coerced).

    Returns:
        The coerced value, a new dict, or None when the key is absent.

    Raises:
        json.JSONDecodeError: if the stored value looks like a JSON object
            or array but does not parse.
    """
    if not is_tag(node):
        return None
    data = node.data  # type: ignore[union-attr]

    if not name:
        return {key: decode(value) for key, value in data.items()}

    if name in data:
        return coerce(decode(data[name]))
    return None


def set_data(node: Optional[Node], name: str, value: Any) -> None:
    """Store ``encode(value)`` under ``name``."""
    if not is_tag(node):
        return
    node.data[name] = encode(value)  # type: ignore[union-attr]


def set_data_map(node: Optional[Node], mapping: Mapping[str, Any]) -> None:
    """Merge ``mapping`` into the data map as-is (values taken as encoded)."""
    if not is_tag(node):
        return
    node.data.update(mapping)  # type: ignore[union-attr]


def remove_data(node: Optional[Node], name: Optional[str] = None) -> None:
    """Drop one key, or every key when no name is given."""
    if not is_tag(node):
        return
    data = node.data  # type: ignore[union-attr]
    if name is None:
        data.clear()
    else:
        data.pop(name, None)


def assign_data(
    selection: "Selection",
    name: Union[str, Mapping[str, Any]],
    value: Any,
) -> "Selection":
    """Set data on every node of the selection (scalar or map form)."""
    for node in selection:
        if isinstance(name, Mapping):
            set_data_map(node, name)
        else:
            set_data(node, name, value)
    return selection


__all__ = [
    "assign_data",
    "get_data",
    "remove_data",
    "set_data",
    "set_data_map",
]
