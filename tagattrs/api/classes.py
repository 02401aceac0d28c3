"""
Class list operations for tagattrs.

The ``class`` attribute is treated as an ordered list of whitespace-delimited
tokens. All operations go through the attribute store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from tagattrs.api.attributes import get_attribute, set_attribute
from tagattrs.nodes import Node, is_tag

if TYPE_CHECKING:
    from tagattrs.selection import Selection

ClassFn = Callable[..., Optional[str]]


def class_string(node: Node) -> str:
    """Decoded class attribute, or an empty string."""
    value = get_attribute(node, "class")
    return value if isinstance(value, str) else ""


def class_tokens(node: Node) -> list[str]:
    """Class tokens of a node, in attribute order."""
    return class_string(node).split()


def add_class_tokens(node: Node, tokens: list[str]) -> None:
    """Append tokens the node does not have yet, first-seen order."""
    current = class_string(node)
    if not current.strip():
        set_attribute(node, "class", " ".join(tokens).strip())
        return

    existing = current.split()
    for token in tokens:
        if token not in existing:
            existing.append(token)
    set_attribute(node, "class", " ".join(existing))


def remove_class_tokens(node: Node, tokens: list[str]) -> None:
    """Drop every occurrence of the tokens, survivors keep their order."""
    survivors = [token for token in class_tokens(node) if token not in tokens]
    set_attribute(node, "class", " ".join(survivors))


def toggle_class_tokens(node: Node, tokens: list[str], state: Optional[bool] = None) -> None:
    """Toggle (or force, when ``state`` is a bool) each token in turn."""
    current = class_tokens(node)
    forced = isinstance(state, bool)

    for token in tokens:
        present = token in current
        if state if forced else not present:
            if not present:
                current.append(token)
        elif present:
            current.remove(token)

    set_attribute(node, "class", " ".join(current))


def has_class(selection: "Selection", token: str) -> bool:
    """True if any node in the selection carries ``token``."""
    return any(is_tag(node) and token in class_tokens(node) for node in selection)


def add_class(selection: "Selection", value: Union[str, ClassFn, None]) -> "Selection":
    """Add whitespace-separated class tokens to every Tag in the selection.

    A callable is called as ``fn(index, current_class)`` for each node and its
    return value is added to that node only.
    """
    if callable(value):
        for index, node in enumerate(selection):
            if not is_tag(node):
                continue
            add_class(selection.wrap(node), value(index, class_string(node)))
        return selection

    if not value or not isinstance(value, str):
        return selection

    tokens = value.split()
    for node in selection:
        if not is_tag(node):
            continue
        add_class_tokens(node, tokens)
    return selection


def remove_class(
    selection: "Selection",
    value: Any = None,
    *,
    remove_all: Optional[bool] = None,
) -> "Selection":
    """Remove class tokens from every Tag in the selection.

    With no argument every class is removed (``class`` becomes ``""``). A
    callable is called as ``fn(index, current_class)`` per node.
    """
    if callable(value):
        for index, node in enumerate(selection):
            if not is_tag(node):
                continue
            result = value(index, class_string(node))
            remove_class(selection.wrap(node), result, remove_all=False)
        return selection

    if remove_all is None:
        remove_all = value is None
    tokens = value.split() if isinstance(value, str) else []

    for node in selection:
        if not is_tag(node):
            continue
        if remove_all:
            set_attribute(node, "class", "")
        else:
            remove_class_tokens(node, tokens)
    return selection


def toggle_class(
    selection: "Selection",
    value: Union[str, ClassFn, None],
    state: Optional[bool] = None,
) -> "Selection":
    """Toggle class tokens on every Tag in the selection.

    With ``state`` True/False each token is forced present/absent. A callable
    is called as ``fn(index, current_class, state)`` per node.
    """
    if callable(value):
        for index, node in enumerate(selection):
            if not is_tag(node):
                continue
            toggle_class(selection.wrap(node), value(index, class_string(node), state), state)
        return selection

    if not value or not isinstance(value, str):
        return selection

    tokens = value.split()
    for node in selection:
        if not is_tag(node):
            continue
        toggle_class_tokens(node, tokens, state)
    return selection


def is_(selection: "Selection", selector: Any = None) -> bool:
    """True when filtering by ``selector`` leaves at least one node."""
    if not selector:
        return False
    return len(selection.filter(selector)) > 0


__all__ = [
    "add_class",
    "add_class_tokens",
    "class_string",
    "class_tokens",
    "has_class",
    "is_",
    "remove_class",
    "remove_class_tokens",
    "toggle_class",
    "toggle_class_tokens",
]
