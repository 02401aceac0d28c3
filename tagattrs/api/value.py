"""
Value accessor for tagattrs.

Reads and writes the "current value" of form-control-like elements. The
behaviour is picked from the first selected node's tag name on every call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from tagattrs.api.attributes import get_attribute, has_attribute
from tagattrs.codec import stringify
from tagattrs.nodes import Node
from tagattrs.selectors import quote

if TYPE_CHECKING:
    from tagattrs.selection import Selection

logger = logging.getLogger(__name__)

# Scalar values a select accepts; lists are for multiple selects only
SCALAR_VALUES = (str, int, float)


def _tag_name(node: Node) -> Optional[str]:
    return getattr(node, "name", None)


def _is_radio(node: Node) -> bool:
    input_type = get_attribute(node, "type")
    return isinstance(input_type, str) and input_type.lower() == "radio"


def _radio_scope(selection: "Selection") -> "Selection":
    """Enclosing form of the radio, or the document root when there is none."""
    form = selection.closest("form")
    if len(form) > 0:
        return form

    ancestors = selection.parents()
    anchor = ancestors[-1] if len(ancestors) else selection[0]
    return selection.wrap(anchor.root)


def _radio_group(selection: "Selection") -> "Selection":
    """Radio inputs sharing the first node's ``name`` within its scope.

    The ``type`` check is case-insensitive, so it runs on the nodes rather
    than in the selector.
    """
    name = get_attribute(selection[0], "name")
    group = name if isinstance(name, str) else ""
    members = _radio_scope(selection).find(f"input[name={quote(group)}]")
    return members.filter(lambda index, node: _is_radio(node))


def _radio_value(selection: "Selection") -> Any:
    checked = _radio_group(selection).filter(
        lambda index, node: has_attribute(node, "checked")
    )
    return checked.attr("value")


def _check_radio(selection: "Selection", new_value: Any) -> "Selection":
    group = _radio_group(selection)
    wanted = stringify(new_value)

    group.filter(lambda index, node: has_attribute(node, "checked")).remove_attr("checked")
    group.filter(lambda index, node: get_attribute(node, "value") == wanted).attr("checked", "")
    return selection


def _selected_options(selection: "Selection", multiple: bool) -> "Selection":
    """Selected options of the first select.

    A single select with no selected option reports its first option, the
    way browsers display it, rather than no value.
    """
    select = selection.first()
    options = select.find("option")
    selected = options.filter(lambda index, node: has_attribute(node, "selected"))
    if len(selected) == 0 and not multiple:
        return options.first()
    return selected


def _select_options(selection: "Selection", new_value: Any, multiple: bool) -> "Selection":
    if isinstance(new_value, (list, tuple)) and multiple:
        values = list(new_value)
    elif isinstance(new_value, SCALAR_VALUES):
        values = [new_value]
    else:
        logger.debug(f"Ignoring {type(new_value).__name__} value for a select")
        return selection

    wanted = {stringify(item) for item in values}
    options = selection.find("option")
    options.remove_attr("selected")
    options.filter(lambda index, node: get_attribute(node, "value") in wanted).attr("selected", "")
    return selection


def get_value(selection: "Selection") -> Any:
    """Current value of the first node in the selection.

    Returns:
        Text content for textarea, the ``value`` attribute for input and
        option, the checked group member's value for radio inputs, the
        selected option value (or list of values for ``multiple``) for
        select, and None for anything else or an empty selection.
    """
    if len(selection) == 0:
        return None
    element = selection[0]
    name = _tag_name(element)

    if name == "textarea":
        return selection.text()

    if name == "input":
        if _is_radio(element):
            return _radio_value(selection)
        return get_attribute(element, "value")

    if name == "select":
        multiple = has_attribute(element, "multiple")
        selected = _selected_options(selection, multiple)
        if multiple:
            return [get_attribute(option, "value") for option in selected]
        return get_attribute(selected[0], "value") if len(selected) else None

    if name == "option":
        return get_attribute(element, "value")

    return None


def set_value(selection: "Selection", new_value: Any) -> Optional["Selection"]:
    """Set the current value; dispatch follows the first node's tag name.

    Returns:
        The selection, unchanged when the value does not apply (for example
        a list given to a single select). None for an empty selection.
    """
    if len(selection) == 0:
        return None
    element = selection[0]
    name = _tag_name(element)

    if name == "textarea":
        return selection.text(new_value)

    if name == "input":
        if _is_radio(element):
            return _check_radio(selection, new_value)
        return selection.attr("value", new_value)

    if name == "select":
        return _select_options(selection, new_value, has_attribute(element, "multiple"))

    if name == "option":
        return selection.attr("value", new_value)

    logger.debug(f"No value semantics for <{name}>")
    return selection


__all__ = ["get_value", "set_value"]
