"""
Attribute, data, class and value operations.

Each module works on plain nodes (``get_attribute(node, name)``) and on
selections (``add_class(selection, "a b")``); ``tagattrs.Selection`` exposes
the selection-level functions as chainable methods.
"""

from tagattrs.api.attributes import (
    BOOLEAN_ATTRIBUTES,
    get_attribute,
    has_attribute,
    is_boolean_attribute,
    remove_attribute,
    set_attribute,
    set_attribute_map,
)
from tagattrs.api.classes import add_class, has_class, is_, remove_class, toggle_class
from tagattrs.api.data import get_data, remove_data, set_data, set_data_map
from tagattrs.api.value import get_value, set_value

__all__ = [
    # Attribute store
    "BOOLEAN_ATTRIBUTES",
    "get_attribute",
    "has_attribute",
    "is_boolean_attribute",
    "remove_attribute",
    "set_attribute",
    "set_attribute_map",
    # Data store
    "get_data",
    "remove_data",
    "set_data",
    "set_data_map",
    # Class list
    "add_class",
    "has_class",
    "is_",
    "remove_class",
    "toggle_class",
    # Value accessor
    "get_value",
    "set_value",
]
